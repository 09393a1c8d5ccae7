"""
Identifier generators for tools, claims and warranty cards.
"""

import random
import string
import time
from datetime import date
from typing import Optional

from toolvault.registry import get_brand


_BASE36 = string.digits + string.ascii_lowercase


def generate_tool_id() -> str:
    """Unique tool id: ``tool-<epoch ms>-<5 base36 chars>``."""
    suffix = "".join(random.choice(_BASE36) for _ in range(5))
    return f"tool-{int(time.time() * 1000)}-{suffix}"


def generate_claim_reference(today: Optional[date] = None) -> str:
    """Human-readable claim reference: ``TV-<year>-<4 digits>``."""
    year = (today or date.today()).year
    return f"TV-{year}-{random.randint(1000, 9999)}"


def generate_warranty_card_number(brand_id: Optional[str], today: Optional[date] = None) -> str:
    """Placeholder card number for an uploaded warranty card, e.g. ``MI-2025-482913``."""
    brand = get_brand(brand_id)
    prefix = brand.name[:2].upper() if brand else "TV"
    year = (today or date.today()).year
    return f"{prefix}-{year}-{random.randint(100000, 999999)}"
