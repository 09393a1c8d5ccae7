"""
Formatting and parsing helpers for Australian dates and currency.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union


def format_currency(cents: int) -> str:
    """Format a cent amount as AUD, e.g. 109900 → "$1,099.00"."""
    amount = Decimal(cents or 0) / 100
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: Union[date, datetime, str]) -> str:
    """Format a date (or ISO string) as DD/MM/YYYY."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.strftime("%d/%m/%Y")


def parse_au_date(value: str) -> Optional[date]:
    """Parse a DD/MM/YYYY string. Returns None when it does not parse."""
    try:
        return datetime.strptime((value or "").strip(), "%d/%m/%Y").date()
    except ValueError:
        return None


def parse_purchase_date(value: str, today: Optional[date] = None) -> date:
    """Purchase date from the form, falling back to today when blank or invalid."""
    return parse_au_date(value) or today or date.today()


def parse_price_to_cents(value: str) -> int:
    """Convert a price string such as "$1,099.00" to cents; 0 when unparseable."""
    cleaned = (value or "").replace("$", "").replace(",", "").strip()
    if not cleaned:
        return 0
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return 0
    if amount < 0:
        return 0
    return int((amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
