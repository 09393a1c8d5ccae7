"""Utility helpers for identifiers and formatting."""

from .formatting import (
    format_currency,
    format_date,
    parse_au_date,
    parse_price_to_cents,
    parse_purchase_date,
)
from .identifiers import generate_claim_reference, generate_tool_id, generate_warranty_card_number

__all__ = [
    "format_currency",
    "format_date",
    "generate_claim_reference",
    "generate_tool_id",
    "generate_warranty_card_number",
    "parse_au_date",
    "parse_price_to_cents",
    "parse_purchase_date",
]
