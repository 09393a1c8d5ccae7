"""
Receipt Text Parser

Extracts store name, purchase date, total price and item description from
raw OCR text. Each field is extracted independently and carries its own
confidence score. Missing fields come back as None with zero confidence;
the parser never raises on noisy or empty input.
"""

import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from toolvault.models import ParsedReceipt, ReceiptConfidence


logger = logging.getLogger(__name__)


KNOWN_RETAILERS = (
    "bunnings",
    "total tools",
    "sydney tools",
    "mitre 10",
    "trade tools",
    "tool kit depot",
    "masters",
    "supercheap auto",
    "repco",
)

MONTH_MAP = {
    "jan": "01", "january": "01",
    "feb": "02", "february": "02",
    "mar": "03", "march": "03",
    "apr": "04", "april": "04",
    "may": "05",
    "jun": "06", "june": "06",
    "jul": "07", "july": "07",
    "aug": "08", "august": "08",
    "sep": "09", "september": "09",
    "oct": "10", "october": "10",
    "nov": "11", "november": "11",
    "dec": "12", "december": "12",
}

NUMERIC_FULL_YEAR = "numeric_full_year"
NUMERIC_SHORT_YEAR = "numeric_short_year"
MONTH_ABBREVIATED = "month_abbreviated"
MONTH_FULL = "month_full"

# Tried in order; the first pattern that matches anywhere in the text wins
DATE_PATTERNS: List[Tuple[str, "re.Pattern[str]", int]] = [
    (NUMERIC_FULL_YEAR, re.compile(r"(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})"), 90),
    (NUMERIC_SHORT_YEAR, re.compile(r"(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2})"), 75),
    (
        MONTH_ABBREVIATED,
        re.compile(r"(\d{1,2})\s+(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\w*\s+(\d{4})", re.IGNORECASE),
        85,
    ),
    (
        MONTH_FULL,
        re.compile(
            r"(\d{1,2})\s+(january|february|march|april|may|june|july|august|september|october"
            r"|november|december)\s+(\d{4})",
            re.IGNORECASE,
        ),
        85,
    ),
]

PRICE_PATTERN = re.compile(r"\$[\d,]+\.\d{2}")

NON_ITEM_PREFIX = re.compile(r"^(subtotal|total|gst|tax|change|cash|eftpos|visa|mastercard|amex)", re.IGNORECASE)

WORD_PATTERN = re.compile(r"\S+")

STORE_SCAN_LINES = 5
STORE_MATCH_CHARS = 10
MIN_ITEM_LENGTH = 5

STORE_KNOWN_CONFIDENCE = 95
STORE_FALLBACK_CONFIDENCE = 40
PRICE_TOTAL_CONFIDENCE = 85
PRICE_PARTIAL_CONFIDENCE = 65
ITEM_CONFIDENCE = 55


def _title_case(line: str) -> str:
    # Whitespace is kept as printed
    return WORD_PATTERN.sub(lambda m: m.group(0).capitalize(), line.strip())


def extract_store(lines: List[str]) -> Tuple[Optional[str], int]:
    """Find the retailer among the first few lines of the receipt."""
    for line in lines[:STORE_SCAN_LINES]:
        lower = line.lower().strip()
        for retailer in KNOWN_RETAILERS:
            if retailer in lower:
                return _title_case(line), STORE_KNOWN_CONFIDENCE

    for line in lines:
        if len(line.strip()) > 3:
            return line.strip(), STORE_FALLBACK_CONFIDENCE

    return None, 0


def _match_date(text: str) -> Tuple[Optional[str], int, Optional[str]]:
    for kind, pattern, confidence in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        day, month, year = match.groups()
        if kind == NUMERIC_SHORT_YEAR:
            year = f"19{year}" if int(year) > 50 else f"20{year}"
        elif kind in (MONTH_ABBREVIATED, MONTH_FULL):
            month = MONTH_MAP.get(month.lower())
            if not month:
                continue

        return f"{day.zfill(2)}/{month.zfill(2)}/{year}", confidence, match.group(0)

    return None, 0, None


def extract_date(text: str) -> Tuple[Optional[str], int]:
    """Find the purchase date and normalize it to DD/MM/YYYY."""
    value, confidence, _ = _match_date(text)
    return value, confidence


def _amount(price: str) -> Decimal:
    try:
        return Decimal(price.replace("$", "").replace(",", ""))
    except InvalidOperation:
        return Decimal(0)


def extract_price(text: str) -> Tuple[Optional[str], int]:
    """
    Pick the receipt total.

    The last dollar amount is taken as the candidate since totals are
    printed last; it is trusted fully only when it is also the largest.
    """
    matches = PRICE_PATTERN.findall(text)
    if not matches:
        return None, 0

    last = matches[-1]
    largest = max(_amount(m) for m in matches)

    if _amount(last) == largest:
        return last, PRICE_TOTAL_CONFIDENCE
    return last, PRICE_PARTIAL_CONFIDENCE


def extract_item_description(
    lines: List[str],
    store_name: Optional[str],
    date_markers: Tuple[str, ...] = ()
) -> Tuple[Optional[str], int]:
    """
    Pick the most descriptive line from the top half of the receipt.

    Args:
        lines: Non-empty receipt lines
        store_name: Detected store, whose lines are skipped
        date_markers: Date strings (normalized and as printed) whose lines are skipped
    """
    top_half = lines[:math.ceil(len(lines) / 2)]
    store_key = store_name.lower()[:STORE_MATCH_CHARS] if store_name else None

    candidates = []
    for raw in top_half:
        line = raw.strip()
        if len(line) < MIN_ITEM_LENGTH:
            continue
        if PRICE_PATTERN.search(line):
            continue
        if store_key and store_key in line.lower():
            continue
        if any(marker and marker in line for marker in date_markers):
            continue
        if NON_ITEM_PREFIX.match(line):
            continue
        if line.isdigit():
            continue
        candidates.append(line)

    if not candidates:
        return None, 0

    longest = candidates[0]
    for line in candidates[1:]:
        if len(line) > len(longest):
            longest = line
    return longest, ITEM_CONFIDENCE


def parse_receipt(raw_text: Optional[str]) -> ParsedReceipt:
    """
    Parse raw OCR text into structured receipt fields.

    Args:
        raw_text: Multi-line text from the text-recognition service

    Returns:
        ParsedReceipt with the extracted fields, per-field confidence and
        the original text
    """
    text = raw_text or ""
    lines = [line for line in text.splitlines() if line.strip()]

    store_name, store_confidence = extract_store(lines)
    purchase_date, date_confidence, printed_date = _match_date(text)
    price, price_confidence = extract_price(text)
    item, item_confidence = extract_item_description(
        lines,
        store_name,
        tuple(marker for marker in (purchase_date, printed_date) if marker),
    )

    logger.debug(
        f"Parsed receipt - lines={len(lines)}, store={store_confidence}, date={date_confidence}, "
        f"item={item_confidence}, price={price_confidence}"
    )

    return ParsedReceipt(
        store_name=store_name,
        purchase_date=purchase_date,
        item_description=item,
        price=price,
        raw_text=text,
        confidence=ReceiptConfidence(
            store=store_confidence,
            date=date_confidence,
            item=item_confidence,
            price=price_confidence,
        ),
    )
