"""
Warranty Rules Engine

Deterministic warranty calculations:
- Warranty end date and duration from brand, category and registration
- Brand-specific registration windows and advisory warnings
- Warranty status (active / expiring / expired) and remaining time

All calculations are deterministic for a fixed reference date:
same input → same output.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from dateutil.relativedelta import relativedelta

from toolvault.models import ToolCategory, WarrantyCalculation, WarrantyStatus
from toolvault.registry import DEFAULT_WARRANTY_YEARS, get_brand


logger = logging.getLogger(__name__)

DateLike = Union[date, str, None]

# Days after purchase during which registration upgrades the warranty
REGISTRATION_WINDOW_DAYS = 30

# A warranty ending within this many days is "expiring"
EXPIRING_THRESHOLD_DAYS = 30

MAKITA_REGISTERED_YEARS = 3
MAKITA_UNREGISTERED_YEARS = 1

HUSQVARNA_REGISTERED_YEARS = 5
HUSQVARNA_INELIGIBLE_CATEGORIES = {ToolCategory.BATTERY.value}

MILWAUKEE_BATTERY_YEARS = 2


def _to_date(value: DateLike) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    except (ValueError, AttributeError):
        return None


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _registration_days_left(purchase: date, today: date) -> int:
    deadline = purchase + timedelta(days=REGISTRATION_WINDOW_DAYS)
    return (deadline - today).days


def _registration_deadline(days_left: int) -> str:
    # Day 30 after purchase is the last day to register
    return "today" if days_left == 0 else f"within {_plural(days_left, 'day')}"


def _category_value(category) -> str:
    return getattr(category, "value", category) or ToolCategory.OTHER.value


def calculate_warranty_expiry(
    brand_id: Optional[str],
    category: Union[ToolCategory, str, None],
    purchase_date: DateLike,
    is_registered: bool = False,
    reference_date: DateLike = None
) -> WarrantyCalculation:
    """
    Calculate the warranty window for a tool.

    Args:
        brand_id: Brand identifier (unknown brands get the default duration)
        category: Tool category
        purchase_date: Purchase date (date or YYYY-MM-DD)
        is_registered: Whether the product was registered with the manufacturer
        reference_date: Date used for registration-window warnings (defaults to today)

    Returns:
        WarrantyCalculation with end date, duration in years and warnings
    """
    today = _to_date(reference_date) or date.today()
    purchase = _to_date(purchase_date)
    if purchase is None:
        logger.warning(f"Unparseable purchase date {purchase_date!r}, using {today.isoformat()}")
        purchase = today

    category_value = _category_value(category)
    brand = get_brand(brand_id)
    warnings: List[str] = []

    if brand is None:
        duration_years = DEFAULT_WARRANTY_YEARS
    elif brand.id == "makita":
        if is_registered:
            duration_years = MAKITA_REGISTERED_YEARS
        else:
            duration_years = MAKITA_UNREGISTERED_YEARS
            days_left = _registration_days_left(purchase, today)
            if days_left >= 0:
                warnings.append(
                    f"Register on MyMakita {_registration_deadline(days_left)} to get the "
                    f"{MAKITA_REGISTERED_YEARS}-year warranty. Unregistered tools are covered for "
                    f"{MAKITA_UNREGISTERED_YEARS} year."
                )
            else:
                warnings.append(
                    f"The {REGISTRATION_WINDOW_DAYS}-day MyMakita registration window has closed; "
                    f"the {MAKITA_UNREGISTERED_YEARS}-year standard warranty applies."
                )
    elif brand.id == "husqvarna":
        duration_years = brand.default_warranty_years
        eligible = category_value not in HUSQVARNA_INELIGIBLE_CATEGORIES
        if eligible and is_registered:
            duration_years = HUSQVARNA_REGISTERED_YEARS
        elif eligible:
            days_left = _registration_days_left(purchase, today)
            if days_left >= 0:
                warnings.append(
                    f"Register online {_registration_deadline(days_left)} to extend your Husqvarna "
                    f"warranty to {HUSQVARNA_REGISTERED_YEARS} years."
                )
    elif brand.id == "milwaukee" and category_value == ToolCategory.BATTERY.value:
        duration_years = MILWAUKEE_BATTERY_YEARS
    else:
        duration_years = brand.default_warranty_years

    end_date = purchase + relativedelta(years=duration_years)

    return WarrantyCalculation(
        warranty_end_date=end_date,
        duration_years=duration_years,
        warnings=warnings,
    )


def days_remaining(end_date: DateLike, today: DateLike = None) -> int:
    """Whole days from today until the warranty end date (negative once expired)."""
    end = _to_date(end_date)
    ref = _to_date(today) or date.today()
    if end is None:
        return 0
    return (end - ref).days


def get_warranty_status(end_date: DateLike, today: DateLike = None) -> WarrantyStatus:
    """Derive the warranty status from the end date."""
    left = days_remaining(end_date, today)
    if left < 0:
        return WarrantyStatus.EXPIRED
    if left <= EXPIRING_THRESHOLD_DAYS:
        return WarrantyStatus.EXPIRING
    return WarrantyStatus.ACTIVE


def get_warranty_remaining(end_date: DateLike, today: DateLike = None) -> str:
    """Human-readable remaining (or elapsed) warranty time."""
    end = _to_date(end_date)
    ref = _to_date(today) or date.today()
    if end is None:
        return "Unknown"

    if end < ref:
        elapsed = relativedelta(ref, end)
        if elapsed.years > 0:
            return f"Expired {_plural(elapsed.years, 'year')} ago"
        if elapsed.months > 0:
            return f"Expired {_plural(elapsed.months, 'month')} ago"
        return f"Expired {_plural(elapsed.days, 'day')} ago"

    left = relativedelta(end, ref)
    if left.years > 0:
        if left.months > 0:
            return f"{left.years}y {left.months}m remaining"
        return f"{left.years}y remaining"
    if left.months > 0:
        return f"{left.months}m remaining"
    return f"{(end - ref).days}d remaining"
