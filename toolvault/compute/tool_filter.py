"""
Tool Filtering

Status filter and free-text search over the tool collection, as used by
the tool list.
"""

from typing import Iterable, List, Optional

from toolvault.models import Tool, WarrantyStatus
from .warranty_rules import DateLike, get_warranty_status


ALL_STATUSES = "all"

SEARCH_FIELDS = ("name", "brand", "serial_number", "purchase_store")


def parse_status_filter(status: Optional[str]) -> Optional[WarrantyStatus]:
    """
    Resolve a status filter value.

    Returns:
        None for "all" or an empty value

    Raises:
        ValueError: If the value is not a warranty status
    """
    if not status or status.strip().lower() == ALL_STATUSES:
        return None
    return WarrantyStatus(status.strip().lower())


def matches_query(tool: Tool, query: Optional[str]) -> bool:
    """Case-insensitive substring match on name, brand, serial and store."""
    needle = (query or "").strip().lower()
    if not needle:
        return True
    return any(needle in str(getattr(tool, field) or "").lower() for field in SEARCH_FIELDS)


def filter_tools(
    tools: Iterable[Tool],
    status: Optional[str] = None,
    query: Optional[str] = None,
    today: DateLike = None
) -> List[Tool]:
    """
    Tools matching both the status filter and the search query, order kept.

    Raises:
        ValueError: If status is not "all" or a warranty status
    """
    wanted = parse_status_filter(status)
    return [
        tool for tool in tools
        if (wanted is None or get_warranty_status(tool.warranty_end_date, today) == wanted)
        and matches_query(tool, query)
    ]
