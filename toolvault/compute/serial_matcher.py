"""
Serial Prefix Matcher

Detects a tool's brand from the leading characters of its serial number.
Longer prefixes are checked first so that a specific prefix such as "M18"
wins over a shorter one that would also match.
"""

from typing import Iterable, List, Optional, Tuple

from toolvault.models import SerialMatch, SerialPrefixEntry
from toolvault.registry import SERIAL_PREFIXES


def normalize_serial(serial: Optional[str]) -> str:
    """Uppercase and trim a raw serial string."""
    return (serial or "").strip().upper()


def _candidates(entries: Iterable[SerialPrefixEntry]) -> List[Tuple[str, str]]:
    pairs = [
        (entry.brand_id, prefix.strip().upper())
        for entry in entries
        for prefix in entry.prefixes
        if prefix.strip()
    ]
    # sorted() is stable: equal-length prefixes keep table order
    return sorted(pairs, key=lambda pair: len(pair[1]), reverse=True)


_SORTED_PREFIXES = _candidates(SERIAL_PREFIXES)


def detect_brand_by_prefix(
    serial: Optional[str],
    entries: Optional[Iterable[SerialPrefixEntry]] = None
) -> Optional[SerialMatch]:
    """
    Match a serial number against the brand prefix table.

    Args:
        serial: Raw serial as typed or scanned
        entries: Prefix table to match against (defaults to the registry)

    Returns:
        SerialMatch with the brand and matched prefix, or None
    """
    normalized = normalize_serial(serial)
    if not normalized:
        return None

    candidates = _SORTED_PREFIXES if entries is None else _candidates(entries)
    for brand_id, prefix in candidates:
        if normalized.startswith(prefix):
            return SerialMatch(brand_id=brand_id, prefix=prefix)

    return None
