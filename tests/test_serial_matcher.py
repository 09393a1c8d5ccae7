"""
Unit Tests for Serial Prefix Matching
"""

import pytest

from toolvault.compute import detect_brand_by_prefix, normalize_serial
from toolvault.models import SerialPrefixEntry


class TestNormalizeSerial:

    def test_uppercases_and_trims(self):
        assert normalize_serial("  m18fpd2-001 ") == "M18FPD2-001"

    def test_none_is_empty(self):
        assert normalize_serial(None) == ""


class TestDetectBrand:
    """Brand detection against the built-in prefix table."""

    @pytest.mark.parametrize("serial, brand_id, prefix", [
        ("M18FPD2-0012345", "milwaukee", "M18"),
        ("M12FID-0099", "milwaukee", "M12"),
        ("2804-20", "milwaukee", "2"),
        ("DHS680-7781234", "makita", "DH"),
        ("BL1860B", "makita", "BL"),
        ("GA5030", "makita", "GA"),
        ("DCD791-55", "dewalt", "DCD"),
        ("DWE7485", "dewalt", "DWE"),
        ("GBH2-26", "bosch", "GBH"),
        ("GWS700", "bosch", "GWS"),
        ("MS261-5510982", "stihl", "MS"),
        ("BR600", "stihl", "BR"),
        ("HUS-445", "husqvarna", "HUS"),
        ("115iL", "husqvarna", "115"),
    ])
    def test_known_prefixes(self, serial, brand_id, prefix):
        match = detect_brand_by_prefix(serial)

        assert match is not None
        assert match.brand_id == brand_id
        assert match.prefix == prefix

    def test_lowercase_input_matches(self):
        match = detect_brand_by_prefix("  dcf887-2217764")

        assert match.brand_id == "dewalt"

    @pytest.mark.parametrize("serial", ["XQ-55120", "", "   ", None, "A"])
    def test_no_match_returns_none(self, serial):
        assert detect_brand_by_prefix(serial) is None

    def test_longest_prefix_wins(self):
        """A specific prefix beats a shorter one regardless of table order."""
        entries = [
            SerialPrefixEntry(brand_id="short", prefixes=["M"]),
            SerialPrefixEntry(brand_id="long", prefixes=["M18"]),
        ]

        assert detect_brand_by_prefix("M18X", entries).brand_id == "long"
        assert detect_brand_by_prefix("MX", entries).brand_id == "short"

    def test_equal_length_keeps_table_order(self):
        entries = [
            SerialPrefixEntry(brand_id="first", prefixes=["AB"]),
            SerialPrefixEntry(brand_id="second", prefixes=["AB"]),
        ]

        assert detect_brand_by_prefix("AB123", entries).brand_id == "first"
