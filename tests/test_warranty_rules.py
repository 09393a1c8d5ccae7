"""
Unit Tests for Warranty Rules

Tests deterministic warranty windows, registration warnings and status.
"""

import pytest
from datetime import date, timedelta

from toolvault.compute import (
    calculate_warranty_expiry,
    days_remaining,
    get_warranty_remaining,
    get_warranty_status,
)
from toolvault.models import WarrantyStatus


class TestWarrantyExpiry:
    """Warranty end date and duration per brand."""

    def test_milwaukee_power_tool(self):
        result = calculate_warranty_expiry("milwaukee", "drill", date(2024, 1, 1))

        assert result.warranty_end_date == date(2029, 1, 1)
        assert result.duration_years == 5
        assert result.warnings == []

    def test_milwaukee_battery(self):
        result = calculate_warranty_expiry("milwaukee", "battery", "2024-01-01")

        assert result.warranty_end_date == date(2026, 1, 1)
        assert result.duration_years == 2

    @pytest.mark.parametrize("brand_id, years", [
        ("dewalt", 3),
        ("bosch", 3),
        ("stihl", 2),
        ("acme", 3),
        (None, 3),
    ])
    def test_default_durations(self, brand_id, years):
        result = calculate_warranty_expiry(brand_id, "drill", date(2024, 6, 1))

        assert result.duration_years == years
        assert result.warranty_end_date == date(2024 + years, 6, 1)
        assert result.warnings == []

    def test_brand_id_is_case_insensitive(self):
        assert calculate_warranty_expiry("DeWalt", "drill", date(2024, 6, 1)).duration_years == 3

    def test_leap_day_purchase(self):
        result = calculate_warranty_expiry("dewalt", "drill", date(2024, 2, 29))

        assert result.warranty_end_date == date(2027, 2, 28)

    def test_unparseable_purchase_date_uses_reference_date(self):
        result = calculate_warranty_expiry("milwaukee", "drill", "garbage", reference_date=date(2025, 6, 1))

        assert result.warranty_end_date == date(2030, 6, 1)


class TestMakitaRegistration:
    """Makita: 3 years registered, 1 year otherwise."""

    def test_registered(self):
        result = calculate_warranty_expiry(
            "makita", "saw", date(2025, 1, 1), is_registered=True, reference_date=date(2025, 1, 11)
        )

        assert result.duration_years == 3
        assert result.warranty_end_date == date(2028, 1, 1)
        assert result.warnings == []

    def test_unregistered_inside_window(self):
        result = calculate_warranty_expiry(
            "makita", "saw", date(2025, 1, 1), reference_date=date(2025, 1, 11)
        )

        assert result.duration_years == 1
        assert result.warranty_end_date == date(2026, 1, 1)
        assert len(result.warnings) == 1
        assert "20 days" in result.warnings[0]
        assert "MyMakita" in result.warnings[0]

    def test_unregistered_one_day_left(self):
        result = calculate_warranty_expiry(
            "makita", "saw", date(2025, 1, 1), reference_date=date(2025, 1, 30)
        )

        assert "1 day " in result.warnings[0]

    def test_unregistered_thirtieth_day_is_inside_window(self):
        result = calculate_warranty_expiry(
            "makita", "saw", date(2025, 1, 1), reference_date=date(2025, 1, 31)
        )

        assert len(result.warnings) == 1
        assert "Register on MyMakita today" in result.warnings[0]

    def test_unregistered_day_after_window(self):
        result = calculate_warranty_expiry(
            "makita", "saw", date(2025, 1, 1), reference_date=date(2025, 2, 1)
        )

        assert "window has closed" in result.warnings[0]

    def test_unregistered_window_closed(self):
        result = calculate_warranty_expiry(
            "makita", "saw", date(2025, 1, 1), reference_date=date(2025, 3, 1)
        )

        assert result.duration_years == 1
        assert "window has closed" in result.warnings[0]


class TestRepeatableCalculation:
    """Same inputs give the same window and warnings."""

    @pytest.mark.parametrize("brand_id, category, is_registered, reference_date", [
        ("makita", "saw", False, date(2025, 1, 11)),
        ("makita", "saw", False, date(2025, 1, 31)),
        ("makita", "saw", False, date(2025, 3, 1)),
        ("makita", "saw", True, date(2025, 1, 11)),
        ("husqvarna", "chainsaw", False, date(2025, 1, 5)),
        ("husqvarna", "chainsaw", True, date(2025, 1, 5)),
        ("husqvarna", "battery", False, date(2025, 1, 5)),
    ])
    def test_repeated_call_is_identical(self, brand_id, category, is_registered, reference_date):
        first = calculate_warranty_expiry(
            brand_id, category, date(2025, 1, 1), is_registered=is_registered, reference_date=reference_date
        )
        second = calculate_warranty_expiry(
            brand_id, category, date(2025, 1, 1), is_registered=is_registered, reference_date=reference_date
        )

        assert first == second
        assert first.warnings == second.warnings
        assert first.model_dump() == second.model_dump()

    def test_iso_string_and_date_inputs_agree(self):
        from_string = calculate_warranty_expiry("makita", "saw", "2025-01-01", reference_date="2025-01-11")
        from_date = calculate_warranty_expiry("makita", "saw", date(2025, 1, 1), reference_date=date(2025, 1, 11))

        assert from_string == from_date


class TestHusqvarnaRegistration:
    """Husqvarna: 2 years, extended to 5 for registered non-battery products."""

    def test_registered_chainsaw(self):
        result = calculate_warranty_expiry(
            "husqvarna", "chainsaw", date(2025, 1, 1), is_registered=True, reference_date=date(2025, 1, 5)
        )

        assert result.duration_years == 5
        assert result.warnings == []

    def test_unregistered_inside_window(self):
        result = calculate_warranty_expiry(
            "husqvarna", "chainsaw", date(2025, 1, 1), reference_date=date(2025, 1, 5)
        )

        assert result.duration_years == 2
        assert len(result.warnings) == 1
        assert "26 days" in result.warnings[0]
        assert "5 years" in result.warnings[0]

    def test_unregistered_thirtieth_day_is_inside_window(self):
        result = calculate_warranty_expiry(
            "husqvarna", "chainsaw", date(2025, 1, 1), reference_date=date(2025, 1, 31)
        )

        assert len(result.warnings) == 1
        assert "Register online today" in result.warnings[0]

    def test_unregistered_day_after_window(self):
        result = calculate_warranty_expiry(
            "husqvarna", "chainsaw", date(2025, 1, 1), reference_date=date(2025, 2, 1)
        )

        assert result.warnings == []

    def test_unregistered_window_closed(self):
        result = calculate_warranty_expiry(
            "husqvarna", "chainsaw", date(2025, 1, 1), reference_date=date(2025, 6, 1)
        )

        assert result.duration_years == 2
        assert result.warnings == []

    def test_battery_not_extended(self):
        result = calculate_warranty_expiry(
            "husqvarna", "battery", date(2025, 1, 1), is_registered=True, reference_date=date(2025, 1, 5)
        )

        assert result.duration_years == 2
        assert result.warnings == []


class TestWarrantyStatus:
    """Status thresholds relative to a reference date."""

    TODAY = date(2025, 1, 15)

    @pytest.mark.parametrize("offset, expected", [
        (-1, WarrantyStatus.EXPIRED),
        (-400, WarrantyStatus.EXPIRED),
        (0, WarrantyStatus.EXPIRING),
        (30, WarrantyStatus.EXPIRING),
        (31, WarrantyStatus.ACTIVE),
        (1000, WarrantyStatus.ACTIVE),
    ])
    def test_thresholds(self, offset, expected):
        end = self.TODAY + timedelta(days=offset)

        assert get_warranty_status(end, self.TODAY) == expected

    def test_iso_string_end_date(self):
        assert get_warranty_status("2025-01-10", self.TODAY) == WarrantyStatus.EXPIRED

    def test_days_remaining(self):
        assert days_remaining(date(2025, 2, 14), self.TODAY) == 30
        assert days_remaining(date(2025, 1, 5), self.TODAY) == -10


class TestWarrantyRemaining:
    """Human-readable remaining time."""

    TODAY = date(2025, 1, 15)

    @pytest.mark.parametrize("end, expected", [
        (date(2027, 3, 15), "2y 2m remaining"),
        (date(2027, 1, 15), "2y remaining"),
        (date(2025, 4, 20), "3m remaining"),
        (date(2025, 1, 25), "10d remaining"),
        (date(2025, 1, 15), "0d remaining"),
        (date(2023, 1, 15), "Expired 2 years ago"),
        (date(2023, 12, 1), "Expired 1 year ago"),
        (date(2024, 12, 15), "Expired 1 month ago"),
        (date(2025, 1, 14), "Expired 1 day ago"),
    ])
    def test_labels(self, end, expected):
        assert get_warranty_remaining(end, self.TODAY) == expected
