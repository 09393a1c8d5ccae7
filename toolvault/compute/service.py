"""
Compute Service

Deterministic calculation service for the tool vault:
- Brand detection from serial numbers
- Receipt text parsing
- Warranty windows and status
- Claim verdicts

All calculations are deterministic: same input → same output.
"""

import json
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ValidationError

from toolvault.models import Tool, WarrantyStatus
from .claim_engine import build_claim_analysis, classify_claim
from .receipt_parser import parse_receipt
from .serial_matcher import detect_brand_by_prefix, normalize_serial
from .warranty_rules import (
    calculate_warranty_expiry,
    days_remaining,
    get_warranty_remaining,
    get_warranty_status,
)


def _valid_iso_date(value: Optional[str]) -> bool:
    try:
        datetime.strptime(value or "", "%Y-%m-%d")
    except (TypeError, ValueError):
        return False
    return True


def detect_brand(serial_number: str) -> Dict[str, Any]:
    """
    Detect the brand of a tool from its serial number.

    Args:
        serial_number: Raw serial number

    Returns:
        Dictionary with the normalized serial and the matched brand (or None)
    """
    match = detect_brand_by_prefix(serial_number)
    return {
        "status": "ok",
        "data": {
            "serial_number": normalize_serial(serial_number),
            "matched": match is not None,
            "brand_id": match.brand_id if match else None,
            "prefix": match.prefix if match else None,
        }
    }


def calculate_warranty(
    brand_id: str,
    category: str,
    purchase_date: str,
    is_registered: bool = False,
    reference_date: str = None
) -> Dict[str, Any]:
    """
    Calculate the warranty window and current status.

    Args:
        brand_id: Brand identifier
        category: Tool category
        purchase_date: Date of purchase (YYYY-MM-DD)
        is_registered: Registered with the manufacturer
        reference_date: Date to check against (defaults to today)

    Returns:
        Dictionary with warranty window details
    """
    if not _valid_iso_date(purchase_date):
        return {
            "status": "error",
            "error_code": "INVALID_DATE",
            "message": f"Invalid purchase date format: {purchase_date}"
        }
    if reference_date and not _valid_iso_date(reference_date):
        reference_date = None

    calc = calculate_warranty_expiry(
        brand_id=brand_id,
        category=category,
        purchase_date=purchase_date,
        is_registered=is_registered,
        reference_date=reference_date,
    )
    status = get_warranty_status(calc.warranty_end_date, reference_date)

    return {
        "status": "ok",
        "data": {
            "brand_id": brand_id,
            "category": category,
            "purchase_date": purchase_date,
            "is_registered": is_registered,
            "duration_years": calc.duration_years,
            "warranty_end_date": calc.warranty_end_date.isoformat(),
            "warnings": list(calc.warnings),
            "warranty_status": status.value,
            "days_remaining": days_remaining(calc.warranty_end_date, reference_date),
            "remaining_label": get_warranty_remaining(calc.warranty_end_date, reference_date),
        }
    }


def classify_issue(warranty_status: str, issue_description: str) -> Dict[str, Any]:
    """Classify claim coverage from a warranty status and issue text."""
    try:
        status = WarrantyStatus(warranty_status)
    except ValueError:
        return {
            "status": "error",
            "error_code": "UNKNOWN_STATUS",
            "message": f"Unknown warranty status: {warranty_status}"
        }
    verdict = classify_claim(status, issue_description)
    return {"status": "ok", "data": {"warranty_status": status.value, "verdict": verdict.value}}


def analyse_claim(tool: Dict[str, Any], issue_description: str, reference_date: str = None) -> Dict[str, Any]:
    """Build a claim analysis for a tool record."""
    try:
        record = Tool.model_validate(tool)
    except ValidationError as e:
        return {
            "status": "error",
            "error_code": "INVALID_TOOL",
            "message": f"Invalid tool record: {e.error_count()} validation error(s)"
        }
    today = datetime.strptime(reference_date, "%Y-%m-%d").date() if _valid_iso_date(reference_date) else None
    analysis = build_claim_analysis(record, issue_description, today)
    return {"status": "ok", "data": analysis.model_dump(mode="json")}


class ComputeService:
    """
    Service class for deterministic tool vault computations.

    Routes a parameter dictionary to the matching calculation.
    """

    def run(self, tool_call: Dict[str, Any]) -> str:
        """
        Execute a computation based on tool_call parameters.

        Args:
            tool_call: Dictionary containing calculation parameters

        Returns:
            JSON string with calculation results
        """
        if "tool" in tool_call and "issue_description" in tool_call:
            result = analyse_claim(
                tool=tool_call.get("tool", {}),
                issue_description=tool_call.get("issue_description", ""),
                reference_date=tool_call.get("reference_date")
            )
        elif "warranty_status" in tool_call:
            result = classify_issue(
                warranty_status=tool_call.get("warranty_status", ""),
                issue_description=tool_call.get("issue_description", "")
            )
        elif "purchase_date" in tool_call and "brand_id" in tool_call:
            result = calculate_warranty(
                brand_id=tool_call.get("brand_id"),
                category=tool_call.get("category", "other"),
                purchase_date=tool_call.get("purchase_date"),
                is_registered=bool(tool_call.get("is_registered", False)),
                reference_date=tool_call.get("reference_date")
            )
        elif "raw_text" in tool_call:
            parsed = parse_receipt(tool_call.get("raw_text", ""))
            result = {"status": "ok", "data": parsed.model_dump(mode="json")}
        elif "serial_number" in tool_call:
            result = detect_brand(tool_call.get("serial_number", ""))
        else:
            result = {
                "status": "error",
                "error_code": "UNKNOWN_CALCULATION",
                "message": "Could not determine calculation type from parameters"
            }

        return json.dumps(result, indent=2)


def get_compute_service() -> ComputeService:
    """Factory function to create a ComputeService instance."""
    return ComputeService()
