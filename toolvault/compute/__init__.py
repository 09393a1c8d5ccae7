"""Compute Package - Deterministic brand, receipt, warranty and claim logic."""

from .claim_engine import build_claim_analysis, classify_claim
from .receipt_parser import parse_receipt
from .serial_matcher import detect_brand_by_prefix, normalize_serial
from .service import ComputeService, get_compute_service
from .tool_filter import filter_tools, matches_query, parse_status_filter
from .warranty_rules import (
    calculate_warranty_expiry,
    days_remaining,
    get_warranty_remaining,
    get_warranty_status,
)

__all__ = [
    "ComputeService",
    "build_claim_analysis",
    "calculate_warranty_expiry",
    "classify_claim",
    "days_remaining",
    "detect_brand_by_prefix",
    "filter_tools",
    "get_compute_service",
    "get_warranty_remaining",
    "get_warranty_status",
    "matches_query",
    "normalize_serial",
    "parse_receipt",
    "parse_status_filter",
]
