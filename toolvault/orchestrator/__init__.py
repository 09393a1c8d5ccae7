"""Orchestrator Package - Registration and claim flows."""

from .progress import CLAIM_ANALYSIS_STAGES, REGISTRATION_STAGES, run_stages
from .vault_orchestrator import (
    ClaimDraft,
    ReceiptScan,
    ToolVaultOrchestrator,
    derive_match_confidence,
)

__all__ = [
    "CLAIM_ANALYSIS_STAGES",
    "ClaimDraft",
    "REGISTRATION_STAGES",
    "ReceiptScan",
    "ToolVaultOrchestrator",
    "derive_match_confidence",
    "run_stages",
]
