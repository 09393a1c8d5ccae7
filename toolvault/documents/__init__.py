"""Documents Package - Claim document rendering."""

from .claim_document import VERDICT_LABELS, render_claim_document

__all__ = ["VERDICT_LABELS", "render_claim_document"]
