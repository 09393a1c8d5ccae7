"""
Claim Verdict Engine

Rule-based coverage verdict for a warranty claim and the analysis that is
printed on the claim document. The verdict depends only on the warranty
status and wear wording in the issue description.
"""

from datetime import date
from typing import List, Optional, Union

from toolvault.models import (
    ClaimVerdict,
    ExclusionCheck,
    Tool,
    WarrantyClaimAnalysis,
    WarrantyStatus,
)
from toolvault.registry import get_brand, get_policy
from .warranty_rules import get_warranty_status


WEAR_KEYWORDS = (
    "wear",
    "worn",
    "old",
    "faded",
    "dull",
    "used",
    "rough",
    "scratched",
)

VERDICT_CONFIDENCE = {
    ClaimVerdict.LIKELY_COVERED: 87,
    ClaimVerdict.PARTIALLY_COVERED: 62,
    ClaimVerdict.NOT_COVERED: 94,
}

RELEVANT_CLAUSE_COUNT = 2

RECOMMENDATIONS = {
    ClaimVerdict.LIKELY_COVERED: (
        "Based on your description, this appears to be a manufacturing defect covered under "
        "{brand}'s warranty. We recommend taking the tool to an authorised service centre with the "
        "claim document below. Under Australian Consumer Law, you are entitled to a repair, "
        "replacement, or refund for products with major failures."
    ),
    ClaimVerdict.PARTIALLY_COVERED: (
        "Your description suggests possible wear-related damage, which may be partially covered. "
        "We recommend visiting an authorised {brand} service centre for inspection. The technician "
        "can determine if this falls under warranty or normal wear. Australian Consumer Law may "
        "provide additional protections."
    ),
    ClaimVerdict.NOT_COVERED: (
        "Unfortunately, this tool's warranty has expired. However, under Australian Consumer Law, "
        "you may still have rights if the product has not lasted a reasonable time. We recommend "
        "contacting {brand} or an authorised service centre to discuss your options."
    ),
}


def has_wear_indicator(issue_description: Optional[str]) -> bool:
    text = (issue_description or "").lower()
    return any(keyword in text for keyword in WEAR_KEYWORDS)


def classify_claim(
    warranty_status: Union[WarrantyStatus, str],
    issue_description: Optional[str]
) -> ClaimVerdict:
    """
    Classify claim coverage.

    An expired warranty is never covered, whatever the description says.
    Otherwise wear wording makes the claim partially covered.
    """
    if warranty_status == WarrantyStatus.EXPIRED:
        return ClaimVerdict.NOT_COVERED
    if has_wear_indicator(issue_description):
        return ClaimVerdict.PARTIALLY_COVERED
    return ClaimVerdict.LIKELY_COVERED


def build_exclusion_checks(
    verdict: ClaimVerdict,
    warranty_status: Union[WarrantyStatus, str]
) -> List[ExclusionCheck]:
    """Evaluate the fixed four-item exclusion checklist."""
    wear_detected = verdict == ClaimVerdict.PARTIALLY_COVERED
    expired = warranty_status == WarrantyStatus.EXPIRED

    return [
        ExclusionCheck(
            label="Normal wear and tear",
            passed=not wear_detected,
            detail="Possible wear-related issue detected" if wear_detected
            else "Not applicable (defect within expected lifespan)",
        ),
        # No misuse or commercial-use detector exists; both always pass
        ExclusionCheck(
            label="Misuse or modification",
            passed=True,
            detail="Not detected based on description",
        ),
        ExclusionCheck(
            label="Commercial vs domestic use",
            passed=True,
            detail="Within warranty scope",
        ),
        ExclusionCheck(
            label="Warranty period validity",
            passed=not expired,
            detail="Warranty has expired" if expired else "Within active warranty period",
        ),
    ]


def build_recommendation(verdict: ClaimVerdict, brand_name: Optional[str]) -> str:
    if brand_name:
        name = brand_name
    elif verdict == ClaimVerdict.PARTIALLY_COVERED:
        name = "manufacturer"
    else:
        name = "the manufacturer"
    return RECOMMENDATIONS[verdict].format(brand=name)


def build_claim_analysis(
    tool: Tool,
    issue_description: Optional[str],
    today: Optional[date] = None
) -> WarrantyClaimAnalysis:
    """
    Assemble the claim analysis for a tool.

    Args:
        tool: The registered tool being claimed on
        issue_description: Free-text description of the fault
        today: Reference date for the warranty status (defaults to today)

    Returns:
        WarrantyClaimAnalysis with verdict, confidence, clauses, exclusion
        checks and recommendation
    """
    status = get_warranty_status(tool.warranty_end_date, today)
    verdict = classify_claim(status, issue_description)

    brand = get_brand(tool.brand)
    policy = get_policy(tool.brand)
    clauses = list(policy.clauses[:RELEVANT_CLAUSE_COUNT]) if policy else []

    return WarrantyClaimAnalysis(
        verdict=verdict,
        confidence=VERDICT_CONFIDENCE[verdict],
        relevant_clauses=clauses,
        exclusions_check=build_exclusion_checks(verdict, status),
        recommendation=build_recommendation(verdict, brand.name if brand else None),
        brand_name=brand.name if brand else None,
    )
