"""
Claim Document Renderer

Renders a warranty claim as a plain-text document that can be printed or
attached to an email to a service centre.
"""

from datetime import date
from typing import List, Optional, Tuple

from toolvault.models import ClaimVerdict, Tool, WarrantyClaimAnalysis, WarrantyType
from toolvault.registry import get_brand
from toolvault.utils import format_currency, format_date


VERDICT_LABELS = {
    ClaimVerdict.LIKELY_COVERED.value: "LIKELY COVERED",
    ClaimVerdict.PARTIALLY_COVERED.value: "PARTIALLY COVERED",
    ClaimVerdict.NOT_COVERED.value: "NOT COVERED",
}

WARRANTY_TYPE_LABELS = {
    WarrantyType.STANDARD.value: "Standard Manufacturer",
    WarrantyType.EXTENDED.value: "Extended",
    WarrantyType.DEALER.value: "Dealer",
}

CONSUMER_LAW_NOTE = (
    "Note: This document is generated for informational purposes. Your rights under the "
    "Australian Consumer Law are not affected by manufacturer warranties. Goods come with "
    "guarantees that cannot be excluded under the Australian Consumer Law."
)

LABEL_WIDTH = 16


def _section(title: str, rows: List[Tuple[str, str]]) -> List[str]:
    lines = [title.upper()]
    lines.extend(f"  {label + ':':<{LABEL_WIDTH}}{value}" for label, value in rows)
    lines.append("")
    return lines


def _paragraph(title: str, text: str) -> List[str]:
    return [title.upper(), f"  {text}", ""]


def render_claim_document(
    tool: Tool,
    analysis: WarrantyClaimAnalysis,
    issue_description: str,
    claim_reference: str,
    user_name: str,
    user_email: str,
    generated: Optional[date] = None
) -> str:
    """
    Render the claim document.

    Args:
        tool: Tool being claimed on
        analysis: Claim analysis for the tool
        issue_description: The user's description of the fault
        claim_reference: Reference such as TV-2025-1234
        user_name: Claimant name
        user_email: Claimant email
        generated: Generation date (defaults to today)

    Returns:
        The document as text
    """
    brand = get_brand(tool.brand)
    verdict = getattr(analysis.verdict, "value", analysis.verdict)
    warranty_type = getattr(tool.warranty_type, "value", tool.warranty_type)

    warranty_rows = [("Type", WARRANTY_TYPE_LABELS.get(warranty_type, str(warranty_type)))]
    if tool.warranty_card_number:
        warranty_rows.append(("Card #", tool.warranty_card_number))
    warranty_rows.append(
        ("Period", f"{format_date(tool.warranty_start_date)} - {format_date(tool.warranty_end_date)}")
    )

    lines = [
        "WARRANTY CLAIM",
        f"TOOLVAULT REFERENCE #{claim_reference}",
        f"Generated: {format_date(generated or date.today())}",
        "",
    ]
    lines += _section("Claimant Details", [("Name", user_name), ("Email", user_email)])
    lines += _section("Tool Information", [
        ("Brand", brand.name if brand else tool.brand),
        ("Tool", tool.name),
        ("Model", tool.model),
        ("Serial Number", tool.serial_number),
    ])
    lines += _section("Purchase Information", [
        ("Date", format_date(tool.purchase_date)),
        ("Store", tool.purchase_store),
        ("Amount", format_currency(tool.purchase_price)),
    ])
    lines += _section("Warranty Information", warranty_rows)
    lines += _paragraph("Issue Description", issue_description)

    lines += _section("Warranty Analysis", [
        ("Verdict", VERDICT_LABELS.get(verdict, str(verdict))),
        ("Confidence", f"{analysis.confidence}%"),
    ])
    if analysis.relevant_clauses:
        clause = analysis.relevant_clauses[0]
        # Replace the blank line closing the analysis section
        lines[-1:] = [f"  Relevant clause ({clause.section}):", f'  "{clause.text}"', ""]

    lines += _paragraph("Recommended Action", analysis.recommendation)
    lines.append(CONSUMER_LAW_NOTE)

    return "\n".join(lines) + "\n"
