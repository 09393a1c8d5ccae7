"""
Tests for the plain-text claim document.
"""

from datetime import date

from toolvault.compute import build_claim_analysis
from toolvault.documents import render_claim_document
from toolvault.documents.claim_document import CONSUMER_LAW_NOTE
from toolvault.registry import get_policy


GENERATED = date(2025, 1, 15)


def _render(tool, issue="Motor won't start"):
    analysis = build_claim_analysis(tool, issue, GENERATED)
    return render_claim_document(
        tool=tool,
        analysis=analysis,
        issue_description=issue,
        claim_reference="TV-2025-1234",
        user_name="Sam Taylor",
        user_email="sam@example.com",
        generated=GENERATED,
    )


class TestClaimDocument:

    def test_header_and_sections(self, tool_factory):
        document = _render(tool_factory())

        lines = document.splitlines()
        assert lines[0] == "WARRANTY CLAIM"
        assert lines[1] == "TOOLVAULT REFERENCE #TV-2025-1234"
        assert lines[2] == "Generated: 15/01/2025"
        for heading in (
            "CLAIMANT DETAILS",
            "TOOL INFORMATION",
            "PURCHASE INFORMATION",
            "WARRANTY INFORMATION",
            "ISSUE DESCRIPTION",
            "WARRANTY ANALYSIS",
            "RECOMMENDED ACTION",
        ):
            assert heading in lines

    def test_tool_and_purchase_details(self, tool_factory):
        document = _render(tool_factory())

        assert "Sam Taylor" in document
        assert "sam@example.com" in document
        assert "Milwaukee" in document
        assert "M18FPD2-0012345" in document
        assert "15/03/2024" in document
        assert "Total Tools Brendale" in document
        assert "$549.00" in document
        assert "Standard Manufacturer" in document
        assert "MI-2024-318204" in document
        assert "15/03/2024 - 15/03/2029" in document
        assert "  Motor won't start" in document.splitlines()

    def test_analysis(self, tool_factory):
        document = _render(tool_factory())
        clause = get_policy("milwaukee").clauses[0]

        assert "LIKELY COVERED" in document
        assert "87%" in document
        assert f"Relevant clause ({clause.section}):" in document
        assert f'"{clause.text}"' in document

    def test_ends_with_consumer_law_note(self, tool_factory):
        assert _render(tool_factory()).endswith(CONSUMER_LAW_NOTE + "\n")

    def test_without_card_or_clauses(self, tool_factory):
        document = _render(tool_factory(brand="other", warranty_card_number=None, warranty_type="dealer"))

        assert "Card #" not in document
        assert "Relevant clause" not in document
        assert "Dealer" in document