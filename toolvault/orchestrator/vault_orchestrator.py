"""
ToolVault Orchestrator

Drives the two user flows of the tool vault:

1. Registration - serial number → brand detection → receipt OCR →
   warranty matching → confirm and save
2. Claim - issue description → claim analysis → claim document

It also serves the tool list (status filter and search), tool removal and
the authorised service centres for each brand.

Staged progress shown during matching and analysis is cosmetic; results
are computed before the stages are revealed.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from toolvault.compute import (
    build_claim_analysis,
    calculate_warranty_expiry,
    detect_brand_by_prefix,
    filter_tools,
    get_warranty_status,
    normalize_serial,
)
from toolvault.config import ToolVaultConfig, config as default_config
from toolvault.documents import render_claim_document
from toolvault.models import (
    OcrResult,
    ServiceCentre,
    Tool,
    ToolForm,
    WarrantyCalculation,
    WarrantyClaimAnalysis,
    WarrantyStatus,
)
from toolvault.registry import (
    DEFAULT_COMMON_ISSUES,
    brand_name,
    get_brand,
    get_policy,
    get_service_centres,
)
from toolvault.servers.ocr.src import ReceiptOCRClient, VisionTextRecognizer
from toolvault.storage import ToolRepository
from toolvault.utils import (
    generate_claim_reference,
    generate_tool_id,
    generate_warranty_card_number,
    parse_price_to_cents,
    parse_purchase_date,
)
from .progress import CLAIM_ANALYSIS_STAGES, REGISTRATION_STAGES, ProgressCallback, run_stages


logger = logging.getLogger(__name__)

OCR_EMPTY_NOTICE = "Could not read receipt. Please fill in the fields manually."
OCR_FAILED_NOTICE = "Could not process receipt. Please fill in the fields manually."

SERIAL_MATCH_SCORE = 100
MANUAL_BRAND_SCORE = 50


class ReceiptScan(BaseModel):
    """Outcome of scanning a receipt into the registration form."""
    form: ToolForm
    ocr: OcrResult
    notice: Optional[str] = None


class ClaimDraft(BaseModel):
    """A generated claim: analysis, reference and rendered document."""
    tool: Tool
    issue_description: str
    analysis: WarrantyClaimAnalysis
    claim_reference: str
    document: str


def derive_match_confidence(form: ToolForm) -> int:
    """
    Confidence that the saved record matches the real tool.

    Serial-detected brands score higher than hand-picked ones; when a
    receipt was scanned the score is averaged with the OCR field confidences.
    """
    if form.detected_brand:
        score = SERIAL_MATCH_SCORE
    elif form.manual_brand:
        score = MANUAL_BRAND_SCORE
    else:
        score = 0

    if form.ocr_confidence is not None:
        score = (score + form.ocr_confidence.average) / 2
    return max(0, min(100, round(score)))


class ToolVaultOrchestrator:
    """
    Main orchestrator for the tool vault flows.

    Holds the tool repository and the OCR client; all warranty and claim
    logic is delegated to the compute package.
    """

    def __init__(
        self,
        repository: Optional[ToolRepository] = None,
        ocr_client: Optional[ReceiptOCRClient] = None,
        cfg: Optional[ToolVaultConfig] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            repository: Tool repository (defaults to the configured storage)
            ocr_client: Receipt OCR client (defaults to the configured provider)
            cfg: Configuration (defaults to the environment)
        """
        self.config = cfg or default_config
        self.repository = repository or ToolRepository.from_config(self.config)
        self.ocr_client = ocr_client or ReceiptOCRClient(VisionTextRecognizer.from_config(self.config))
        logger.info(
            f"ToolVault orchestrator initialized - tools={len(self.repository)}, "
            f"progress_delay={self.config.progress_delay_seconds}"
        )

    # ------------------------------------------------------------------
    # Registration flow
    # ------------------------------------------------------------------

    def start_registration(self, serial_number: str) -> ToolForm:
        """Step 1: normalize the serial and detect the brand."""
        normalized = normalize_serial(serial_number)
        match = detect_brand_by_prefix(normalized)
        if match is None:
            logger.info(f"No brand matched serial - serial={normalized}")
        return ToolForm(serial_number=normalized, detected_brand=match.brand_id if match else None)

    async def scan_receipt(self, form: ToolForm, image: Optional[str]) -> ReceiptScan:
        """
        Step 2: OCR the receipt and prefill the form.

        Failures never raise; the form is returned for manual entry with a
        notice for the user.
        """
        result = await self.ocr_client.scan(image)

        if not result.success:
            logger.warning(f"Receipt OCR failed, manual entry required - error={result.error}")
            return ReceiptScan(form=form, ocr=result, notice=OCR_FAILED_NOTICE)

        parsed = result.parsed
        if parsed is None or parsed.is_empty():
            return ReceiptScan(form=form, ocr=result, notice=OCR_EMPTY_NOTICE)

        updated = form.model_copy(update={
            "store_name": parsed.store_name or "",
            "purchase_date": parsed.purchase_date or "",
            "purchase_amount": parsed.price or "",
            "item_description": parsed.item_description or "",
            "ocr_confidence": parsed.confidence,
        })
        return ReceiptScan(form=updated, ocr=result)

    def attach_warranty_card(self, form: ToolForm, today: Optional[date] = None) -> ToolForm:
        """Step 3: record an uploaded warranty card and assign it a number."""
        number = generate_warranty_card_number(form.effective_brand, today)
        return form.model_copy(update={"warranty_card_number": number})

    def calculate(self, form: ToolForm, today: Optional[date] = None) -> WarrantyCalculation:
        purchase = parse_purchase_date(form.purchase_date, today)
        return calculate_warranty_expiry(
            brand_id=form.effective_brand,
            category=form.category,
            purchase_date=purchase,
            is_registered=form.is_registered,
            reference_date=today,
        )

    async def match_warranty(
        self,
        form: ToolForm,
        progress: Optional[ProgressCallback] = None,
        today: Optional[date] = None
    ) -> WarrantyCalculation:
        """Step 4: compute the warranty window behind the staged matching display."""
        calculation = self.calculate(form, today)
        await run_stages(REGISTRATION_STAGES, self.config.progress_delay_seconds, progress)
        return calculation

    def confirm_save(
        self,
        form: ToolForm,
        calculation: Optional[WarrantyCalculation] = None,
        today: Optional[date] = None
    ) -> Tool:
        """Build the tool record from the form and add it to the repository."""
        purchase = parse_purchase_date(form.purchase_date, today)
        calculation = calculation or self.calculate(form, today)
        brand = get_brand(form.effective_brand)

        tool = Tool(
            id=generate_tool_id(),
            brand=brand.id if brand else "other",
            name=form.item_description or f"{brand_name(form.effective_brand, 'Unknown')} Power Tool",
            model=form.serial_number,
            serial_number=form.serial_number,
            category=form.category,
            purchase_date=purchase,
            purchase_store=form.store_name or "Unknown Store",
            purchase_price=parse_price_to_cents(form.purchase_amount),
            warranty_type=form.warranty_type,
            warranty_card_number=form.warranty_card_number or None,
            warranty_start_date=purchase,
            warranty_end_date=max(calculation.warranty_end_date, purchase),
            match_confidence=derive_match_confidence(form),
            created_at=datetime.now(),
        )
        return self.repository.add(tool)

    # ------------------------------------------------------------------
    # Tool list
    # ------------------------------------------------------------------

    def list_tools(
        self,
        status: Optional[str] = None,
        query: Optional[str] = None,
        today: Optional[date] = None
    ) -> List[Tool]:
        """
        Tools filtered by warranty status and a search over name, brand,
        serial number and store.

        Raises:
            ValueError: If status is not "all", "active", "expiring" or "expired"
        """
        return filter_tools(self.repository.list(), status=status, query=query, today=today)

    def delete_tool(self, tool_id: str) -> Tool:
        """
        Remove a tool from the vault.

        Raises:
            ToolNotFoundError: If the tool id is unknown
        """
        tool = self.repository.require(tool_id)
        self.repository.delete(tool_id)
        return tool

    def service_centres(self, brand_id: Optional[str] = None) -> List[ServiceCentre]:
        """Authorised service centres for a brand, nearest first."""
        return get_service_centres(brand_id)

    def service_centres_for_tool(self, tool_id: str) -> List[ServiceCentre]:
        """Where a registered tool can be taken for a claim."""
        return get_service_centres(self.repository.require(tool_id).brand)

    # ------------------------------------------------------------------
    # Claim flow
    # ------------------------------------------------------------------

    def common_issues(self, tool_id: str) -> List[str]:
        """Quick-pick issue descriptions for a tool's brand."""
        tool = self.repository.require(tool_id)
        policy = get_policy(tool.brand)
        return list(policy.common_issues) if policy else list(DEFAULT_COMMON_ISSUES)

    async def analyse_claim(
        self,
        tool_id: str,
        issue_description: str,
        progress: Optional[ProgressCallback] = None,
        today: Optional[date] = None
    ) -> ClaimDraft:
        """
        Analyse a claim and render the claim document.

        Raises:
            ToolNotFoundError: If the tool id is unknown
        """
        tool = self.repository.require(tool_id)
        analysis = build_claim_analysis(tool, issue_description, today)
        reference = generate_claim_reference(today)

        name = brand_name(tool.brand, "your tool")
        stages = [label.format(brand=name) for label in CLAIM_ANALYSIS_STAGES]
        await run_stages(stages, self.config.progress_delay_seconds, progress)

        document = render_claim_document(
            tool=tool,
            analysis=analysis,
            issue_description=issue_description,
            claim_reference=reference,
            user_name=self.config.user_name,
            user_email=self.config.user_email,
            generated=today,
        )
        logger.info(
            f"Claim analysed - tool_id={tool_id}, reference={reference}, verdict={analysis.verdict}"
        )
        return ClaimDraft(
            tool=tool,
            issue_description=issue_description,
            analysis=analysis,
            claim_reference=reference,
            document=document,
        )

    # ------------------------------------------------------------------
    # Overview
    # ------------------------------------------------------------------

    def dashboard(self, today: Optional[date] = None) -> Dict[str, Any]:
        """Warranty status counts and total value across all tools."""
        counts = {status.value: 0 for status in WarrantyStatus}
        expiring: List[str] = []
        for tool in self.repository.list():
            status = get_warranty_status(tool.warranty_end_date, today)
            counts[status.value] += 1
            if status == WarrantyStatus.EXPIRING:
                expiring.append(tool.id)

        tools = self.repository.list()
        return {
            "total_tools": len(tools),
            "total_value_cents": sum(tool.purchase_price for tool in tools),
            "status_counts": counts,
            "expiring_tool_ids": expiring,
        }
