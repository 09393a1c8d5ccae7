"""
ToolVault - Main Entry Point

Runs the registration and claim flows end to end against an in-memory
tool collection. Receipt OCR is served by canned receipt text so the
scenarios run without a text-recognition provider.
"""

import asyncio
import json
import logging
import sys
from datetime import date, timedelta
from typing import Any, Dict

from toolvault.compute import get_warranty_remaining, get_warranty_status
from toolvault.config import ToolVaultConfig
from toolvault.orchestrator import ToolVaultOrchestrator
from toolvault.servers.ocr.src import ReceiptOCRClient
from toolvault.storage import ToolRepository
from toolvault.utils import format_currency, format_date

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)


# =============================================================================
# DEMO RECEIPTS - Canned OCR output keyed by image name
# =============================================================================

_RECENT = (date.today() - timedelta(days=5)).strftime("%d/%m/%Y")

DEMO_RECEIPTS = {
    "total-tools.jpg": "\n".join([
        "TOTAL TOOLS BRENDALE",
        "Tax Invoice 00482913",
        "Milwaukee M18 FUEL 1/2in Hammer Drill Kit",
        "Qty 1",
        f"{_RECENT} 10:42",
        "SUBTOTAL $499.09",
        "GST $49.91",
        "TOTAL $549.00",
        "EFTPOS $549.00",
    ]),
    "sydney-tools.jpg": "\n".join([
        "Sydney Tools Geebung",
        "Makita 18V LXT Brushless Circular Saw",
        "DHS680Z",
        f"Date: {_RECENT}",
        "Item $329.00",
        "TOTAL $329.00",
    ]),
    "blurry.jpg": "",
}


class CannedTextRecognizer:
    """Returns demo receipt text for a known image name."""

    async def recognize(self, image_base64: str) -> str:
        return DEMO_RECEIPTS.get(image_base64, "")


# =============================================================================
# DEMO SCENARIOS
# =============================================================================

TEST_SCENARIOS = [
    {
        "name": "Milwaukee drill - serial match + receipt + defect claim",
        "serial": "m18fpd2-0012345",
        "receipt": "total-tools.jpg",
        "category": "drill",
        "is_registered": False,
        "warranty_card": True,
        "issue": "Motor won't start after charging the battery.",
    },
    {
        "name": "Makita saw - unregistered, inside the registration window",
        "serial": "DHS680-7781234",
        "receipt": "sydney-tools.jpg",
        "category": "saw",
        "is_registered": False,
        "warranty_card": False,
        "issue": "Blade guard is worn and scratched.",
    },
    {
        "name": "Unknown brand - unreadable receipt, manual entry",
        "serial": "XQ-55120",
        "receipt": "blurry.jpg",
        "category": "other",
        "is_registered": False,
        "warranty_card": False,
        "issue": "Sparks from the vents.",
    },
]

EXPIRED_CLAIM = {
    "name": "DeWalt driver - claim on an expired warranty",
    "tool_id": "tool-default-dewalt-driver",
    "issue": "Chuck no longer holds bits.",
}


def _print_progress(index: int, label: str) -> None:
    print(f"    [{index + 1}] {label}")


class ToolVaultRunner:
    """Runs demo scenarios through the orchestrator."""

    def __init__(self):
        cfg = ToolVaultConfig.from_env()
        self.orchestrator = ToolVaultOrchestrator(
            repository=ToolRepository(path=None),
            ocr_client=ReceiptOCRClient(CannedTextRecognizer()),
            cfg=cfg,
        )

    async def run_scenario(self, scenario: Dict[str, Any]) -> Dict[str, Any]:
        """Register a tool and file a claim for it."""
        print(f"\n{'='*70}")
        print(f"SCENARIO: {scenario['name']}")
        print(f"{'='*70}")

        orchestrator = self.orchestrator
        form = orchestrator.start_registration(scenario["serial"])
        print(f"\n>>> Serial: {form.serial_number} -> brand: {form.detected_brand or 'no match'}")
        if not form.detected_brand:
            print("    Brand must be selected manually; default warranty applies.")

        scan = await orchestrator.scan_receipt(form, scenario["receipt"])
        form = scan.form.model_copy(update={
            "category": scenario["category"],
            "is_registered": scenario["is_registered"],
        })
        if scan.notice:
            print(f"\n>>> Receipt: {scan.notice}")
        else:
            parsed = scan.ocr.parsed
            print("\n>>> Receipt:")
            print(f"    Store: {parsed.store_name} ({parsed.confidence.store}%)")
            print(f"    Date:  {parsed.purchase_date} ({parsed.confidence.date}%)")
            print(f"    Item:  {parsed.item_description} ({parsed.confidence.item}%)")
            print(f"    Price: {parsed.price} ({parsed.confidence.price}%)")

        if scenario["warranty_card"]:
            form = orchestrator.attach_warranty_card(form)
            print(f"\n>>> Warranty card: {form.warranty_card_number}")

        print("\n>>> Matching:")
        calculation = await orchestrator.match_warranty(form, progress=_print_progress)
        print(f"    {calculation.duration_years}-year warranty, expires "
              f"{format_date(calculation.warranty_end_date)}")
        for warning in calculation.warnings:
            print(f"    ! {warning}")

        tool = orchestrator.confirm_save(form, calculation)
        print(f"\n>>> Saved {tool.id} ({tool.name}, {format_currency(tool.purchase_price)}, "
              f"match {tool.match_confidence}%)")

        return await self.run_claim(tool.id, scenario["issue"])

    async def run_claim(self, tool_id: str, issue: str) -> Dict[str, Any]:
        print(f"\n>>> Claim: \"{issue}\"")
        draft = await self.orchestrator.analyse_claim(tool_id, issue, progress=_print_progress)
        print()
        print(draft.document)
        return {
            "tool_id": tool_id,
            "claim_reference": draft.claim_reference,
            "verdict": draft.analysis.verdict,
            "confidence": draft.analysis.confidence,
        }

    async def run_all_scenarios(self):
        """Run all demo scenarios."""
        print("\n" + "=" * 70)
        print("  TOOLVAULT - Running All Demo Scenarios")
        print("=" * 70)
        logger.info(f"Running {len(TEST_SCENARIOS) + 1} demo scenarios")

        summary = []
        for scenario in TEST_SCENARIOS:
            result = await self.run_scenario(scenario)
            summary.append((scenario["name"], result))

        print(f"\n{'='*70}")
        print(f"SCENARIO: {EXPIRED_CLAIM['name']}")
        print(f"{'='*70}")
        result = await self.run_claim(EXPIRED_CLAIM["tool_id"], EXPIRED_CLAIM["issue"])
        summary.append((EXPIRED_CLAIM["name"], result))

        print("\n" + "=" * 70)
        print("  SUMMARY")
        print("=" * 70)
        for name, result in summary:
            print(f"  {name}")
            print(f"      Claim: {result['claim_reference']}, Verdict: {result['verdict']} "
                  f"({result['confidence']}%)")
        print("=" * 70 + "\n")

    def show_dashboard(self):
        """Print warranty status for every tool in the collection."""
        print("\n" + "=" * 70)
        print("  TOOLVAULT - Dashboard")
        print("=" * 70)
        for tool in self.orchestrator.repository.list():
            status = get_warranty_status(tool.warranty_end_date).value
            print(f"  {tool.id}: {tool.name}")
            print(f"      {status.upper()} - {get_warranty_remaining(tool.warranty_end_date)}")
        print("-" * 70)
        print(json.dumps(self.orchestrator.dashboard(), indent=2))


async def main():
    """Main entry point."""
    runner = ToolVaultRunner()

    if len(sys.argv) > 1:
        if sys.argv[1] == "--scenarios":
            await runner.run_all_scenarios()
        elif sys.argv[1] == "--dashboard":
            runner.show_dashboard()
        elif sys.argv[1] == "--help":
            print("Usage:")
            print("  python main.py              - Run all demo scenarios")
            print("  python main.py --scenarios  - Run all demo scenarios")
            print("  python main.py --dashboard  - Show warranty status of the default tools")
            print("  python main.py --help       - Show this help")
        else:
            print(f"Unknown argument: {sys.argv[1]}")
            print("Use --help for usage information")
    else:
        await runner.run_all_scenarios()


if __name__ == "__main__":
    asyncio.run(main())
