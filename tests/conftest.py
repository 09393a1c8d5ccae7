"""
Shared fixtures for the ToolVault tests.
"""

from datetime import date, datetime

import pytest

from toolvault.config import ToolVaultConfig
from toolvault.models import Tool
from toolvault.orchestrator import ToolVaultOrchestrator
from toolvault.servers.ocr.src import ReceiptOCRClient
from toolvault.storage import ToolRepository


BUNNINGS_RECEIPT = "\n".join([
    "BUNNINGS WAREHOUSE",
    "Stafford QLD",
    "Makita 18V Brushless Impact Driver Kit",
    "DTD153",
    "12/03/2024",
    "SUBTOTAL $299.00",
    "TOTAL $299.00",
])


class StubRecognizer:
    """Text recognizer returning fixed text and recording what it was sent."""

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    async def recognize(self, image_base64: str) -> str:
        self.calls.append(image_base64)
        if self.error is not None:
            raise self.error
        return self.text


def build_tool(**overrides) -> Tool:
    """A valid Milwaukee drill record, with any field overridden."""
    fields = {
        "id": "tool-test-drill",
        "brand": "milwaukee",
        "name": "Milwaukee M18 FUEL Hammer Drill",
        "model": "M18FPD2",
        "serial_number": "M18FPD2-0012345",
        "category": "drill",
        "purchase_date": date(2024, 3, 15),
        "purchase_store": "Total Tools Brendale",
        "purchase_price": 54900,
        "warranty_type": "standard",
        "warranty_card_number": "MI-2024-318204",
        "warranty_start_date": date(2024, 3, 15),
        "warranty_end_date": date(2029, 3, 15),
        "match_confidence": 92,
        "created_at": datetime(2024, 3, 15, 10, 0),
    }
    fields.update(overrides)
    return Tool(**fields)


@pytest.fixture
def tool_factory():
    return build_tool


@pytest.fixture
def repository():
    """In-memory repository seeded with the default tools."""
    return ToolRepository(path=None)


@pytest.fixture
def test_config():
    return ToolVaultConfig(progress_delay_seconds=0, user_name="Sam Taylor", user_email="sam@example.com")


@pytest.fixture
def recognizer():
    return StubRecognizer(BUNNINGS_RECEIPT)


@pytest.fixture
def orchestrator(repository, recognizer, test_config):
    return ToolVaultOrchestrator(
        repository=repository,
        ocr_client=ReceiptOCRClient(recognizer),
        cfg=test_config,
    )
