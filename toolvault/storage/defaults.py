"""
Built-in default tool collection.

Served when nothing has been stored yet or the stored data is unreadable.
"""

from datetime import date, datetime
from typing import List

from toolvault.models import Tool


def default_tools() -> List[Tool]:
    """Return a fresh copy of the default dataset."""
    return [
        Tool(
            id="tool-default-milwaukee-drill",
            brand="milwaukee",
            name="Milwaukee M18 FUEL 1/2in Hammer Drill Kit",
            model="M18FPD2-502C",
            serial_number="M18FPD2-4821937",
            category="drill",
            purchase_date=date(2024, 3, 15),
            purchase_store="Total Tools Brendale",
            purchase_price=54900,
            warranty_type="standard",
            warranty_card_number="MI-2024-318204",
            warranty_start_date=date(2024, 3, 15),
            warranty_end_date=date(2029, 3, 15),
            match_confidence=92,
            created_at=datetime(2024, 3, 15, 10, 12),
        ),
        Tool(
            id="tool-default-makita-saw",
            brand="makita",
            name="Makita 18V LXT Brushless Circular Saw",
            model="DHS680Z",
            serial_number="DHS680-0093321",
            category="saw",
            purchase_date=date(2023, 11, 2),
            purchase_store="Sydney Tools Geebung",
            purchase_price=32900,
            warranty_type="standard",
            warranty_start_date=date(2023, 11, 2),
            warranty_end_date=date(2026, 11, 2),
            match_confidence=88,
            created_at=datetime(2023, 11, 2, 14, 40),
        ),
        Tool(
            id="tool-default-dewalt-driver",
            brand="dewalt",
            name="DeWalt 20V MAX XR Brushless Impact Driver",
            model="DCF887N",
            serial_number="DCF887-2217764",
            category="driver",
            purchase_date=date(2021, 6, 20),
            purchase_store="Bunnings Stafford",
            purchase_price=27900,
            warranty_type="standard",
            warranty_start_date=date(2021, 6, 20),
            warranty_end_date=date(2024, 6, 20),
            match_confidence=90,
            created_at=datetime(2021, 6, 20, 9, 5),
        ),
        Tool(
            id="tool-default-stihl-chainsaw",
            brand="stihl",
            name="Stihl MS 261 C-M Professional Chainsaw",
            model="MS 261 C-M",
            serial_number="MS261-5510982",
            category="chainsaw",
            purchase_date=date(2025, 2, 8),
            purchase_store="Bunnings Stafford",
            purchase_price=94900,
            warranty_type="dealer",
            warranty_card_number="ST-2025-774120",
            warranty_start_date=date(2025, 2, 8),
            warranty_end_date=date(2027, 2, 8),
            match_confidence=85,
            created_at=datetime(2025, 2, 8, 11, 30),
        ),
        Tool(
            id="tool-default-bosch-hammer",
            brand="bosch",
            name="Bosch 18V Brushless Rotary Hammer",
            model="GBH 18V-26",
            serial_number="GBH18-3308815",
            category="drill",
            purchase_date=date(2024, 9, 1),
            purchase_store="Sydney Tools Geebung",
            purchase_price=38900,
            warranty_type="extended",
            warranty_start_date=date(2024, 9, 1),
            warranty_end_date=date(2027, 9, 1),
            match_confidence=90,
            created_at=datetime(2024, 9, 1, 16, 20),
        ),
    ]
