"""
Tool Models

Pydantic models for registered tools, the registration form and the
derived warranty calculation.
"""

from datetime import date, datetime
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .receipt import ReceiptConfidence


class ToolCategory(str, Enum):
    """Tool category enumeration."""
    DRILL = "drill"
    SAW = "saw"
    GRINDER = "grinder"
    DRIVER = "driver"
    CHAINSAW = "chainsaw"
    HAND_TOOL = "hand_tool"
    BATTERY = "battery"
    OTHER = "other"


class WarrantyType(str, Enum):
    """Kind of warranty attached to a tool."""
    STANDARD = "standard"
    EXTENDED = "extended"
    DEALER = "dealer"


class WarrantyStatus(str, Enum):
    """Warranty status derived from the end date."""
    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"


class WarrantyCalculation(BaseModel):
    """Warranty window computed from purchase date, brand and category."""
    model_config = ConfigDict(frozen=True)

    warranty_end_date: date
    duration_years: int
    warnings: List[str] = Field(default_factory=list)


class Tool(BaseModel):
    """
    A registered tool.

    Stored as a whole record by the repository; updates replace the record.
    """
    model_config = ConfigDict(use_enum_values=True)

    id: str
    brand: str
    name: str
    model: str
    serial_number: str
    category: ToolCategory = ToolCategory.OTHER
    purchase_date: date
    purchase_store: str
    purchase_price: int = Field(default=0, ge=0, description="Purchase price in cents")
    warranty_type: WarrantyType = WarrantyType.STANDARD
    warranty_card_number: Optional[str] = None
    warranty_start_date: date
    warranty_end_date: date
    match_confidence: Optional[int] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "Tool":
        if self.warranty_end_date < self.warranty_start_date:
            raise ValueError("warranty_end_date must not be before warranty_start_date")
        return self


class ToolForm(BaseModel):
    """
    Registration form state collected across the add-tool steps.

    Dates are kept as entered (DD/MM/YYYY) and the amount as a display
    string such as "$1,099.00"; both are normalized on save.
    """
    model_config = ConfigDict(use_enum_values=True)

    serial_number: str = ""
    detected_brand: Optional[str] = None
    manual_brand: Optional[str] = None
    store_name: str = ""
    purchase_date: str = ""
    purchase_amount: str = ""
    item_description: str = ""
    warranty_card_number: str = ""
    warranty_type: WarrantyType = WarrantyType.STANDARD
    category: ToolCategory = ToolCategory.DRILL
    is_registered: bool = False
    ocr_confidence: Optional[ReceiptConfidence] = None

    @property
    def effective_brand(self) -> Optional[str]:
        """Brand detected from the serial, else the one picked by hand."""
        return self.detected_brand or self.manual_brand or None
