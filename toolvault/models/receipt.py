"""
Receipt Models

Structured output of the receipt text parser and the OCR collaborator.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ReceiptConfidence(BaseModel):
    """Per-field confidence scores (0-100) for a parsed receipt."""
    store: int = Field(default=0, ge=0, le=100)
    date: int = Field(default=0, ge=0, le=100)
    item: int = Field(default=0, ge=0, le=100)
    price: int = Field(default=0, ge=0, le=100)

    @property
    def average(self) -> float:
        """Mean confidence across the four fields."""
        return (self.store + self.date + self.item + self.price) / 4


class ParsedReceipt(BaseModel):
    """
    Fields extracted from raw receipt text.

    Absent fields are None with a confidence of zero; parsing never raises.
    """
    store_name: Optional[str] = None
    purchase_date: Optional[str] = None
    item_description: Optional[str] = None
    price: Optional[str] = None
    raw_text: str = ""
    confidence: ReceiptConfidence = Field(default_factory=ReceiptConfidence)

    @classmethod
    def empty(cls, raw_text: str = "") -> "ParsedReceipt":
        """Return an all-null parse."""
        return cls(raw_text=raw_text)

    def is_empty(self) -> bool:
        return not any([self.store_name, self.purchase_date, self.item_description, self.price])


class OcrResult(BaseModel):
    """Response of the receipt OCR endpoint."""
    success: bool
    parsed: Optional[ParsedReceipt] = None
    error: Optional[str] = None
