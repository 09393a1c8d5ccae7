"""Models Package - Data models for the tool vault."""

from .policy import (
    Brand,
    ClaimVerdict,
    ExclusionCheck,
    SerialMatch,
    SerialPrefixEntry,
    WarrantyClaimAnalysis,
    WarrantyClause,
    WarrantyPolicy,
)
from .receipt import OcrResult, ParsedReceipt, ReceiptConfidence
from .service_centre import ServiceCentre
from .tool import (
    Tool,
    ToolCategory,
    ToolForm,
    WarrantyCalculation,
    WarrantyStatus,
    WarrantyType,
)

__all__ = [
    "Brand",
    "ClaimVerdict",
    "ExclusionCheck",
    "OcrResult",
    "ParsedReceipt",
    "ReceiptConfidence",
    "SerialMatch",
    "SerialPrefixEntry",
    "ServiceCentre",
    "Tool",
    "ToolCategory",
    "ToolForm",
    "WarrantyCalculation",
    "WarrantyClaimAnalysis",
    "WarrantyClause",
    "WarrantyPolicy",
    "WarrantyStatus",
    "WarrantyType",
]
