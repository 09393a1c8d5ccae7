"""
Receipt OCR Integration Module
==============================
Client for the external text-recognition provider.
"""

from .api_client import (
    NO_IMAGE_ERROR,
    OCRProviderError,
    ReceiptOCRClient,
    TextRecognizer,
    VisionTextRecognizer,
    strip_data_url,
)

__all__ = [
    "NO_IMAGE_ERROR",
    "OCRProviderError",
    "ReceiptOCRClient",
    "TextRecognizer",
    "VisionTextRecognizer",
    "strip_data_url",
]
