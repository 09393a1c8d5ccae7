"""
Receipt OCR Client
==================
Calls the external image-to-text provider and turns the recognized text
into a parsed receipt.

The provider is a black box: it receives a base64 image and returns raw
text. Any failure resolves to an unsuccessful OcrResult so the caller can
fall back to manual entry.
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Protocol

import aiohttp

from toolvault.compute.receipt_parser import parse_receipt
from toolvault.models import OcrResult, ParsedReceipt


logger = logging.getLogger(__name__)

NO_IMAGE_ERROR = "No image provided"


class OCRProviderError(Exception):
    """Raised when the provider answers with an error payload."""
    pass


class TextRecognizer(Protocol):
    """Anything that turns a base64 image into raw text."""

    async def recognize(self, image_base64: str) -> str:
        ...


def strip_data_url(image: str) -> str:
    """Drop a ``data:image/...;base64,`` prefix if present."""
    return image.split(",", 1)[1] if "," in image else image


class VisionTextRecognizer:
    """Text detection through a Google Vision ``images:annotate`` compatible endpoint."""

    def __init__(self, api_url: str, api_key: str = None, timeout_seconds: float = 15.0):
        """
        Initialize the recognizer.

        Args:
            api_url: images:annotate endpoint URL
            api_key: API key passed as the ``key`` query parameter
            timeout_seconds: Total request timeout
        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_config(cls, cfg) -> "VisionTextRecognizer":
        return cls(
            api_url=cfg.ocr.api_url,
            api_key=cfg.ocr.api_key,
            timeout_seconds=cfg.ocr.timeout_seconds,
        )

    @staticmethod
    def extract_text(payload: Dict[str, Any]) -> str:
        """
        Pull the full recognized text out of an annotate response.

        Raises:
            OCRProviderError: If the provider reported an error or the
                payload does not have the annotate response shape
        """
        responses = payload.get("responses") or [{}]
        if not isinstance(responses, list) or not isinstance(responses[0], dict):
            raise OCRProviderError("Malformed 'responses' in text recognition payload")
        first = responses[0]

        error = first.get("error")
        if isinstance(error, dict):
            raise OCRProviderError(str(error.get("message") or "Text recognition failed"))
        if error:
            raise OCRProviderError(str(error))

        full = first.get("fullTextAnnotation") or {}
        if not isinstance(full, dict):
            raise OCRProviderError("Malformed 'fullTextAnnotation' in text recognition payload")
        text = full.get("text")
        if text:
            if not isinstance(text, str):
                raise OCRProviderError("Malformed 'fullTextAnnotation.text' in text recognition payload")
            return text

        annotations = first.get("textAnnotations") or []
        if not isinstance(annotations, list):
            raise OCRProviderError("Malformed 'textAnnotations' in text recognition payload")
        if annotations and isinstance(annotations[0], dict):
            description = annotations[0].get("description") or ""
            if not isinstance(description, str):
                raise OCRProviderError("Malformed 'textAnnotations' in text recognition payload")
            return description
        return ""

    async def recognize(self, image_base64: str) -> str:
        body = {
            "requests": [
                {
                    "image": {"content": image_base64},
                    "features": [{"type": "TEXT_DETECTION"}],
                }
            ]
        }
        params = {"key": self.api_key} if self.api_key else None
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(self.api_url, json=body, params=params) as response:
                response.raise_for_status()
                payload = await response.json()

        if not isinstance(payload, dict):
            raise OCRProviderError("Malformed response from text recognition provider")
        return self.extract_text(payload)


class ReceiptOCRClient:
    """Receipt image → ParsedReceipt, degrading gracefully on failure."""

    def __init__(self, recognizer: TextRecognizer):
        self.recognizer = recognizer

    async def scan(self, image: Optional[str]) -> OcrResult:
        """
        Recognize and parse a receipt image.

        Args:
            image: Base64 image, optionally as a data URL

        Returns:
            OcrResult - success with a parse (empty when no text was found),
            or failure with an error message
        """
        if not image:
            return OcrResult(success=False, error=NO_IMAGE_ERROR)

        try:
            raw_text = await self.recognizer.recognize(strip_data_url(image))
        except (aiohttp.ClientError, asyncio.TimeoutError, OCRProviderError, ValueError) as e:
            logger.warning(f"Receipt recognition failed - error={e!r}")
            return OcrResult(success=False, error=str(e) or "Unknown error during OCR")

        if not (raw_text or "").strip():
            logger.info("Receipt recognition returned no text")
            return OcrResult(success=True, parsed=ParsedReceipt.empty())

        parsed = parse_receipt(raw_text)
        logger.info(
            f"Receipt parsed - store={parsed.store_name!r}, date={parsed.purchase_date}, "
            f"price={parsed.price}"
        )
        return OcrResult(success=True, parsed=parsed)
