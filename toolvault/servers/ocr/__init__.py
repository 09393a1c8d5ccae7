"""Receipt OCR server."""
