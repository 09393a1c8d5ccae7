"""
Configuration Management for ToolVault
======================================
Centralized configuration for storage, the receipt OCR provider, the
staged progress display and the server surfaces.
"""

import os
from typing import Optional
from pydantic import BaseModel, Field


class OCRConfig(BaseModel):
    """Text-recognition provider settings."""

    api_url: str = Field(
        default="https://vision.googleapis.com/v1/images:annotate",
        description="Image-to-text endpoint (Google Vision images:annotate compatible)"
    )
    api_key: Optional[str] = Field(default=None, description="API key sent as the 'key' query parameter")
    timeout_seconds: float = Field(default=15.0, gt=0, description="Total request timeout")


class StorageConfig(BaseModel):
    """Tool repository settings."""

    path: Optional[str] = Field(
        default=None,
        description="JSON file holding the tool collection; in-memory only when unset"
    )
    storage_key: str = Field(default="toolvault-tools", description="Key the collection is stored under")


class ToolVaultConfig(BaseModel):
    """Main configuration for the ToolVault application."""

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    # Staged progress is cosmetic; zero disables the delays entirely
    progress_delay_seconds: float = Field(default=0.0, ge=0)

    api_host: str = "127.0.0.1"
    api_port: int = 8010
    mcp_port: int = 8011

    user_name: str = "ToolVault User"
    user_email: str = "user@example.com"

    @classmethod
    def from_env(cls) -> "ToolVaultConfig":
        """Load configuration from environment variables."""

        ocr = OCRConfig(
            api_url=os.environ.get("TOOLVAULT_OCR_URL", "https://vision.googleapis.com/v1/images:annotate"),
            api_key=os.environ.get("TOOLVAULT_OCR_API_KEY"),
            timeout_seconds=float(os.environ.get("TOOLVAULT_OCR_TIMEOUT", "15")),
        )

        storage = StorageConfig(
            path=os.environ.get("TOOLVAULT_STORAGE_PATH"),
            storage_key=os.environ.get("TOOLVAULT_STORAGE_KEY", "toolvault-tools"),
        )

        return cls(
            ocr=ocr,
            storage=storage,
            progress_delay_seconds=float(os.environ.get("TOOLVAULT_PROGRESS_DELAY", "0")),
            api_host=os.environ.get("TOOLVAULT_API_HOST", "127.0.0.1"),
            api_port=int(os.environ.get("TOOLVAULT_API_PORT", "8010")),
            mcp_port=int(os.environ.get("TOOLVAULT_MCP_PORT", "8011")),
            user_name=os.environ.get("TOOLVAULT_USER_NAME", "ToolVault User"),
            user_email=os.environ.get("TOOLVAULT_USER_EMAIL", "user@example.com"),
        )


# Global config instance
config = ToolVaultConfig.from_env()
