"""Storage Package - Persisted tool collection."""

from .defaults import default_tools
from .repository import STORAGE_KEY, ToolNotFoundError, ToolRepository

__all__ = ["STORAGE_KEY", "ToolNotFoundError", "ToolRepository", "default_tools"]
