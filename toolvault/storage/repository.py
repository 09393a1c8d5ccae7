"""
Tool Repository
===============
Key-value persisted collection of registered tools.

The whole collection is stored as a JSON document under a single key,
read once at startup and rewritten after every add, update or delete.
Missing, empty or unreadable data falls back to the built-in defaults.
"""

import json
import logging
import os
import threading
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from toolvault.models import Tool
from .defaults import default_tools


logger = logging.getLogger(__name__)

STORAGE_KEY = "toolvault-tools"


class ToolNotFoundError(KeyError):
    """Raised when a tool id is not in the collection."""

    def __init__(self, tool_id: str):
        super().__init__(tool_id)
        self.tool_id = tool_id

    def __str__(self) -> str:
        return f"Tool not found: {self.tool_id}"


class ToolRepository:
    """
    Tool collection with load-on-start, save-on-mutation and reset.

    Each mutation is a read-modify-write of the whole collection and is
    serialized with a lock.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        storage_key: str = STORAGE_KEY,
        defaults: Callable[[], List[Tool]] = default_tools
    ):
        """
        Initialize the repository and load the stored collection.

        Args:
            path: JSON file backing the collection (in-memory when None)
            storage_key: Key the collection is stored under
            defaults: Factory for the fallback dataset
        """
        self.path = path
        self.storage_key = storage_key
        self._defaults = defaults
        self._lock = threading.Lock()
        self._tools: List[Tool] = self._load()

    @classmethod
    def from_config(cls, cfg) -> "ToolRepository":
        return cls(path=cfg.storage.path, storage_key=cfg.storage.storage_key)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _read_document(self) -> Dict[str, Any]:
        if not self.path or not os.path.isfile(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def _load(self) -> List[Tool]:
        try:
            document = self._read_document()
            stored = document.get(self.storage_key)
            if stored:
                tools = [Tool.model_validate(item) for item in stored]
                logger.info(f"Loaded {len(tools)} tool(s) from {self.path}")
                return tools
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Stored tools unreadable, using defaults - path={self.path}, error={e}")
            return self._defaults()

        logger.debug("No stored tools, using defaults")
        return self._defaults()

    def _write_document(self, document: Dict[str, Any]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
        os.replace(tmp_path, self.path)

    def _existing_document(self) -> Dict[str, Any]:
        try:
            return self._read_document()
        except (OSError, ValueError):
            return {}

    def _save(self, tools: List[Tool]) -> None:
        """Persist a collection; callers swap it in only after this returns."""
        if not self.path:
            return
        document = self._existing_document()
        document[self.storage_key] = [tool.model_dump(mode="json") for tool in tools]
        self._write_document(document)
        logger.debug(f"Saved {len(tools)} tool(s) to {self.path}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Tool]:
        """All tools, newest first."""
        return list(self._tools)

    def get(self, tool_id: str) -> Optional[Tool]:
        return next((tool for tool in self._tools if tool.id == tool_id), None)

    def require(self, tool_id: str) -> Tool:
        tool = self.get(tool_id)
        if tool is None:
            raise ToolNotFoundError(tool_id)
        return tool

    def __len__(self) -> int:
        return len(self._tools)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, tool: Tool) -> Tool:
        """Add a tool at the front of the collection."""
        with self._lock:
            tools = [tool] + self._tools
            self._save(tools)
            self._tools = tools
        logger.info(f"Added tool - id={tool.id}, brand={tool.brand}")
        return tool

    def update(self, tool_id: str, updates: Dict[str, Any]) -> Tool:
        """
        Replace a tool record with updated fields applied.

        Raises:
            ToolNotFoundError: If no tool has this id
            ValidationError: If the updated record is invalid
        """
        with self._lock:
            for index, tool in enumerate(self._tools):
                if tool.id == tool_id:
                    merged = {**tool.model_dump(), **updates, "id": tool_id}
                    updated = Tool.model_validate(merged)
                    tools = self._tools[:index] + [updated] + self._tools[index + 1:]
                    self._save(tools)
                    self._tools = tools
                    logger.info(f"Updated tool - id={tool_id}, fields={sorted(updates)}")
                    return updated
        raise ToolNotFoundError(tool_id)

    def delete(self, tool_id: str) -> bool:
        """Remove a tool. Returns False when the id is unknown."""
        with self._lock:
            remaining = [tool for tool in self._tools if tool.id != tool_id]
            if len(remaining) == len(self._tools):
                return False
            self._save(remaining)
            self._tools = remaining
        logger.info(f"Deleted tool - id={tool_id}")
        return True

    def reset_to_defaults(self) -> List[Tool]:
        """Drop stored tools and return to the default dataset."""
        with self._lock:
            if self.path:
                document = self._existing_document()
                document.pop(self.storage_key, None)
                self._write_document(document)
            self._tools = self._defaults()
        logger.info("Tool collection reset to defaults")
        return self.list()
