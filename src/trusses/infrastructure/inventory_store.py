"""JSON persistence for owned module stock.

File layout::

    {"inventory": {"1000": 4, "500": 2}}

Keys are module lengths in mm written as strings, since JSON object keys
cannot be integers. Loading converts them back, so a save/load round trip
reproduces the same Inventory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from trusses.domain import InvalidInventoryEntryError, Inventory

logger = logging.getLogger(__name__)


class InventoryStoreError(Exception):
    """Raised when an inventory file cannot be read or written."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(message)


class InventoryStore:
    """Reads and writes an Inventory at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self, missing_ok: bool = False) -> Inventory:
        """Load the stored inventory.

        Args:
            missing_ok: Return an empty inventory instead of failing when
                the file does not exist.

        Raises:
            InventoryStoreError: If the file is missing, unreadable, not
                JSON, or holds invalid entries.
        """
        if not self.exists():
            if missing_ok:
                logger.debug(f"No inventory at {self.path}, starting empty")
                return Inventory.empty()
            raise InventoryStoreError(f"Inventory file not found: {self.path}", self.path)

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise InventoryStoreError(f"Cannot read {self.path}: {e}", self.path) from e
        except UnicodeDecodeError as e:
            raise InventoryStoreError(f"{self.path} is not UTF-8 text: {e}", self.path) from e
        except json.JSONDecodeError as e:
            raise InventoryStoreError(
                f"Invalid JSON in {self.path} (line {e.lineno}): {e.msg}", self.path
            ) from e

        try:
            return Inventory.from_mapping(self._entries(data))
        except InvalidInventoryEntryError as e:
            raise InventoryStoreError(f"{self.path}: {e}", self.path) from e

    def save(self, inventory: Inventory) -> Path:
        """Write ``inventory``, creating parent directories as needed."""
        payload = {"inventory": {str(length): count for length, count in inventory.items()}}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        logger.info(f"Saved {inventory.total_pieces} modules to {self.path}")
        return self.path

    def _entries(self, data: Any) -> dict[str, Any]:
        if data == {}:
            return {}
        entries = data.get("inventory") if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise InventoryStoreError(
                f"{self.path}: expected an object with an 'inventory' mapping", self.path
            )
        return entries
