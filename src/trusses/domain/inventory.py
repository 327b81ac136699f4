"""Owned module stock and the working copy consumed during assignment.

Normalization policy for caller-supplied counts:

- A negative integer count is clamped to 0 and a warning is logged. Negative
  stock is never kept.
- A count that is not an integer (a fractional float, a bool, a string) is
  rejected with InvalidInventoryEntryError, as is a size key that is not a
  positive integer. Integral floats such as ``3.0`` and digit strings used as
  keys (JSON object keys) are accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ["InvalidInventoryEntryError", "Inventory", "WorkingInventory"]


class InvalidInventoryEntryError(ValueError):
    """Raised when an inventory size or count cannot be interpreted."""

    def __init__(self, key: Any, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid inventory entry {key!r}: {value!r} ({reason})")


def _coerce_length(key: Any) -> int:
    if isinstance(key, bool):
        raise InvalidInventoryEntryError(key, None, "size must be an integer")
    if isinstance(key, str):
        stripped = key.strip()
        if not stripped.isdigit():
            raise InvalidInventoryEntryError(key, None, "size must be an integer")
        key = int(stripped)
    elif isinstance(key, float):
        if not key.is_integer():
            raise InvalidInventoryEntryError(key, None, "size must be an integer")
        key = int(key)
    elif not isinstance(key, int):
        raise InvalidInventoryEntryError(key, None, "size must be an integer")
    if key <= 0:
        raise InvalidInventoryEntryError(key, None, "size must be positive")
    return key


def _coerce_count(length: int, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidInventoryEntryError(length, value, "count must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidInventoryEntryError(length, value, "count must be an integer")
        value = int(value)
    elif not isinstance(value, int):
        raise InvalidInventoryEntryError(length, value, "count must be an integer")
    if value < 0:
        logger.warning(f"Clamping negative stock for {length}mm ({value}) to 0")
        return 0
    return value


@dataclass(frozen=True)
class Inventory(Mapping[int, int]):
    """Immutable stock of owned modules keyed by module length in mm.

    Lookups of sizes that are not stocked return 0 through ``count``.
    Iteration yields lengths in descending order.
    """

    _counts: dict[int, int] = field(default_factory=dict, hash=False)

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any] | None) -> Inventory:
        """Build a normalized inventory from a caller-supplied mapping.

        Raises:
            InvalidInventoryEntryError: If a size or count is not an integer,
                or a size is not positive.
        """
        counts: dict[int, int] = {}
        for key, value in (data or {}).items():
            length = _coerce_length(key)
            counts[length] = counts.get(length, 0) + _coerce_count(length, value)
        return cls(dict(sorted(counts.items(), reverse=True)))

    @classmethod
    def empty(cls) -> Inventory:
        return cls({})

    def __getitem__(self, length: int) -> int:
        return self._counts[length]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._counts, reverse=True))

    def __len__(self) -> int:
        return len(self._counts)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._counts.items())))

    def count(self, length: int) -> int:
        """Owned count for a length, 0 if the size is not stocked."""
        return self._counts.get(length, 0)

    @property
    def total_pieces(self) -> int:
        return sum(self._counts.values())

    def to_dict(self) -> dict[int, int]:
        """Plain length -> count mapping, descending by length."""
        return {length: self._counts[length] for length in self}

    def set_count(self, length: int, count: Any) -> Inventory:
        """Return a copy with the count for ``length`` replaced."""
        key = _coerce_length(length)
        counts = dict(self._counts)
        counts[key] = _coerce_count(key, count)
        return Inventory(dict(sorted(counts.items(), reverse=True)))

    def add(self, length: int, quantity: int = 1) -> Inventory:
        """Return a copy with ``quantity`` more modules of ``length``."""
        key = _coerce_length(length)
        return self.set_count(key, self.count(key) + quantity)

    def remove(self, length: int, quantity: int = 1) -> Inventory:
        """Return a copy with up to ``quantity`` fewer modules; floors at 0."""
        key = _coerce_length(length)
        return self.set_count(key, max(0, self.count(key) - quantity))

    def working_copy(self) -> WorkingInventory:
        """Snapshot this inventory into a consumable working copy."""
        return WorkingInventory(dict(self._counts))


class WorkingInventory:
    """Private, consumable copy of an inventory snapshot.

    The matcher takes pieces from this copy as it walks the frame edges. The
    originating Inventory is never touched.
    """

    def __init__(self, counts: dict[int, int]) -> None:
        self._remaining = dict(counts)

    def take(self, length: int) -> bool:
        """Consume one module of ``length`` if any remain."""
        if self._remaining.get(length, 0) > 0:
            self._remaining[length] -= 1
            return True
        return False

    def remaining(self, length: int) -> int:
        return self._remaining.get(length, 0)

    def snapshot(self) -> Inventory:
        """Freeze what is left into an Inventory."""
        return Inventory(dict(sorted(self._remaining.items(), reverse=True)))
