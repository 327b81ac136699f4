"""Greedy decomposition of a frame dimension into truss modules."""

from __future__ import annotations

import logging

from ..value_objects import TRUSS_SEGMENTS, SegmentRun

logger = logging.getLogger(__name__)

__all__ = ["InvalidDimensionError", "SegmentDecomposer", "decompose", "decompose_ordered"]


class InvalidDimensionError(ValueError):
    """Raised when a length to decompose is not a positive integer."""

    def __init__(self, length: object) -> None:
        self.length = length
        super().__init__(f"Dimension must be a positive integer in mm, got {length!r}")


class SegmentDecomposer:
    """Covers a length with catalog modules, largest first.

    Each catalog length is used as many times as it fits before moving to the
    next one. Whatever is left after the smallest module becomes a single
    custom piece at the end. For the standard 1000/500/250 catalog this also
    minimizes the number of standard modules.
    """

    def __init__(self, catalog: tuple[int, ...] = TRUSS_SEGMENTS) -> None:
        self.catalog = tuple(sorted(catalog, reverse=True))

    def decompose(self, length: int) -> tuple[SegmentRun, ...]:
        """Summary form: one ``SegmentRun`` per distinct module length.

        Raises:
            InvalidDimensionError: If ``length`` is not a positive integer.
        """
        self._check(length)
        remaining = length
        runs: list[SegmentRun] = []
        for segment in self.catalog:
            count = remaining // segment
            if count > 0:
                runs.append(SegmentRun(length=segment, count=count))
                remaining -= count * segment
        if remaining > 0:
            runs.append(SegmentRun(length=remaining, count=1))
        logger.debug(f"Decomposed {length}mm into {[(r.length, r.count) for r in runs]}")
        return tuple(runs)

    def decompose_ordered(self, length: int) -> tuple[int, ...]:
        """Ordered form: one entry per physical piece, largest first."""
        return tuple(
            run.length for run in self.decompose(length) for _ in range(run.count)
        )

    @staticmethod
    def _check(length: int) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidDimensionError(length)


_default = SegmentDecomposer()


def decompose(length: int) -> tuple[SegmentRun, ...]:
    """Decompose ``length`` over the standard catalog (summary form)."""
    return _default.decompose(length)


def decompose_ordered(length: int) -> tuple[int, ...]:
    """Decompose ``length`` over the standard catalog (one entry per piece)."""
    return _default.decompose_ordered(length)
