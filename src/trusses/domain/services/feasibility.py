"""Whole-frame comparison of required modules against owned stock."""

from __future__ import annotations

from collections.abc import Mapping

from ..value_objects import ShortageLine

__all__ = ["FeasibilityChecker", "is_buildable", "shortages"]


class FeasibilityChecker:
    """Checks a requirement table against inventory across all edges at once.

    This is a holistic count check. It does not look at the order in which
    edges consume stock, so a single edge can appear fully owned in an
    assignment while the frame as a whole is not buildable.
    """

    @staticmethod
    def is_buildable(
        required: Mapping[int, int],
        inventory: Mapping[int, int],
    ) -> bool:
        """True iff every required length is covered; missing sizes count as 0."""
        for length, req_count in required.items():
            if inventory.get(length, 0) < req_count:
                return False
        return True

    @staticmethod
    def shortages(
        required: Mapping[int, int],
        inventory: Mapping[int, int],
    ) -> tuple[ShortageLine, ...]:
        """Required / owned / shortage rows, descending by length."""
        return tuple(
            ShortageLine(
                length=length,
                required=required[length],
                owned=inventory.get(length, 0),
            )
            for length in sorted(required, reverse=True)
        )


def is_buildable(required: Mapping[int, int], inventory: Mapping[int, int]) -> bool:
    """See FeasibilityChecker.is_buildable."""
    return FeasibilityChecker.is_buildable(required, inventory)


def shortages(
    required: Mapping[int, int],
    inventory: Mapping[int, int],
) -> tuple[ShortageLine, ...]:
    """See FeasibilityChecker.shortages."""
    return FeasibilityChecker.shortages(required, inventory)
