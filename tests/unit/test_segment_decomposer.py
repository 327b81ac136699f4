"""Tests for SegmentDecomposer."""

from __future__ import annotations

import pytest

from trusses.domain import (
    InvalidDimensionError,
    SegmentDecomposer,
    SegmentRun,
    decompose,
    decompose_ordered,
)


class TestDecompose:
    """Tests for the summary form."""

    def test_exact_multiple_of_largest_module(self) -> None:
        assert decompose(3000) == (SegmentRun(1000, 3),)

    def test_uses_every_catalog_length(self) -> None:
        assert decompose(1750) == (
            SegmentRun(1000, 1),
            SegmentRun(500, 1),
            SegmentRun(250, 1),
        )

    def test_remainder_becomes_single_custom_piece(self) -> None:
        runs = decompose(1100)

        assert runs == (SegmentRun(1000, 1), SegmentRun(100, 1))
        assert runs[-1].is_custom
        assert not runs[0].is_custom

    def test_length_below_smallest_module(self) -> None:
        assert decompose(100) == (SegmentRun(100, 1),)

    def test_smallest_module_only(self) -> None:
        assert decompose(250) == (SegmentRun(250, 1),)

    @pytest.mark.parametrize("length", [1, 99, 250, 999, 1750, 2600, 4321, 6000])
    def test_runs_sum_to_length(self, length: int) -> None:
        assert sum(run.total_length for run in decompose(length)) == length

    @pytest.mark.parametrize("length", [1, 333, 2600, 4321])
    def test_at_most_one_custom_piece_and_it_is_last(self, length: int) -> None:
        runs = decompose(length)
        custom = [run for run in runs if run.is_custom]

        assert len(custom) <= 1
        if custom:
            assert runs[-1] is custom[0]
            assert custom[0].count == 1
            assert custom[0].length < 250

    def test_runs_are_in_descending_length_order(self) -> None:
        lengths = [run.length for run in decompose(2875)]

        assert lengths == sorted(lengths, reverse=True)

    @pytest.mark.parametrize("bad", [0, -250, 2.5, "1000", True, None])
    def test_rejects_invalid_length(self, bad) -> None:
        with pytest.raises(InvalidDimensionError):
            decompose(bad)

    def test_invalid_dimension_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            decompose(-1)


class TestDecomposeOrdered:
    """Tests for the one-entry-per-piece form."""

    def test_expands_runs(self) -> None:
        assert decompose_ordered(2500) == (1000, 1000, 500)

    def test_custom_piece_last(self) -> None:
        assert decompose_ordered(2600) == (1000, 1000, 500, 100)

    def test_matches_summary_form(self) -> None:
        ordered = decompose_ordered(3750)
        runs = decompose(3750)

        assert len(ordered) == sum(run.count for run in runs)
        assert sum(ordered) == 3750


class TestCustomCatalog:
    """A decomposer can be built over a different catalog."""

    def test_catalog_is_sorted_descending(self) -> None:
        decomposer = SegmentDecomposer(catalog=(250, 2000))

        assert decomposer.catalog == (2000, 250)
        assert decomposer.decompose_ordered(2600) == (2000, 250, 250, 100)
