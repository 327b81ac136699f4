"""Tests for the auto-fit grid search."""

from __future__ import annotations

import pytest

from trusses.application import AutoFitCommand, FitInput
from trusses.domain import (
    FALLBACK_SIZE,
    MAX_CANDIDATES,
    AutoFitSearch,
    Inventory,
    SearchBounds,
    auto_fit,
)


class TestAutoFitSearch:
    """Tests for AutoFitSearch."""

    def test_empty_inventory_falls_back(self) -> None:
        result = AutoFitSearch().search(Inventory.empty())

        assert result.size == FALLBACK_SIZE == (1000, 1000)
        assert result.is_fallback
        assert result.feasible_candidates == 0

    def test_default_grid_size(self) -> None:
        result = AutoFitSearch().search(Inventory.empty())

        # widths 1000..6000 and heights 1000..4000 in 250mm steps
        assert result.candidates_evaluated == 21 * 13

    def test_picks_largest_area(self) -> None:
        result = AutoFitSearch().search(Inventory.from_mapping({1000: 8}))

        assert result.size == (2000, 2000)
        assert not result.is_fallback
        assert result.feasible_candidates == 6

    def test_equal_area_keeps_first_found(self) -> None:
        # 2000x3000 and 3000x2000 both need ten 1000mm modules
        assert auto_fit({1000: 10}) == (2000, 3000)

    def test_finds_at_least_known_buildable_size(self, stage_inventory: Inventory) -> None:
        result = AutoFitSearch().search(stage_inventory)

        assert result.area >= 3000 * 2500

    def test_custom_bounds(self, stage_inventory: Inventory) -> None:
        bounds = SearchBounds(min_width=3000, max_width=3000, min_height=2500, max_height=2500)
        result = AutoFitSearch().search(stage_inventory, bounds)

        assert result.size == (3000, 2500)
        assert result.candidates_evaluated == 1

    def test_small_bounds_below_fallback_area(self) -> None:
        bounds = SearchBounds(min_width=500, max_width=500, min_height=500, max_height=500)
        result = AutoFitSearch().search({500: 4}, bounds)

        assert result.size == (500, 500)
        assert not result.is_fallback

    def test_fallback_ignores_bounds(self) -> None:
        bounds = SearchBounds(min_width=3000, max_width=4000, min_height=3000, max_height=4000)

        assert auto_fit({}, bounds) == (1000, 1000)

    def test_inventory_is_not_consumed(self, stage_inventory: Inventory) -> None:
        AutoFitSearch().search(stage_inventory)

        assert stage_inventory.to_dict() == {1000: 10, 500: 2}

    @pytest.mark.parametrize("step", [0, -250])
    def test_rejects_non_positive_step(self, step: int) -> None:
        with pytest.raises(ValueError):
            AutoFitSearch().search({}, step=step)

    def test_rejects_oversized_grid(self) -> None:
        bounds = SearchBounds(min_width=1, max_width=10_000_000, min_height=1, max_height=10_000_000)

        with pytest.raises(ValueError, match="more than the limit"):
            AutoFitSearch().search({}, bounds, step=1)


class TestSearchBounds:
    def test_rejects_inverted_width(self) -> None:
        with pytest.raises(ValueError):
            SearchBounds(min_width=4000, max_width=3000)

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            SearchBounds(min_height=0)

    def test_candidate_count(self) -> None:
        assert SearchBounds().candidate_count(250) == 273
        assert SearchBounds(max_width=1000, max_height=1000).candidate_count(250) == 1
        assert SearchBounds(min_width=1000, max_width=1100).candidate_count(250) == 13


class TestAutoFitCommand:
    """Tests for the application-level command."""

    def test_defaults(self) -> None:
        result = AutoFitCommand().execute(Inventory.from_mapping({1000: 8}))

        assert result.size == (2000, 2000)

    def test_fit_input_bounds_and_step(self) -> None:
        fit_input = FitInput(min_width=1000, max_width=3000, min_height=1000, max_height=3000, step=1000)
        result = AutoFitCommand().execute(Inventory.from_mapping({1000: 8}), fit_input)

        assert result.candidates_evaluated == 9
        assert result.size == (2000, 2000)

    def test_invalid_fit_input_raises(self) -> None:
        with pytest.raises(ValueError, match="Step must be positive"):
            AutoFitCommand().execute(Inventory.empty(), FitInput(step=0))

    def test_oversized_fit_input_rejected(self) -> None:
        fit_input = FitInput(max_width=20000, max_height=10000, step=1)

        assert any("more than the limit" in e for e in fit_input.validate())

    def test_largest_allowed_ranges_at_default_step(self) -> None:
        fit_input = FitInput(min_width=250, max_width=20000, min_height=250, max_height=10000)

        assert fit_input.validate() == []
        assert fit_input.to_bounds().candidate_count(fit_input.step) <= MAX_CANDIDATES
