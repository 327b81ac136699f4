"""Tests for configuration advisories and the config adapter."""

from __future__ import annotations

from trusses.application.config import (
    ValidationResult,
    config_to_fit_input,
    config_to_frame_input,
    config_to_inventory,
    config_to_search_bounds,
    load_config_from_dict,
    validate_config,
)
from trusses.domain import SearchBounds


def make_config(width: int = 3000, height: int = 2500, inventory: dict | None = None, **extra):
    data = {
        "schema_version": "1.0",
        "frame": {"width": width, "height": height},
        "inventory": inventory if inventory is not None else {"1000": 10, "500": 2},
    }
    data.update(extra)
    return load_config_from_dict(data)


class TestValidationResult:
    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "b").exit_code == 2
        assert ValidationResult().add_warning("a", "b").add_error("c", "d").exit_code == 1


class TestValidateConfig:
    def test_buildable_standard_frame_is_clean(self) -> None:
        result = validate_config(make_config())

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_custom_remainder_warning(self) -> None:
        result = validate_config(make_config(width=2600, inventory={}))

        paths = [w.path for w in result.warnings]
        assert "frame.width" in paths
        assert any("custom 100mm piece" in w.message for w in result.warnings)

    def test_shortage_warnings(self) -> None:
        result = validate_config(make_config(inventory={"1000": 9, "500": 2}))

        assert result.is_valid
        assert result.exit_code == 2
        assert [w.message for w in result.warnings] == [
            "Short 1 x 1000mm (need 10, have 9)"
        ]

    def test_non_standard_size_warning(self) -> None:
        result = validate_config(make_config(inventory={"1000": 10, "500": 2, "750": 1}))

        assert [w.path for w in result.warnings] == ["inventory.750"]

    def test_negative_count_warning(self) -> None:
        result = validate_config(make_config(inventory={"1000": 10, "500": 2, "250": -4}))

        assert any("treated as 0" in w.message for w in result.warnings)

    def test_depth_warning(self) -> None:
        config = make_config(frame={"width": 3000, "height": 2500, "depth": 1100})

        assert [w.path for w in validate_config(config).warnings] == ["frame.depth"]


class TestAdapter:
    def test_frame_input(self) -> None:
        frame = config_to_frame_input(make_config(frame={"width": 2000, "height": 1500, "depth": 750}))

        assert (frame.width, frame.height, frame.depth) == (2000, 1500, 750)

    def test_inventory(self) -> None:
        assert config_to_inventory(make_config()).to_dict() == {1000: 10, 500: 2}

    def test_inventory_clamps_negative(self) -> None:
        assert config_to_inventory(make_config(inventory={"500": -3})).count(500) == 0

    def test_fit_input_and_bounds(self) -> None:
        config = make_config(auto_fit={"max_width": 4000, "step": 500})

        assert config_to_fit_input(config).step == 500
        assert config_to_search_bounds(config) == SearchBounds(max_width=4000)
