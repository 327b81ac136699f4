"""Tests for PresetManager."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from trusses.application.config import load_config
from trusses.application.presets import PresetManager, PresetNotFoundError


class TestPresetManager:
    def test_lists_standard_sizes_in_order(self) -> None:
        names = [p.name for p in PresetManager().list_presets()]

        assert names == ["2x2m", "2.5x2.5m", "3x2.5m", "3.5x2.5m", "4x2.5m", "5x3m"]

    def test_get_preset(self) -> None:
        preset = PresetManager().get_preset("3x2.5m")

        assert (preset.width, preset.height) == (3000, 2500)
        assert preset.description == "3000mm x 2500mm frame"

    def test_unknown_preset(self) -> None:
        with pytest.raises(PresetNotFoundError) as exc_info:
            PresetManager().get_preset("10x10m")

        assert exc_info.value.name == "10x10m"

    def test_preset_exists(self) -> None:
        manager = PresetManager()

        assert manager.preset_exists("5x3m")
        assert not manager.preset_exists("5x5m")

    def test_render_config(self) -> None:
        data = json.loads(PresetManager().render_config("5x3m", depth=1500))

        assert data["frame"] == {"width": 5000, "height": 3000, "depth": 1500}
        assert data["inventory"] == {}

    def test_init_preset_writes_loadable_config(self, tmp_path: Path) -> None:
        path = tmp_path / "stage.json"
        PresetManager().init_preset("2x2m", path)

        config = load_config(path)
        assert config.frame.width == 2000
        assert config.frame.height == 2000

    def test_init_preset_with_depth(self, tmp_path: Path) -> None:
        path = tmp_path / "stage.json"
        PresetManager().init_preset("3x2.5m", path, depth=1500)

        assert load_config(path).frame.depth == 1500
