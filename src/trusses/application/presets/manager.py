"""Preset manager for the standard photo-zone frame sizes.

Presets are small, so they are defined inline rather than shipped as package
data. A preset can be written out as a starter configuration file.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from trusses.application.dtos import DEFAULT_DEPTH


class PresetNotFoundError(Exception):
    """Raised when a requested preset does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Preset not found: {name}")


@dataclass(frozen=True)
class FramePreset:
    """A named standard frame size in mm."""

    name: str
    width: int
    height: int

    @property
    def description(self) -> str:
        return f"{self.width}mm x {self.height}mm frame"


PRESETS: tuple[FramePreset, ...] = (
    FramePreset("2x2m", 2000, 2000),
    FramePreset("2.5x2.5m", 2500, 2500),
    FramePreset("3x2.5m", 3000, 2500),
    FramePreset("3.5x2.5m", 3500, 2500),
    FramePreset("4x2.5m", 4000, 2500),
    FramePreset("5x3m", 5000, 3000),
)


class PresetManager:
    """Manager for bundled frame size presets.

    Example:
        manager = PresetManager()
        for preset in manager.list_presets():
            print(preset.name, preset.description)

        manager.init_preset("3x2.5m", Path("stage.json"))
    """

    def __init__(self, presets: tuple[FramePreset, ...] = PRESETS) -> None:
        self._presets = {preset.name: preset for preset in presets}

    def list_presets(self) -> list[FramePreset]:
        """List all presets in display order."""
        return list(self._presets.values())

    def get_preset(self, name: str) -> FramePreset:
        """Look up a preset by name.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        try:
            return self._presets[name]
        except KeyError as e:
            raise PresetNotFoundError(name) from e

    def preset_exists(self, name: str) -> bool:
        return name in self._presets

    def render_config(self, name: str, depth: int = DEFAULT_DEPTH) -> str:
        """Starter configuration JSON for a preset with an empty inventory."""
        preset = self.get_preset(name)
        data = {
            "schema_version": "1.0",
            "frame": {"width": preset.width, "height": preset.height, "depth": depth},
            "inventory": {},
        }
        return json.dumps(data, indent=2) + "\n"

    def init_preset(self, name: str, output_path: Path, depth: int = DEFAULT_DEPTH) -> None:
        """Write a starter configuration for a preset to ``output_path``.

        Raises:
            PresetNotFoundError: If the preset does not exist.
        """
        output_path.write_text(self.render_config(name, depth), encoding="utf-8")
