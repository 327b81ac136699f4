"""Standard frame size presets.

This package provides the bundled frame sizes offered by the planner and a
PresetManager class for accessing them.
"""

from trusses.application.presets.manager import (
    PRESETS,
    FramePreset,
    PresetManager,
    PresetNotFoundError,
)

__all__ = [
    "PRESETS",
    "FramePreset",
    "PresetManager",
    "PresetNotFoundError",
]
