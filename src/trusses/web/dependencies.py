"""FastAPI dependency injection for planning services."""

from typing import Annotated

from fastapi import Depends

from trusses.application.commands import AutoFitCommand, PlanFrameCommand
from trusses.application.presets import PresetManager


def get_plan_command() -> PlanFrameCommand:
    return PlanFrameCommand()


def get_fit_command() -> AutoFitCommand:
    return AutoFitCommand()


def get_preset_manager() -> PresetManager:
    return PresetManager()


PlanCommandDep = Annotated[PlanFrameCommand, Depends(get_plan_command)]
FitCommandDep = Annotated[AutoFitCommand, Depends(get_fit_command)]
PresetManagerDep = Annotated[PresetManager, Depends(get_preset_manager)]
