"""Shared option types and input resolution for CLI commands."""

from pathlib import Path
from typing import Annotated

import typer

from trusses.application.config import (
    ConfigError,
    PlannerConfiguration,
    config_to_frame_input,
    load_config,
)
from trusses.application.dtos import DEFAULT_DEPTH, FrameInput
from trusses.application.presets import PresetManager, PresetNotFoundError
from trusses.domain import InvalidInventoryEntryError, Inventory
from trusses.infrastructure import InventoryStore, InventoryStoreError

WidthOption = Annotated[int | None, typer.Option("--width", "-w", help="Frame width in mm")]
HeightOption = Annotated[int | None, typer.Option("--height", "-h", help="Frame height in mm")]
DepthOption = Annotated[int | None, typer.Option("--depth", "-d", help="Frame depth in mm")]
PresetOption = Annotated[
    str | None, typer.Option("--preset", "-p", help="Standard frame size, e.g. 3x2.5m")
]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="JSON planning configuration file")
]
InventoryOption = Annotated[
    Path | None, typer.Option("--inventory", "-i", help="JSON inventory file")
]
StockOption = Annotated[
    list[str] | None,
    typer.Option("--stock", "-s", help="Owned modules as LENGTH=COUNT; repeatable"),
]


def fail(message: str) -> None:
    """Print an error and exit with code 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def parse_stock(entries: list[str] | None) -> dict[int, int]:
    """Parse ``LENGTH=COUNT`` entries, later entries winning."""
    stock: dict[int, int] = {}
    for entry in entries or []:
        length, sep, count = entry.partition("=")
        if not sep:
            fail(f"Invalid --stock value '{entry}', expected LENGTH=COUNT")
        try:
            stock[int(length)] = int(count)
        except ValueError:
            fail(f"Invalid --stock value '{entry}', LENGTH and COUNT must be integers")
    return stock


def read_config(path: Path | None) -> PlannerConfiguration | None:
    if path is None:
        return None
    try:
        return load_config(path)
    except ConfigError as e:
        fail(str(e))


def resolve_inventory(
    config: PlannerConfiguration | None,
    inventory_file: Path | None,
    stock: list[str] | None,
) -> Inventory:
    """Combine inventory sources.

    The configuration inventory is the base, an inventory file replaces it,
    and ``--stock`` entries override individual lengths.
    """
    counts: dict[int, int] = dict(config.inventory) if config else {}
    if inventory_file is not None:
        try:
            counts = InventoryStore(inventory_file).load().to_dict()
        except InventoryStoreError as e:
            fail(e.message)
    counts.update(parse_stock(stock))
    try:
        return Inventory.from_mapping(counts)
    except InvalidInventoryEntryError as e:
        fail(str(e))


def resolve_frame(
    config: PlannerConfiguration | None,
    preset: str | None,
    width: int | None,
    height: int | None,
    depth: int | None,
) -> FrameInput:
    """Work out the frame size.

    Explicit dimensions win over a preset, which wins over a configuration
    file. Width and height must come from one of the three.
    """
    frame = config_to_frame_input(config) if config else None
    if preset is not None:
        try:
            chosen = PresetManager().get_preset(preset)
        except PresetNotFoundError as e:
            fail(str(e))
        frame = FrameInput(
            width=chosen.width,
            height=chosen.height,
            depth=frame.depth if frame else DEFAULT_DEPTH,
        )

    width = width if width is not None else (frame.width if frame else None)
    height = height if height is not None else (frame.height if frame else None)
    if width is None or height is None:
        fail("Frame size required: pass --width and --height, --preset or --config")
    if depth is None:
        depth = frame.depth if frame else DEFAULT_DEPTH
    return FrameInput(width=width, height=height, depth=depth)
