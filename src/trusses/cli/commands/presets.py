"""Presets command group: list, show and init standard frame sizes."""

from pathlib import Path
from typing import Annotated

import typer

from trusses.application.dtos import DEFAULT_DEPTH, MAX_DEPTH, MIN_DEPTH
from trusses.application.presets import PresetManager, PresetNotFoundError
from trusses.domain import RequirementAggregator

presets_app = typer.Typer(
    name="presets",
    help="Standard photo-zone frame sizes.",
)


@presets_app.command(name="list")
def list_presets() -> None:
    """List the bundled frame sizes."""
    presets = PresetManager().list_presets()
    name_width = max(len(p.name) for p in presets)

    typer.echo("Available presets:")
    typer.echo()
    for preset in presets:
        typer.echo(f"  {preset.name:<{name_width}}  - {preset.description}")
    typer.echo()
    typer.echo("Use 'trusses plan --preset <name>' to plan one of these frames.")


@presets_app.command(name="show")
def show_preset(
    name: Annotated[str, typer.Argument(help="Preset name, e.g. 3x2.5m")],
) -> None:
    """Show a preset and the modules it needs."""
    try:
        preset = PresetManager().get_preset(name)
    except PresetNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    requirements = RequirementAggregator().aggregate(preset.width, preset.height)
    typer.echo(f"{preset.name}: {preset.description}")
    typer.echo()
    typer.echo("Required modules:")
    for length, count in requirements.required.items():
        typer.echo(f"  {length}mm x {count}")
    typer.echo(f"Total joints: {requirements.joints.total_joints}")


@presets_app.command(name="init")
def init_preset(
    name: Annotated[str, typer.Argument(help="Preset name")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    depth: Annotated[
        int,
        typer.Option("--depth", "-d", min=MIN_DEPTH, max=MAX_DEPTH, help="Frame depth in mm"),
    ] = DEFAULT_DEPTH,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing file")] = False,
) -> None:
    """Write a starter configuration file for a preset.

    Examples:
        trusses presets init 3x2.5m
        trusses presets init 5x3m --output stage.json --force
        trusses presets init 4x2.5m --depth 1500
    """
    manager = PresetManager()
    if not manager.preset_exists(name):
        available = ", ".join(p.name for p in manager.list_presets())
        typer.echo(f"Error: Preset not found: {name}", err=True)
        typer.echo(f"Available presets: {available}", err=True)
        raise typer.Exit(code=1)

    output = output or Path(f"{name}.json")
    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_preset(name, output, depth)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Created: {output}")
