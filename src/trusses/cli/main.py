"""Typer CLI for truss frame planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from trusses.application import AutoFitCommand, FitInput, PlanFrameCommand
from trusses.application.config import PlannerConfiguration, config_to_fit_input
from trusses.application.dtos import FrameInput, FramePlanOutput
from trusses.cli.commands import inventory_app, presets_app, validate_command
from trusses.cli.options import (
    ConfigOption,
    DepthOption,
    HeightOption,
    InventoryOption,
    PresetOption,
    StockOption,
    WidthOption,
    fail,
    read_config,
    resolve_frame,
    resolve_inventory,
)
from trusses.infrastructure import (
    BlueprintFormatter,
    BomGenerator,
    ExportManager,
    FitResultFormatter,
    HardwareReportFormatter,
    RequirementsFormatter,
)

app = typer.Typer(
    name="trusses",
    help="Plan photo-zone truss frames from the modules you own.",
)

app.command(name="validate")(validate_command)
app.add_typer(presets_app, name="presets")
app.add_typer(inventory_app, name="inventory")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Print debug logs to stderr")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _plan(
    config: PlannerConfiguration | None,
    preset: str | None,
    width: int | None,
    height: int | None,
    depth: int | None,
    inventory_file: Path | None,
    stock: list[str] | None,
) -> FramePlanOutput:
    frame = resolve_frame(config, preset, width, height, depth)
    inventory = resolve_inventory(config, inventory_file, stock)

    result = PlanFrameCommand().execute(frame, inventory)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def plan(
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    preset: PresetOption = None,
    config_file: ConfigOption = None,
    inventory_file: InventoryOption = None,
    stock: StockOption = None,
) -> None:
    """Show required modules, shortages and hardware for a frame.

    Examples:
        trusses plan --width 3000 --height 2500 --stock 1000=10 --stock 500=2
        trusses plan --preset 5x3m --inventory stock.json
    """
    result = _plan(read_config(config_file), preset, width, height, depth, inventory_file, stock)
    typer.echo(RequirementsFormatter().format(result))
    typer.echo()
    typer.echo(HardwareReportFormatter().format(result.requirements))


@app.command()
def bom(
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    preset: PresetOption = None,
    config_file: ConfigOption = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="text, csv or json"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Write {project}_bom.<ext> here instead of printing"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = None,
) -> None:
    """Print or export the bill of materials for a frame."""
    config = read_config(config_file)
    output_format = output_format or (config.output.bom_format if config else "text")
    project_name = project_name or (config.output.project_name if config else "truss")

    try:
        generator = BomGenerator(output_format=output_format)
    except ValueError as e:
        fail(str(e))

    result = _plan(config, preset, width, height, depth, None, None)
    if output_dir is None:
        typer.echo(generator.export_string(result))
        return

    try:
        path = ExportManager(output_dir).export_single(
            "bom", result, project_name, output_format=output_format
        )
    except OSError as e:
        fail(f"Export error: {e}")
    typer.echo(f"Exported BOM: {path}")


@app.command()
def blueprint(
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    preset: PresetOption = None,
    config_file: ConfigOption = None,
    inventory_file: InventoryOption = None,
    stock: StockOption = None,
    scale: Annotated[
        int, typer.Option("--scale", min=10, help="Millimetres per drawn character")
    ] = 100,
) -> None:
    """Draw each edge of a frame with owned and missing pieces."""
    result = _plan(read_config(config_file), preset, width, height, depth, inventory_file, stock)
    typer.echo(BlueprintFormatter(mm_per_char=scale).format(result.blueprint))


@app.command()
def fit(
    config_file: ConfigOption = None,
    inventory_file: InventoryOption = None,
    stock: StockOption = None,
    min_width: Annotated[int | None, typer.Option("--min-width", help="Smallest width in mm")] = None,
    max_width: Annotated[int | None, typer.Option("--max-width", help="Largest width in mm")] = None,
    min_height: Annotated[int | None, typer.Option("--min-height", help="Smallest height in mm")] = None,
    max_height: Annotated[int | None, typer.Option("--max-height", help="Largest height in mm")] = None,
    step: Annotated[int | None, typer.Option("--step", help="Grid step in mm")] = None,
    show_plan: Annotated[
        bool, typer.Option("--plan", help="Also print the requirements of the chosen size")
    ] = False,
) -> None:
    """Find the largest frame the inventory can build.

    Example:
        trusses fit --stock 1000=16 --stock 500=4
    """
    config = read_config(config_file)
    inventory = resolve_inventory(config, inventory_file, stock)

    fit_input = config_to_fit_input(config) if config else FitInput()
    overrides = {
        "min_width": min_width,
        "max_width": max_width,
        "min_height": min_height,
        "max_height": max_height,
        "step": step,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(fit_input, name, value)

    try:
        result = AutoFitCommand().execute(inventory, fit_input)
    except ValueError as e:
        fail(str(e))

    typer.echo(FitResultFormatter().format(result))
    if show_plan:
        planned = PlanFrameCommand().execute(
            FrameInput(width=result.width, height=result.height), inventory
        )
        typer.echo()
        typer.echo(RequirementsFormatter().format(planned))


if __name__ == "__main__":
    app()
