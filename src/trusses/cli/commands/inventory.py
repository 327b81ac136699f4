"""Inventory command group for editing a JSON stock file."""

from pathlib import Path
from typing import Annotated

import typer

from trusses.domain import InvalidInventoryEntryError, Inventory
from trusses.infrastructure import InventoryFormatter, InventoryStore, InventoryStoreError

inventory_app = typer.Typer(
    name="inventory",
    help="Show and edit owned truss modules.",
)

FileArgument = Annotated[Path, typer.Argument(help="JSON inventory file")]
LengthArgument = Annotated[int, typer.Argument(help="Module length in mm")]
QuantityOption = Annotated[
    int, typer.Option("--quantity", "-q", min=1, help="Number of modules")
]


def _load(store: InventoryStore, missing_ok: bool) -> Inventory:
    try:
        return store.load(missing_ok=missing_ok)
    except InventoryStoreError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


def _save(store: InventoryStore, inventory: Inventory) -> None:
    try:
        store.save(inventory)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)


@inventory_app.command(name="show")
def show(path: FileArgument) -> None:
    """Print the stock held in an inventory file."""
    typer.echo(InventoryFormatter().format(_load(InventoryStore(path), missing_ok=False)))


@inventory_app.command(name="add")
def add(path: FileArgument, length: LengthArgument, quantity: QuantityOption = 1) -> None:
    """Add modules of a length, creating the file if needed.

    Example:
        trusses inventory add stock.json 1000 --quantity 4
    """
    store = InventoryStore(path)
    try:
        inventory = _load(store, missing_ok=True).add(length, quantity)
    except InvalidInventoryEntryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _save(store, inventory)
    typer.echo(f"{length}mm: {inventory.count(length)}")


@inventory_app.command(name="remove")
def remove(path: FileArgument, length: LengthArgument, quantity: QuantityOption = 1) -> None:
    """Remove modules of a length; the count never drops below 0."""
    store = InventoryStore(path)
    try:
        inventory = _load(store, missing_ok=False).remove(length, quantity)
    except InvalidInventoryEntryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _save(store, inventory)
    typer.echo(f"{length}mm: {inventory.count(length)}")
