"""CLI subcommands for the trusses application.

- validate: Validate a configuration file
- presets: List and initialize standard frame sizes
- inventory: Show and edit an inventory file
"""

from trusses.cli.commands.inventory import inventory_app
from trusses.cli.commands.presets import presets_app
from trusses.cli.commands.validate import validate_command

__all__ = ["inventory_app", "presets_app", "validate_command"]
