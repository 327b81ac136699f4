"""Infrastructure layer - exporters, formatters and persistence."""

from .exporters import BomGenerator, ExporterRegistry, ExportManager, UnsupportedFormatError
from .formatters import (
    BlueprintFormatter,
    FitResultFormatter,
    HardwareReportFormatter,
    InventoryFormatter,
    RequirementsFormatter,
)
from .inventory_store import InventoryStore, InventoryStoreError

__all__ = [
    "BlueprintFormatter",
    "BomGenerator",
    "ExportManager",
    "ExporterRegistry",
    "FitResultFormatter",
    "HardwareReportFormatter",
    "InventoryFormatter",
    "InventoryStore",
    "InventoryStoreError",
    "RequirementsFormatter",
    "UnsupportedFormatError",
]
