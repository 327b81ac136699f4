"""Exporters for planned truss frames.

- Exporter: Protocol every exporter implements
- ExporterRegistry: Format name -> exporter class
- ExportManager: Writes one plan to several formats

Registered exporters:
- bom: Bill of Materials (text, csv or json)

Usage:
    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["bom"], plan_output, project_name="stage", output_format="csv")
"""

from trusses.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)
from trusses.infrastructure.exporters.bom import (
    BillOfMaterials,
    BomGenerator,
    PartBomItem,
    TrussBomItem,
)

__all__ = [
    "BillOfMaterials",
    "BomGenerator",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "PartBomItem",
    "TrussBomItem",
    "UnsupportedFormatError",
]
