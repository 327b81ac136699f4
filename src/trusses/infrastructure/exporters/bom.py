"""Bill of Materials generator for truss frames.

Lists everything needed to put a frame up:
- Truss segments: beam and column modules by length, both sides counted
- Frame parts: box corner connectors and heavy base plates
- Connection hardware: conical couplers, connector pins and R-clips

Output formats: text, csv, json
"""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from trusses.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from trusses.application.dtos import FramePlanOutput
    from trusses.domain import FrameRequirements


logger = logging.getLogger(__name__)

BOM_TITLE = "Photo Zone Truss Bill of Materials"
RULE = "-" * 43

FILE_EXTENSIONS = {"text": "txt", "csv": "csv", "json": "json"}


@dataclass(frozen=True)
class TrussBomItem:
    """Linear truss modules of one length on one axis.

    Attributes:
        name: "Horizontal Beam" or "Vertical Column"
        length: Module length in mm
        quantity: Pieces for the whole frame (both beams or both columns)
        is_custom: True for a cut-to-size remainder piece
    """

    name: str
    length: int
    quantity: int
    is_custom: bool = False


@dataclass(frozen=True)
class PartBomItem:
    """A counted part: frame fittings or connection hardware."""

    name: str
    quantity: int
    category: str


@dataclass(frozen=True)
class BillOfMaterials:
    width: int
    height: int
    depth: int
    segments: tuple[TrussBomItem, ...]
    frame_parts: tuple[PartBomItem, ...]
    hardware: tuple[PartBomItem, ...]

    @property
    def total_segments(self) -> int:
        return sum(item.quantity for item in self.segments)

    @property
    def total_hardware(self) -> int:
        return sum(item.quantity for item in self.hardware)


@ExporterRegistry.register("bom")
class BomGenerator:
    """Bill of Materials exporter for planned frames.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" depending on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(
        self,
        output_format: str = "text",
        generated_on: date | None = None,
    ) -> None:
        """Initialize the BOM generator.

        Args:
            output_format: "text", "csv" or "json".
            generated_on: Date stamped on the text document; today if omitted.

        Raises:
            ValueError: If the output format is unknown.
        """
        if output_format not in FILE_EXTENSIONS:
            raise ValueError(
                f"Unknown BOM format '{output_format}'. "
                f"Expected one of: {', '.join(FILE_EXTENSIONS)}"
            )
        self.output_format = output_format
        self.generated_on = generated_on

    @property
    def file_extension(self) -> str:
        return FILE_EXTENSIONS[self.output_format]

    def generate(self, output: FramePlanOutput) -> BillOfMaterials:
        """Build the BOM from a successful plan.

        Raises:
            ValueError: If the plan carries errors instead of requirements.
        """
        if output.requirements is None:
            raise ValueError(
                "Cannot build a bill of materials from an invalid plan: "
                + "; ".join(output.errors)
            )
        return self.from_requirements(output.requirements, depth=output.frame.depth)

    @staticmethod
    def from_requirements(
        requirements: FrameRequirements, depth: int = 1000
    ) -> BillOfMaterials:
        # Each run describes one beam or column; the frame has two of each.
        segments = [
            TrussBomItem("Horizontal Beam", run.length, run.count * 2, run.is_custom)
            for run in requirements.horizontal
        ] + [
            TrussBomItem("Vertical Column", run.length, run.count * 2, run.is_custom)
            for run in requirements.vertical
        ]
        frame_parts = (
            PartBomItem("Corner Connectors (Box)", requirements.corner_connectors, "frame"),
            PartBomItem("Base Plates (Heavy)", requirements.base_plates, "frame"),
        )
        hardware = (
            PartBomItem("Conical Couplers", requirements.hardware.couplers, "hardware"),
            PartBomItem("Connector Pins", requirements.hardware.pins, "hardware"),
            PartBomItem("R-Clips (Safety)", requirements.hardware.clips, "hardware"),
        )
        return BillOfMaterials(
            width=requirements.width,
            height=requirements.height,
            depth=depth,
            segments=tuple(segments),
            frame_parts=frame_parts,
            hardware=hardware,
        )

    def export(self, output: FramePlanOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: FramePlanOutput) -> str:
        """Render the BOM in the configured output format."""
        bom = self.generate(output)
        if self.output_format == "csv":
            return self.format_csv(bom)
        if self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        """Plain-text document suitable for pasting into a message."""
        stamp = (self.generated_on or date.today()).isoformat()
        lines = [
            BOM_TITLE,
            f"Dimensions: {bom.width}mm (W) x {bom.height}mm (H)",
            RULE,
            "[Truss Segments]",
        ]
        for item in bom.segments:
            suffix = " (custom cut)" if item.is_custom else ""
            lines.append(f"- {item.name}: {item.length}mm x {item.quantity}pcs{suffix}")
        for part in bom.frame_parts:
            lines.append(f"- {part.name}: {part.quantity}pcs")
        lines.append("")
        lines.append("[Connection Hardware]")
        for part in bom.hardware:
            lines.append(f"- {part.name}: {part.quantity}pcs")
        lines.append(RULE)
        lines.append(f"Generated on {stamp}")
        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Category", "Item", "Length (mm)", "Quantity"])
        for item in bom.segments:
            writer.writerow(["Truss Segment", item.name, item.length, item.quantity])
        for part in bom.frame_parts:
            writer.writerow(["Frame Part", part.name, "", part.quantity])
        for part in bom.hardware:
            writer.writerow(["Hardware", part.name, "", part.quantity])
        return buffer.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        data: dict[str, Any] = {
            "dimensions": {"width": bom.width, "height": bom.height, "depth": bom.depth},
            "truss_segments": [
                {
                    "name": item.name,
                    "length": item.length,
                    "quantity": item.quantity,
                    "custom": item.is_custom,
                }
                for item in bom.segments
            ],
            "frame_parts": [
                {"name": part.name, "quantity": part.quantity} for part in bom.frame_parts
            ],
            "hardware": [
                {"name": part.name, "quantity": part.quantity} for part in bom.hardware
            ],
        }
        return json.dumps(data, indent=2)
