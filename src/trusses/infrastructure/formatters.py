"""Console formatters for frame plans."""

from __future__ import annotations

from trusses.application.dtos import FramePlanOutput
from trusses.domain import (
    EdgeLayout,
    FitResult,
    FrameBlueprint,
    FrameRequirements,
    Inventory,
    ShortageLine,
    is_standard_length,
)

# Pieces shorter than this are drawn without a length label
MIN_LABELED_LENGTH = 500


class RequirementsFormatter:
    """Formats the required / owned / shortage table."""

    def format(self, output: FramePlanOutput) -> str:
        if output.requirements is None:
            return "\n".join(["Cannot plan frame:"] + [f"  - {e}" for e in output.errors])

        req = output.requirements
        lines = [
            "FRAME REQUIREMENTS",
            "=" * 60,
            f"Frame: {req.width}mm (W) x {req.height}mm (H) x {output.frame.depth}mm (D)",
            "",
            f"{'Length':<12} {'Required':>10} {'Owned':>10} {'Shortage':>10}",
            "-" * 60,
        ]
        for line in output.shortages:
            lines.append(self._format_line(line))
        lines.append("-" * 60)
        lines.append(
            f"{'TOTAL':<12} {req.total_modules:>10} "
            f"{sum(s.owned for s in output.shortages):>10} {output.total_shortage:>10}"
        )
        lines.append("")
        if output.is_buildable:
            lines.append("Status: SUFFICIENT - the frame can be built from owned modules")
        else:
            lines.append(
                f"Status: INSUFFICIENT - {output.total_shortage} module(s) missing"
            )
        return "\n".join(lines)

    @staticmethod
    def _format_line(line: ShortageLine) -> str:
        label = f"{line.length}mm"
        if not is_standard_length(line.length):
            label += "*"
        return f"{label:<12} {line.required:>10} {line.owned:>10} {line.shortage:>10}"


class HardwareReportFormatter:
    """Formats the fixed parts and connection hardware of a frame."""

    def format(self, requirements: FrameRequirements) -> str:
        joints = requirements.joints
        hw = requirements.hardware
        return "\n".join(
            [
                "HARDWARE",
                "-" * 40,
                f"  Joints: {joints.total_joints} "
                f"({joints.internal_joints} internal + {joints.connection_joints} connection)",
                f"  Corner Connectors (Box): {requirements.corner_connectors}",
                f"  Base Plates (Heavy):     {requirements.base_plates}",
                f"  Conical Couplers:        {hw.couplers}",
                f"  Connector Pins:          {hw.pins}",
                f"  R-Clips (Safety):        {hw.clips}",
            ]
        )


class BlueprintFormatter:
    """Draws each edge of a frame as a bar of owned and missing pieces.

    Owned pieces are filled with ``=``, missing ones with ``.``. Every piece
    is at least one character wide.
    """

    def __init__(self, mm_per_char: int = 100) -> None:
        if mm_per_char <= 0:
            raise ValueError("mm_per_char must be positive")
        self.mm_per_char = mm_per_char

    def format(self, blueprint: FrameBlueprint) -> str:
        lines = [
            "FRAME BLUEPRINT",
            "=" * 60,
            f"Frame: {blueprint.width}mm (W) x {blueprint.height}mm (H)",
            f"Owned pieces: {blueprint.owned_count}  Missing pieces: {blueprint.missing_count}",
            "",
        ]
        for layout in blueprint.edges:
            lines.extend(self.format_edge(layout))
            lines.append("")
        lines.append("Legend: [===] owned  [...] missing")
        return "\n".join(lines)

    def format_edge(self, layout: EdgeLayout) -> list[str]:
        kind = "beam" if layout.edge.is_horizontal else "column"
        lines = [f"{layout.edge.value.upper()} {kind} ({layout.length}mm)"]
        lines.append("  " + "".join(self._draw_piece(seg.length, seg.is_owned) for seg in layout.segments))
        for seg in layout.segments:
            status = "owned" if seg.is_owned else "MISSING"
            lines.append(f"    {seg.start:>6}-{seg.end:<6} {seg.length:>5}mm  {status}")
        return lines

    def _draw_piece(self, length: int, owned: bool) -> str:
        width = max(1, length // self.mm_per_char)
        fill = "=" if owned else "."
        label = str(length)
        if length >= MIN_LABELED_LENGTH and len(label) <= width:
            pad = width - len(label)
            body = fill * (pad // 2) + label + fill * (pad - pad // 2)
        else:
            body = fill * width
        return f"[{body}]"


class FitResultFormatter:
    def format(self, result: FitResult) -> str:
        lines = [
            "AUTO-FIT",
            "-" * 40,
            f"  Best size: {result.width}mm (W) x {result.height}mm (H)",
            f"  Candidates evaluated: {result.candidates_evaluated}",
            f"  Buildable candidates: {result.feasible_candidates}",
        ]
        if result.is_fallback:
            lines.append("  No size in the search range can be built; showing the default size")
        return "\n".join(lines)


class InventoryFormatter:
    """Formats owned stock as a table."""

    def format(self, inventory: Inventory) -> str:
        if not len(inventory):
            return "Inventory is empty."
        lines = [
            "INVENTORY",
            "-" * 40,
            f"{'Length':<12} {'Count':>8}",
        ]
        for length, count in inventory.items():
            lines.append(f"{str(length) + 'mm':<12} {count:>8}")
        lines.append("-" * 40)
        lines.append(f"{'TOTAL':<12} {inventory.total_pieces:>8}")
        return "\n".join(lines)


__all__ = [
    "BlueprintFormatter",
    "FitResultFormatter",
    "HardwareReportFormatter",
    "InventoryFormatter",
    "RequirementsFormatter",
]
