"""Tests for the exporter registry and export manager."""

from __future__ import annotations

from pathlib import Path

import pytest

from trusses.application import FrameInput, PlanFrameCommand
from trusses.infrastructure.exporters import (
    BomGenerator,
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)


class TestExporterRegistry:
    def test_bom_is_registered(self) -> None:
        assert ExporterRegistry.is_registered("bom")
        assert ExporterRegistry.get("bom") is BomGenerator
        assert "bom" in ExporterRegistry.available_formats()

    def test_unknown_format(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ExporterRegistry.get("dxf")

        assert exc_info.value.format_name == "dxf"
        assert "bom" in exc_info.value.available
        assert "Available formats: bom" in str(exc_info.value)

    def test_unsupported_format_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            ExporterRegistry.get("stl")

    def test_bom_generator_satisfies_protocol(self) -> None:
        assert isinstance(BomGenerator(), Exporter)


class TestExportManager:
    def test_export_all_default_project_name(self, tmp_path: Path) -> None:
        output = PlanFrameCommand().execute(FrameInput(2000, 2000))
        files = ExportManager(tmp_path).export_all(["bom"], output)

        assert files == {"bom": tmp_path / "truss_bom.txt"}
        assert files["bom"].exists()

    def test_unknown_format_writes_nothing(self, tmp_path: Path) -> None:
        output = PlanFrameCommand().execute(FrameInput(2000, 2000))
        target = tmp_path / "never"

        with pytest.raises(UnsupportedFormatError):
            ExportManager(target).export_all(["bom", "svg"], output)
        assert not target.exists()
