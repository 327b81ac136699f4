"""Integration tests for the plan, bom, blueprint and fit CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from trusses.cli.main import app

runner = CliRunner()

pytestmark = pytest.mark.integration

STAGE_STOCK = ["--stock", "1000=10", "--stock", "500=2"]


class TestPlanCommand:
    """Test suite for 'trusses plan'."""

    def test_buildable_frame(self) -> None:
        result = runner.invoke(app, ["plan", "-w", "3000", "-h", "2500", *STAGE_STOCK])

        assert result.exit_code == 0
        assert "Status: SUFFICIENT" in result.output
        assert "Joints: 18" in result.output

    def test_shortage(self) -> None:
        result = runner.invoke(
            app, ["plan", "--width", "3000", "--height", "2500", "--stock", "1000=9", "--stock", "500=2"]
        )

        assert result.exit_code == 0
        assert "INSUFFICIENT - 1 module(s) missing" in result.output

    def test_preset(self) -> None:
        result = runner.invoke(app, ["plan", "--preset", "3x2.5m", *STAGE_STOCK])

        assert result.exit_code == 0
        assert "Frame: 3000mm (W) x 2500mm (H)" in result.output

    def test_unknown_preset(self) -> None:
        result = runner.invoke(app, ["plan", "--preset", "9x9m"])

        assert result.exit_code == 1
        assert "Preset not found: 9x9m" in result.output

    def test_frame_size_required(self) -> None:
        result = runner.invoke(app, ["plan"])

        assert result.exit_code == 1
        assert "Frame size required" in result.output

    def test_invalid_stock_entry(self) -> None:
        result = runner.invoke(app, ["plan", "-w", "2000", "-h", "2000", "--stock", "1000"])

        assert result.exit_code == 1
        assert "expected LENGTH=COUNT" in result.output

    def test_invalid_dimension(self) -> None:
        result = runner.invoke(app, ["plan", "-w", "0", "-h", "2000"])

        assert result.exit_code == 1
        assert "Width must be positive" in result.output

    def test_config_file(self, config_factory) -> None:
        path = config_factory(
            {
                "schema_version": "1.0",
                "frame": {"width": 3000, "height": 2500},
                "inventory": {"1000": 10, "500": 2},
            }
        )
        result = runner.invoke(app, ["plan", "--config", str(path)])

        assert result.exit_code == 0
        assert "Status: SUFFICIENT" in result.output

    def test_config_file_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "stage.json"
        path.write_bytes(b"\xff\xfe")
        result = runner.invoke(app, ["plan", "--config", str(path)])

        assert result.exit_code == 1
        assert "not UTF-8" in result.output

    def test_stock_overrides_inventory_file(self, tmp_path: Path) -> None:
        stock_file = tmp_path / "stock.json"
        stock_file.write_text(json.dumps({"inventory": {"1000": 10, "500": 0}}))

        result = runner.invoke(
            app,
            ["plan", "-w", "3000", "-h", "2500", "--inventory", str(stock_file), "--stock", "500=2"],
        )

        assert result.exit_code == 0
        assert "Status: SUFFICIENT" in result.output

    def test_verbose_flag(self) -> None:
        result = runner.invoke(app, ["--verbose", "plan", "-w", "2000", "-h", "2000"])

        assert result.exit_code == 0


class TestBomCommand:
    """Test suite for 'trusses bom'."""

    def test_prints_text(self) -> None:
        result = runner.invoke(app, ["bom", "-w", "3000", "-h", "2500"])

        assert result.exit_code == 0
        assert "Photo Zone Truss Bill of Materials" in result.output
        assert "- Horizontal Beam: 1000mm x 6pcs" in result.output

    def test_prints_json(self) -> None:
        result = runner.invoke(app, ["bom", "-w", "3000", "-h", "2500", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["dimensions"]["width"] == 3000

    def test_exports_file(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "bom",
                "--preset",
                "5x3m",
                "--format",
                "csv",
                "--output-dir",
                str(tmp_path),
                "--project-name",
                "stage",
            ],
        )

        assert result.exit_code == 0
        assert (tmp_path / "stage_bom.csv").exists()

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["bom", "-w", "3000", "-h", "2500", "--format", "xml"])

        assert result.exit_code == 1
        assert "Unknown BOM format" in result.output


class TestBlueprintCommand:
    def test_draws_edges(self) -> None:
        result = runner.invoke(app, ["blueprint", "-w", "1750", "-h", "1000", "--stock", "1000=4"])

        assert result.exit_code == 0
        assert "TOP beam (1750mm)" in result.output
        assert "[===1000===]" in result.output
        assert "MISSING" in result.output


class TestFitCommand:
    def test_finds_largest_frame(self) -> None:
        result = runner.invoke(app, ["fit", "--stock", "1000=8"])

        assert result.exit_code == 0
        assert "Best size: 2000mm (W) x 2000mm (H)" in result.output

    def test_fallback(self) -> None:
        result = runner.invoke(app, ["fit"])

        assert result.exit_code == 0
        assert "showing the default size" in result.output

    def test_with_plan(self) -> None:
        result = runner.invoke(app, ["fit", "--stock", "1000=8", "--plan"])

        assert result.exit_code == 0
        assert "Status: SUFFICIENT" in result.output

    def test_invalid_step(self) -> None:
        result = runner.invoke(app, ["fit", "--step", "0"])

        assert result.exit_code == 1
        assert "Step must be positive" in result.output

    def test_oversized_grid(self) -> None:
        result = runner.invoke(app, ["fit", "--min-width", "1", "--min-height", "1", "--step", "1"])

        assert result.exit_code == 1
        assert "more than the limit" in result.output
