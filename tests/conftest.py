"""Pytest configuration and shared fixtures for truss planner tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from trusses.domain import Inventory


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that drive the CLI or REST API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def stage_inventory() -> Inventory:
    """Exactly the modules needed for a 3000 x 2500 frame."""
    return Inventory.from_mapping({1000: 10, 500: 2})


@pytest.fixture
def short_inventory() -> Inventory:
    """One 1000mm module short of a 3000 x 2500 frame."""
    return Inventory.from_mapping({1000: 9, 500: 2})


@pytest.fixture
def config_factory(tmp_path: Path):
    """Write a configuration dict to a JSON file and return its path."""

    def _write(data: dict, name: str = "frame.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
