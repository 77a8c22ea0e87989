"""Shared pytest fixtures for peashoot tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from peashoot.config.settings import PeashootSettings
from peashoot.infrastructure.fixtures import FixtureRepository


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PEASHOOT_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("PEASHOOT_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory so no config file is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> PeashootSettings:
    return PeashootSettings.from_cli(root=tmp_path)


@pytest.fixture
def repository() -> FixtureRepository:
    """Repository over the bundled data files."""
    return FixtureRepository()


# ---------------------------------------------------------------------------
# Payload factories (camelCase, as clients send them)
# ---------------------------------------------------------------------------


@pytest.fixture
def presentation() -> dict[str, Any]:
    return {"iconPath": "tomato.png", "accentColor": {"red": 200, "green": 40, "blue": 40}}


@pytest.fixture
def seed_packet_data(presentation: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": "spkt_tomato",
        "name": "Tomato Seeds",
        "description": "Heirloom tomato",
        "category": "nightshades",
        "presentation": presentation,
        "expiresAt": "2027-12-31",
        "metadata": {
            "quantity": 20,
            "plantingInstructions": "Start indoors",
            "netWeightGrams": 0.5,
            "originLocation": "Tennessee",
        },
    }


@pytest.fixture
def plant_data(presentation: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": "plant_tomato",
        "category": "nightshades",
        "variant": "Cherokee Purple",
        "displayName": "Tomato",
        "size": 2,
        "presentation": presentation,
        "metadata": {"plantingDistance": {"value": 24, "unit": "inches"}},
    }


@pytest.fixture
def garden_data(plant_data: dict[str, Any]) -> dict[str, Any]:
    """A garden with one bed holding one referenced and one embedded plant."""
    return {
        "id": "grdn_home",
        "metadata": {"name": "Home", "description": "Back yard"},
        "indicators": [],
        "zones": [
            {
                "id": "gbed_north",
                "name": "North bed",
                "description": "Full sun",
                "width": 4,
                "height": 8,
                "metadata": {"waterLevel": 3, "sunLevel": 5},
                "placements": [
                    {
                        "id": "plcmt_1",
                        "position": {"x": 0, "y": 0},
                        "item": {"id": "plant_basil"},
                        "sourceZoneId": "gbed_north",
                    },
                    {
                        "id": "plcmt_2",
                        "position": {"x": 1, "y": 2},
                        "item": plant_data,
                        "sourceZoneId": "gbed_north",
                    },
                ],
            },
            {
                "id": "gbed_south",
                "name": "South bed",
                "description": "Part shade",
                "width": 2,
                "height": 2,
                "metadata": {"waterLevel": 1, "sunLevel": 2},
                "placements": [],
            },
        ],
    }
