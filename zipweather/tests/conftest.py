"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from zipweather.config.defaults import DEFAULT_ICON_TABLE
from zipweather.config.schema import ServiceConfig
from zipweather.models.icons import IconTable, load_icon_table

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def springfield_payload() -> dict:
    """Open-Meteo response for 62701, captured at 3:15 PM CST on 2024-01-15."""
    with open(FIXTURE_DIR / "open_meteo_springfield.json") as f:
        return json.load(f)


@pytest.fixture
def geocode_results() -> list[dict]:
    with open(FIXTURE_DIR / "geocode_62701.json") as f:
        return json.load(f)


@pytest.fixture
def icons() -> IconTable:
    """The bundled icon table."""
    return load_icon_table(DEFAULT_ICON_TABLE)


@pytest.fixture
def default_config() -> ServiceConfig:
    return ServiceConfig()
