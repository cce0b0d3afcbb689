"""Locations of the bundled icon table and static assets."""

from pathlib import Path

PACKAGE_DIR = Path(__file__).parent.parent

DEFAULT_ICON_TABLE = PACKAGE_DIR / "data" / "weather-codes.json"
DEFAULT_STATIC_DIR = PACKAGE_DIR.parent / "static"

API_KEY_ENV = "GEOCODING_API_KEY"
