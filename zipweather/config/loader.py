"""YAML config loader with environment overrides."""

import logging
import os
from pathlib import Path
from typing import Mapping

import yaml

from zipweather.config.defaults import API_KEY_ENV, DEFAULT_ICON_TABLE, DEFAULT_STATIC_DIR
from zipweather.config.schema import ServiceConfig

logger = logging.getLogger(__name__)


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> ServiceConfig:
    """Load and validate config from a YAML file.

    With no path, built-in defaults are used. A non-empty GEOCODING_API_KEY in
    the environment replaces geocoding.api_key.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if environ is None:
        environ = os.environ
    api_key = environ.get(API_KEY_ENV, "")
    if api_key:
        raw["geocoding"] = {**(raw.get("geocoding") or {}), "api_key": api_key}
        logger.debug("Geocoding API key taken from %s", API_KEY_ENV)

    return ServiceConfig(**raw)


def icon_table_path(config: ServiceConfig) -> Path:
    return Path(config.icon_table) if config.icon_table else DEFAULT_ICON_TABLE


def static_dir(config: ServiceConfig) -> Path:
    return Path(config.server.static_dir) if config.server.static_dir else DEFAULT_STATIC_DIR
