"""YAML config loader with environment fallback and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherview.config.schema import AppConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file yields defaults. If no API key is set in the YAML, it is
    taken from the OPENWEATHER_API_KEY environment variable.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    api = raw.setdefault("api", {}) or {}
    raw["api"] = api
    if not api.get("api_key") and os.getenv(API_KEY_ENV):
        api["api_key"] = os.environ[API_KEY_ENV]

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.units'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
