# src/greatcircle/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/greatcircle/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GREATCIRCLE_CONFIG_PATH`
- environment variables (e.g., `GREATCIRCLE_LOG_LEVEL`, `GREATCIRCLE_EARTH_RADIUS_M`)

Design rule:
- Settings are read at the edges (CLI, logging). The geodesy functions never call
  `get_settings()`; callers pass `radius_m` explicitly.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from greatcircle.core.angles import EARTH_RADIUS_M
from greatcircle.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `greatcircle.config`."""
    text = resources.files("greatcircle.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "GreatCircle"
    log_level: str = "INFO"


class GeodesySettings(BaseModel):
    earth_radius_m: float = Field(EARTH_RADIUS_M, gt=0)


class OutputSettings(BaseModel):
    coordinate_decimals: int = Field(6, ge=0, le=15)
    distance_decimals: int = Field(1, ge=0, le=9)
    bearing_decimals: int = Field(2, ge=0, le=9)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    geodesy: GeodesySettings = Field(default_factory=GeodesySettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("GREATCIRCLE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    radius = os.getenv("GREATCIRCLE_EARTH_RADIUS_M")
    if radius:
        # Pydantic validates/coerces the string (and rejects non-positive values).
        data.setdefault("geodesy", {})["earth_radius_m"] = radius

    return data


def load_settings() -> Settings:
    """Load and validate settings without caching (tests call this directly)."""
    load_dotenv_if_present()
    config_path = os.getenv("GREATCIRCLE_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    return load_settings()


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
