"""
Logging configuration.

We use a YAML logging config (`src/greatcircle/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `GREATCIRCLE_LOG_LEVEL`).
"""

from __future__ import annotations

import logging.config

from greatcircle.config.settings import Settings, get_logging_config, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = settings or get_settings()
    # Copy so the cached config mapping is never mutated.
    config = {**get_logging_config()}
    config["handlers"] = {name: dict(h) for name, h in config.get("handlers", {}).items()}
    config["root"] = dict(config.get("root", {}))

    level = settings.app.log_level.upper()
    config["root"]["level"] = level
    for handler in config["handlers"].values():
        if "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
