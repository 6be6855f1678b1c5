from __future__ import annotations

import logging
import os

import pytest
from pydantic import ValidationError

from greatcircle.config.settings import AppSettings, Settings, get_logging_config, load_settings
from greatcircle.core.angles import EARTH_RADIUS_M
from greatcircle.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Keep developer shells (and any stray .env) out of these tests.
    for name in ("GREATCIRCLE_CONFIG_PATH", "GREATCIRCLE_LOG_LEVEL", "GREATCIRCLE_EARTH_RADIUS_M"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GREATCIRCLE_ENV_FILE", str(tmp_path / "missing.env"))


def test_packaged_defaults_match_the_mean_earth_radius():
    settings = load_settings()
    assert settings.geodesy.earth_radius_m == EARTH_RADIUS_M
    assert settings.app.log_level == "INFO"
    assert settings.output.coordinate_decimals == 6


def test_env_overrides_radius_and_log_level(monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_EARTH_RADIUS_M", "6378137")
    monkeypatch.setenv("GREATCIRCLE_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.geodesy.earth_radius_m == 6_378_137.0
    assert settings.app.log_level == "debug"


def test_env_override_rejects_non_positive_radius(monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_EARTH_RADIUS_M", "-5")
    with pytest.raises(ValidationError):
        load_settings()


def test_external_config_file_replaces_packaged_defaults(monkeypatch, tmp_path):
    path = tmp_path / "greatcircle.yaml"
    path.write_text("geodesy:\n  earth_radius_m: 1000\noutput:\n  distance_decimals: 3\n", encoding="utf-8")
    monkeypatch.setenv("GREATCIRCLE_CONFIG_PATH", str(path))

    settings = load_settings()

    assert settings.geodesy.earth_radius_m == 1000.0
    assert settings.output.distance_decimals == 3
    # Sections missing from the file fall back to model defaults.
    assert settings.app.name == "GreatCircle"


def test_config_file_must_be_a_mapping(monkeypatch, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("GREATCIRCLE_CONFIG_PATH", str(path))
    with pytest.raises(ValueError, match="expected a mapping"):
        load_settings()


def test_dotenv_file_is_loaded_without_overriding_the_environment(monkeypatch, tmp_path):
    from greatcircle.core.env import load_dotenv_if_present

    env_file = tmp_path / ".env"
    env_file.write_text("GREATCIRCLE_LOG_LEVEL=WARNING\n", encoding="utf-8")
    monkeypatch.setenv("GREATCIRCLE_ENV_FILE", str(env_file))
    load_dotenv_if_present.cache_clear()
    try:
        assert load_dotenv_if_present() == env_file.resolve()
        assert load_settings().app.log_level == "WARNING"
    finally:
        os.environ.pop("GREATCIRCLE_LOG_LEVEL", None)
        load_dotenv_if_present.cache_clear()


def test_configure_logging_applies_level_without_mutating_cached_config():
    configure_logging(Settings(app=AppSettings(log_level="debug")))
    try:
        assert logging.getLogger().level == logging.DEBUG
        assert get_logging_config()["root"]["level"] == "INFO"
    finally:
        configure_logging(Settings())
