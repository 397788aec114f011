"""Tests for settings resolution (constants < YAML < environment)."""

import dataclasses

import pytest

from feedboard.config import config as defaults
from feedboard.config.settings import load_settings, maybe_load_yaml
from feedboard.errors import ConfigurationError


def test_defaults_without_environment():
    settings = load_settings(environ={}, dotenv_path=None)

    assert settings.weather_api_key is None
    assert settings.weather_base_url == defaults.WEATHER_BASE_URL
    assert settings.default_cities == ("London", "New York", "Tokyo", "Sydney", "Paris")
    assert settings.exchange_rates == {"EUR": 0.84, "GBP": 0.72, "JPY": 110.14}
    assert settings.request_timeout is None
    assert settings.discard_stale_responses is True


def test_environment_overrides():
    settings = load_settings(
        environ={
            "OPENWEATHER_API_KEY": "abc123",
            "FEEDBOARD_COVID_BASE_URL": "http://localhost:9000",
            "FEEDBOARD_REQUEST_TIMEOUT": "2.5",
            "FEEDBOARD_DISCARD_STALE": "off",
            "FEEDBOARD_DEFAULT_CITIES": "Berlin, Rome",
        },
        dotenv_path=None,
    )

    assert settings.weather_api_key == "abc123"
    assert settings.covid_base_url == "http://localhost:9000"
    assert settings.request_timeout == 2.5
    assert settings.discard_stale_responses is False
    assert settings.default_cities == ("Berlin", "Rome")


def test_yaml_file_and_env_precedence(temp_data_dir):
    cfg = temp_data_dir / "feedboard.yaml"
    cfg.write_text(
        "exchange_rates:\n  eur: 0.9\n  CHF: 0.88\n"
        "default_cities: [Lima]\n"
        "request_timeout: 4\n",
        encoding="utf-8",
    )

    settings = load_settings(
        environ={"FEEDBOARD_CONFIG": str(cfg), "FEEDBOARD_REQUEST_TIMEOUT": "8"},
        dotenv_path=None,
    )

    assert settings.exchange_rates == {"EUR": 0.9, "CHF": 0.88}
    assert settings.default_cities == ("Lima",)
    assert settings.request_timeout == 8.0


@pytest.mark.parametrize("raw, expected", [
    ("false", False),
    ('"false"', False),
    ('"on"', True),
    ("true", True),
])
def test_yaml_discard_stale_accepts_quoted_booleans(temp_data_dir, raw, expected):
    cfg = temp_data_dir / "feedboard.yaml"
    cfg.write_text(f"discard_stale_responses: {raw}\n", encoding="utf-8")

    settings = load_settings(environ={"FEEDBOARD_CONFIG": str(cfg)}, dotenv_path=None)

    assert settings.discard_stale_responses is expected


@pytest.mark.parametrize("raw", ['"maybe"', "2"])
def test_yaml_discard_stale_rejects_non_booleans(temp_data_dir, raw):
    cfg = temp_data_dir / "feedboard.yaml"
    cfg.write_text(f"discard_stale_responses: {raw}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(environ={"FEEDBOARD_CONFIG": str(cfg)}, dotenv_path=None)

def test_missing_yaml_falls_back_to_defaults(temp_data_dir):
    assert maybe_load_yaml(str(temp_data_dir / "missing.yaml")) == {}
    assert maybe_load_yaml(None) == {}


def test_invalid_yaml_raises(temp_data_dir):
    cfg = temp_data_dir / "bad.yaml"
    cfg.write_text("exchange_rates: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        maybe_load_yaml(str(cfg))


@pytest.mark.parametrize("env", [
    {"FEEDBOARD_DISCARD_STALE": "maybe"},
    {"FEEDBOARD_REQUEST_TIMEOUT": "soon"},
    {"FEEDBOARD_REQUEST_TIMEOUT": "-1"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ConfigurationError):
        load_settings(environ=env, dotenv_path=None)


def test_settings_are_frozen():
    settings = load_settings(environ={}, dotenv_path=None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.weather_api_key = "x"
