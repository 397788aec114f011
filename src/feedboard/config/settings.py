"""Runtime settings resolved once at startup.

Values come from three layers, highest precedence first:

1. environment variables (a ``.env`` file in the working directory is loaded
   into the environment first, without overriding variables already set)
2. an optional YAML file named by ``FEEDBOARD_CONFIG``
3. the constants in :mod:`feedboard.config.config`

The weather API key has no default and is never read from source.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml
from dotenv import load_dotenv

from feedboard.config import config as defaults
from feedboard.errors import ConfigurationError
from feedboard.utils.logging import get_logger

logger = get_logger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Configuration for sources, panels and the dashboard shell."""
    weather_api_key: Optional[str] = None
    weather_base_url: str = defaults.WEATHER_BASE_URL
    crypto_base_url: str = defaults.CRYPTO_BASE_URL
    covid_base_url: str = defaults.COVID_BASE_URL
    request_timeout: Optional[float] = defaults.REQUEST_TIMEOUT_S
    default_cities: Tuple[str, ...] = defaults.DEFAULT_CITIES
    exchange_rates: Dict[str, float] = field(
        default_factory=lambda: dict(defaults.DEFAULT_EXCHANGE_RATES)
    )
    discard_stale_responses: bool = defaults.DISCARD_STALE_RESPONSES
    log_level: str = defaults.LOG_LEVEL


def maybe_load_yaml(path: Optional[str]) -> Dict[str, Any]:
    """Load YAML config file with fallback to empty dict."""
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        logger.warning(f"Config file {p} not found; using defaults")
        return {}
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {p} must contain a mapping")
    return data


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _coerce_bool(name: str, raw: Any) -> bool:
    # YAML gives real booleans for bare true/false but strings when quoted
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return _parse_bool(name, raw)
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_timeout(name: str, raw: Any) -> Optional[float]:
    if raw is None or (isinstance(raw, str) and raw.strip().lower() in {"", "none"}):
        return None
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"{name} must be positive, got {timeout}")
    return timeout


def _parse_rates(raw: Any) -> Dict[str, float]:
    if not isinstance(raw, Mapping):
        raise ConfigurationError("exchange_rates must be a mapping of currency to rate")
    rates: Dict[str, float] = {}
    for currency, rate in raw.items():
        try:
            rates[str(currency).upper()] = float(rate)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid exchange rate for {currency}: {rate!r}") from e
    return rates


def _parse_cities(raw: Any) -> Tuple[str, ...]:
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, (list, tuple)):
        raise ConfigurationError("default_cities must be a list of city names")
    cities = tuple(str(c).strip() for c in raw if str(c).strip())
    if not cities:
        raise ConfigurationError("default_cities must not be empty")
    return cities


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = ".env",
) -> Settings:
    """Resolve settings from ``.env``, the environment and optional YAML.

    Args:
        environ: Mapping to read variables from. Defaults to ``os.environ``;
            tests pass a plain dict and ``dotenv_path=None``.
        dotenv_path: ``.env`` file to load into ``os.environ`` first, or
            None to skip.

    Returns:
        A frozen :class:`Settings` instance.
    """
    if dotenv_path and environ is None:
        load_dotenv(dotenv_path, override=False)
    env = os.environ if environ is None else environ

    file_cfg = maybe_load_yaml(env.get("FEEDBOARD_CONFIG"))
    values: Dict[str, Any] = {}

    for key in ("weather_base_url", "crypto_base_url", "covid_base_url", "log_level"):
        if key in file_cfg:
            values[key] = str(file_cfg[key])
    if "request_timeout" in file_cfg:
        values["request_timeout"] = _parse_timeout("request_timeout", file_cfg["request_timeout"])
    if "exchange_rates" in file_cfg:
        values["exchange_rates"] = _parse_rates(file_cfg["exchange_rates"])
    if "default_cities" in file_cfg:
        values["default_cities"] = _parse_cities(file_cfg["default_cities"])
    if "discard_stale_responses" in file_cfg:
        values["discard_stale_responses"] = _coerce_bool(
            "discard_stale_responses", file_cfg["discard_stale_responses"]
        )

    env_map = {
        "FEEDBOARD_WEATHER_BASE_URL": "weather_base_url",
        "FEEDBOARD_CRYPTO_BASE_URL": "crypto_base_url",
        "FEEDBOARD_COVID_BASE_URL": "covid_base_url",
        "FEEDBOARD_LOG_LEVEL": "log_level",
    }
    for var, key in env_map.items():
        if env.get(var):
            values[key] = env[var]
    if "FEEDBOARD_REQUEST_TIMEOUT" in env:
        values["request_timeout"] = _parse_timeout(
            "FEEDBOARD_REQUEST_TIMEOUT", env["FEEDBOARD_REQUEST_TIMEOUT"]
        )
    if env.get("FEEDBOARD_DEFAULT_CITIES"):
        values["default_cities"] = _parse_cities(env["FEEDBOARD_DEFAULT_CITIES"])
    if env.get("FEEDBOARD_DISCARD_STALE"):
        values["discard_stale_responses"] = _parse_bool(
            "FEEDBOARD_DISCARD_STALE", env["FEEDBOARD_DISCARD_STALE"]
        )

    api_key = env.get("OPENWEATHER_API_KEY") or None
    if api_key is None:
        logger.warning("OPENWEATHER_API_KEY is not set; the weather panel will report an error")

    return Settings(weather_api_key=api_key, **values)
