"""Test configuration and shared fixtures."""

import tempfile
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import pytest

from feedboard.config.settings import Settings
from feedboard.panels import create_panels
from feedboard.sources.base import RemoteDataClient
from feedboard.sources.covid import CovidSource
from feedboard.sources.crypto import CryptoSource
from feedboard.sources.weather import WeatherSource
from tests.helpers import COVID_BASE, CRYPTO_BASE, DEFAULT_CITIES, WEATHER_BASE, FakeSession


@pytest.fixture
def settings():
    """Settings pointing at fake hosts, with a weather key."""
    return Settings(
        weather_api_key="test-key",
        weather_base_url=WEATHER_BASE,
        crypto_base_url=CRYPTO_BASE,
        covid_base_url=COVID_BASE,
        default_cities=DEFAULT_CITIES,
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def panels(settings, session):
    return create_panels(settings, session=session)


@pytest.fixture
def weather_source(session):
    return WeatherSource(RemoteDataClient(WEATHER_BASE, session=session), api_key="test-key")


@pytest.fixture
def crypto_source(session):
    return CryptoSource(RemoteDataClient(CRYPTO_BASE, session=session))


@pytest.fixture
def covid_source(session):
    return CovidSource(RemoteDataClient(COVID_BASE, session=session))


@pytest.fixture
def temp_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
