"""HTTP sources for the three upstream feeds."""

from feedboard.sources.base import BaseSource, RemoteDataClient
from feedboard.sources.covid import CovidSource
from feedboard.sources.crypto import CryptoSource
from feedboard.sources.weather import WeatherSource

__all__ = ["BaseSource", "CovidSource", "CryptoSource", "RemoteDataClient", "WeatherSource"]
