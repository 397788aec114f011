"""OpenWeatherMap 5-day forecast source."""

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from feedboard.config.config import FORECAST_SLOTS, WEATHER_UNITS
from feedboard.errors import ConfigurationError, PayloadError
from feedboard.sources.base import BaseSource, RemoteDataClient
from feedboard.state.models import ForecastSlot, WeatherCity
from feedboard.utils.datetime import seconds_to_date


# ---- Upstream shape (only the fields the panel reads) ----
class _Main(BaseModel):
    temp: float
    humidity: float


class _Condition(BaseModel):
    main: str


class _Wind(BaseModel):
    speed: float = 0.0


class _Slot(BaseModel):
    dt: int
    main: _Main
    weather: List[_Condition]
    wind: _Wind = _Wind()


class _City(BaseModel):
    name: str


class _ForecastResponse(BaseModel):
    city: _City
    list: List[_Slot]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _condition(slot: _Slot) -> str:
    return slot.weather[0].main if slot.weather else "Unknown"


class WeatherSource(BaseSource):
    """Fetches one city's forecast per call."""

    def __init__(self, client: RemoteDataClient, api_key: Optional[str]):
        super().__init__("weather", client)
        self.api_key = api_key

    def fetch_city(self, city: str) -> WeatherCity:
        """Fetch current conditions and the next forecast slots for ``city``.

        Raises:
            ConfigurationError: no API key configured
            NotFound: the city is unknown upstream
            NetworkError: any other request failure
            PayloadError: the forecast has no slots or misses fields
        """
        if not self.api_key:
            raise ConfigurationError("OPENWEATHER_API_KEY is not configured")
        data = self.client.get(
            "forecast", {"q": city, "appid": self.api_key, "units": WEATHER_UNITS}
        )
        return self.parse_forecast(data)

    def parse_forecast(self, data: Dict[str, Any]) -> WeatherCity:
        response = self._validate(_ForecastResponse, data, "forecast")
        if not response.list:
            raise PayloadError(f"Forecast for {response.city.name} has no entries")

        now = response.list[0]
        forecast = [
            ForecastSlot(
                date=seconds_to_date(slot.dt),
                temp=round_half_up(slot.main.temp),
                condition=_condition(slot),
            )
            for slot in response.list[1:1 + FORECAST_SLOTS]
        ]
        return WeatherCity(
            city=response.city.name,
            temperature=round_half_up(now.main.temp),
            condition=_condition(now),
            humidity=now.main.humidity,
            wind_speed=now.wind.speed,
            forecast=forecast,
        )
