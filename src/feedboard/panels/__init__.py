"""Panel controllers and the factory that wires them to their sources."""

from dataclasses import dataclass
from typing import Optional

import requests

from feedboard.config.settings import Settings
from feedboard.panels.base import PanelController, gather
from feedboard.panels.covid import CovidPanel
from feedboard.panels.crypto import CryptoPanel, convert
from feedboard.panels.weather import WeatherPanel
from feedboard.sources.base import RemoteDataClient
from feedboard.sources.covid import CovidSource
from feedboard.sources.crypto import CryptoSource
from feedboard.sources.weather import WeatherSource
from feedboard.state.store import PanelStore


@dataclass
class Panels:
    weather: WeatherPanel
    crypto: CryptoPanel
    covid: CovidPanel

    def unmount(self) -> None:
        for panel in (self.weather, self.crypto, self.covid):
            panel.unmount()


def create_panels(settings: Settings, session: Optional[requests.Session] = None) -> Panels:
    """Build the three panel controllers from resolved settings.

    Args:
        settings: Startup configuration
        session: Optional shared HTTP session (each source gets its own otherwise)
    """
    def client(base_url: str, name: str) -> RemoteDataClient:
        return RemoteDataClient(base_url, session=session, timeout=settings.request_timeout,
                                source_name=name)

    def store(name: str) -> PanelStore:
        return PanelStore(name, discard_stale=settings.discard_stale_responses)

    return Panels(
        weather=WeatherPanel(
            WeatherSource(client(settings.weather_base_url, "weather"), settings.weather_api_key),
            cities=settings.default_cities,
            store=store("weather"),
        ),
        crypto=CryptoPanel(
            CryptoSource(client(settings.crypto_base_url, "crypto")),
            rates=settings.exchange_rates,
            store=store("crypto"),
        ),
        covid=CovidPanel(
            CovidSource(client(settings.covid_base_url, "covid")),
            store=store("covid"),
        ),
    )


__all__ = [
    "CovidPanel", "CryptoPanel", "PanelController", "Panels", "WeatherPanel",
    "convert", "create_panels", "gather",
]
