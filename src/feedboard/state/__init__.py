"""Panel state models and the action-driven store."""

from feedboard.state.models import (
    ChartSeries,
    CovidCountry,
    CryptoCoin,
    ForecastSlot,
    GlobalTotals,
    PanelState,
    WeatherCity,
)
from feedboard.state.store import PanelStore, Ticket

__all__ = [
    "ChartSeries", "CovidCountry", "CryptoCoin", "ForecastSlot", "GlobalTotals",
    "PanelState", "PanelStore", "Ticket", "WeatherCity",
]
