"""Test helper utilities: a fake HTTP session and upstream payload builders."""

from typing import Any, Callable, Dict, List, Optional

import requests

WEATHER_BASE = "https://weather.test/data/2.5"
CRYPTO_BASE = "https://crypto.test/api/v3"
COVID_BASE = "https://covid.test/v3/covid-19"
DEFAULT_CITIES = ("London", "New York", "Tokyo", "Sydney", "Paris")


class FakeResponse:
    """Just enough of :class:`requests.Response` for the client."""

    def __init__(self, status_code: int = 200, json_data: Any = None,
                 reason: str = "", text: Optional[str] = None):
        self.status_code = status_code
        self._json = json_data
        self.reason = reason
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self.text is not None:
            raise ValueError("Expecting value")
        return self._json


class FakeSession:
    """Routes GETs by exact URL to canned payloads.

    A route value may be a payload (returned as a 200 JSON body), a
    FakeResponse, an exception instance (raised), or a callable taking the
    query params and returning any of those.
    """

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes: Dict[str, Any] = dict(routes or {})
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Any = None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if url not in self.routes:
            return FakeResponse(404, {"message": "not found"}, reason="Not Found")
        route = self.routes[url]
        if callable(route) and not isinstance(route, FakeResponse):
            route = route(params or {})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(200, route)

    def urls(self) -> List[str]:
        return [c["url"] for c in self.calls]

    def close(self) -> None:
        self.closed = True


def connection_error(message: str = "connection refused") -> requests.ConnectionError:
    return requests.ConnectionError(message)


# ---- Upstream payload builders ----
def forecast_payload(city: str, temps: Optional[List[float]] = None,
                     start_dt: int = 1700000000) -> Dict[str, Any]:
    """OpenWeatherMap /forecast body with one slot per temperature (3h apart)."""
    temps = temps if temps is not None else [12.4, 13.0, 14.5, 15.2, 16.0, 17.7]
    return {
        "city": {"name": city},
        "list": [
            {
                "dt": start_dt + i * 10800,
                "main": {"temp": t, "humidity": 60 + i},
                "weather": [{"main": "Clouds" if i % 2 else "Clear"}],
                "wind": {"speed": 3.5 + i},
            }
            for i, t in enumerate(temps)
        ],
    }


def market_row(coin_id: str, price: float = 100.0, change: Optional[float] = 1.5,
               symbol: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": coin_id,
        "symbol": symbol or coin_id[:3],
        "name": coin_id.title(),
        "current_price": price,
        "price_change_percentage_24h": change,
        "market_cap": 1_000_000,
    }


def covid_country(name: str, cases: int = 1000, deaths: int = 10,
                  recovered: int = 900) -> Dict[str, Any]:
    return {
        "country": name,
        "cases": cases,
        "deaths": deaths,
        "recovered": recovered,
        "countryInfo": {"iso2": name[:2].upper()},
    }


def price_chart(points: int, start_ms: int = 1700000000000,
                step_ms: int = 86_400_000) -> Dict[str, Any]:
    return {"prices": [[start_ms + i * step_ms, 100.0 + i] for i in range(points)]}


def covid_history(days: int) -> Dict[str, Any]:
    return {"cases": {f"11/{d + 1}/23": 1000 + d * 10 for d in range(days)}}


def sequence(*routes: Any) -> Callable[[Dict[str, Any]], Any]:
    """Route that answers successive calls with successive values."""
    remaining = list(routes)

    def route(params: Dict[str, Any]) -> Any:
        return remaining.pop(0) if len(remaining) > 1 else remaining[0]

    return route
