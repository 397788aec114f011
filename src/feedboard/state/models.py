"""Entity and panel-state models.

Entities are immutable pydantic models so they can be validated straight
from upstream JSON. Each exposes ``key``, the natural key used for
upsert-by-key merging.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def key(self) -> str:
        raise NotImplementedError


class ForecastSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    temp: int
    condition: str


class WeatherCity(_Entity):
    city: str
    temperature: int          # °C, rounded
    condition: str
    humidity: float
    wind_speed: float         # m/s
    forecast: List[ForecastSlot] = Field(default_factory=list)

    @property
    def key(self) -> str:
        return self.city


class CryptoCoin(_Entity):
    id: str
    symbol: str
    name: str
    current_price: float
    price_change_percentage_24h: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _null_change(cls, data: Any) -> Any:
        # CoinGecko sends null for freshly listed coins
        if isinstance(data, dict) and data.get("price_change_percentage_24h") is None:
            data = {**data, "price_change_percentage_24h": 0.0}
        return data

    @property
    def key(self) -> str:
        return self.id


class CovidCountry(_Entity):
    country: str
    cases: int
    deaths: int
    recovered: int

    @property
    def key(self) -> str:
        return self.country


class GlobalTotals(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    cases: int
    deaths: int
    recovered: int


class ChartSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    labels: List[str]
    values: List[float]
    title: str = ""

    @model_validator(mode="after")
    def _same_length(self) -> "ChartSeries":
        if len(self.labels) != len(self.values):
            raise ValueError("labels and values must have the same length")
        return self

    def __len__(self) -> int:
        return len(self.values)


EntityT = TypeVar("EntityT", bound=_Entity)


@dataclass
class PanelState(Generic[EntityT]):
    """Snapshot of one panel. Stores replace states on every action; never mutate one."""
    entities: List[EntityT] = field(default_factory=list)
    selected: Optional[EntityT] = None
    loading: bool = True
    error: Optional[str] = None
    chart_series: Optional[ChartSeries] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def keys(self) -> List[str]:
        return [e.key for e in self.entities]
