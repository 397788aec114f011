"""Weather panel: five default cities, search by city, detail view."""

from typing import List, Optional, Sequence

from feedboard.config.config import DEFAULT_CITIES, WEATHER_LOAD_ERROR, WEATHER_SEARCH_ERROR
from feedboard.panels.base import PanelController
from feedboard.sources.weather import WeatherSource
from feedboard.state.models import WeatherCity
from feedboard.state.store import Action, EntitiesUpserted, PanelStore


class WeatherPanel(PanelController):
    name = "weather"
    load_error = WEATHER_LOAD_ERROR
    search_error = WEATHER_SEARCH_ERROR

    def __init__(
        self,
        source: WeatherSource,
        cities: Sequence[str] = DEFAULT_CITIES,
        store: Optional[PanelStore] = None,
        max_workers: int = 8,
    ):
        super().__init__(store, max_workers)
        self.source = source
        self.cities = tuple(cities)

    def _fetch_defaults(self) -> List[WeatherCity]:
        return self._gather([lambda c=city: self.source.fetch_city(c) for city in self.cities])

    def _merge_defaults(self, results: List[WeatherCity]) -> Sequence[Action]:
        # refreshed cities keep their card position; cities added by search stay
        return [EntitiesUpserted(results)]

    def _fetch_one(self, term: str) -> WeatherCity:
        return self.source.fetch_city(term)

    def _merge_one(self, entity: WeatherCity) -> Action:
        return EntitiesUpserted([entity])
