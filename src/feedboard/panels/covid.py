"""COVID-19 panel: top countries, global totals, 30-day global cases chart."""

from typing import Optional, Sequence, Tuple

from feedboard.config.config import COVID_LOAD_ERROR, COVID_SEARCH_ERROR, COVID_TOP_N
from feedboard.panels.base import PanelController
from feedboard.sources.covid import CovidSource
from feedboard.state.models import ChartSeries, CovidCountry, GlobalTotals
from feedboard.state.store import (
    Action,
    EntitiesReplaced,
    EntityPromoted,
    ExtrasUpdated,
    PanelStore,
)

GLOBAL_TOTALS = "global_totals"


class CovidPanel(PanelController):
    name = "covid"
    load_error = COVID_LOAD_ERROR
    search_error = COVID_SEARCH_ERROR

    def __init__(
        self,
        source: CovidSource,
        top_n: int = COVID_TOP_N,
        store: Optional[PanelStore] = None,
        max_workers: int = 8,
    ):
        super().__init__(store, max_workers)
        self.source = source
        self.top_n = top_n

    @property
    def global_totals(self) -> Optional[GlobalTotals]:
        return self.state.extras.get(GLOBAL_TOTALS)

    def _fetch_defaults(self) -> Tuple[list, GlobalTotals]:
        countries, totals = self._gather([
            lambda: self.source.fetch_top_countries(self.top_n),
            self.source.fetch_global,
        ])
        return countries, totals

    def _merge_defaults(self, results: Tuple[list, GlobalTotals]) -> Sequence[Action]:
        countries, totals = results
        return [EntitiesReplaced(countries), ExtrasUpdated({GLOBAL_TOTALS: totals})]

    def _after_defaults(self) -> None:
        self.load_history()

    def _fetch_one(self, term: str) -> CovidCountry:
        return self.source.fetch_country(term)

    def _merge_one(self, entity: CovidCountry) -> Action:
        return EntityPromoted(entity, self.top_n)

    def _fetch_history(self, key: Optional[str]) -> ChartSeries:
        # only the global aggregate has a history series
        return self.source.fetch_global_history()
