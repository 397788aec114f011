"""disease.sh COVID-19 statistics source."""

from typing import List

from feedboard.config.config import COVID_HISTORY_DAYS, COVID_TOP_N
from feedboard.errors import PayloadError
from feedboard.sources.base import BaseSource, RemoteDataClient, expect_mapping, path_segment
from feedboard.state.models import ChartSeries, CovidCountry, GlobalTotals


class CovidSource(BaseSource):
    def __init__(self, client: RemoteDataClient):
        super().__init__("covid", client)

    def fetch_top_countries(self, limit: int = COVID_TOP_N) -> List[CovidCountry]:
        """Fetch countries sorted by total cases and keep the first ``limit``."""
        data = self.client.get("countries", {"sort": "cases"})
        if not isinstance(data, list):
            raise PayloadError(f"Expected a list of countries, got {type(data).__name__}")
        return [self._validate(CovidCountry, row, "countries") for row in data[:limit]]

    def fetch_global(self) -> GlobalTotals:
        return self._validate(GlobalTotals, self.client.get("all"), "all")

    def fetch_country(self, name: str) -> CovidCountry:
        """Fetch totals for one country (name, ISO code or id).

        Raises:
            NotFound: disease.sh does not know the country
        """
        data = self.client.get(f"countries/{path_segment(name)}")
        return self._validate(CovidCountry, data, "country")

    def fetch_global_history(self, days: int = COVID_HISTORY_DAYS) -> ChartSeries:
        """Fetch cumulative global cases for the last ``days`` days."""
        data = expect_mapping(
            self.client.get("historical/all", {"lastdays": days}), "historical/all"
        )
        cases = data.get("cases")
        if not isinstance(cases, dict):
            raise PayloadError("historical/all response has no cases mapping")
        try:
            values = [float(v) for v in cases.values()]
        except (TypeError, ValueError) as e:
            raise PayloadError("historical/all contains non-numeric counts") from e
        return ChartSeries(labels=[str(k) for k in cases], values=values, title="Global Cases")
