"""CoinGecko markets and price-history source."""

from typing import Any, List

from feedboard.config.config import CRYPTO_CHART_DAYS, CRYPTO_TOP_N, CRYPTO_VS_CURRENCY
from feedboard.errors import NotFound, PayloadError
from feedboard.sources.base import BaseSource, RemoteDataClient, expect_mapping, path_segment
from feedboard.state.models import ChartSeries, CryptoCoin
from feedboard.utils.datetime import millis_to_date

MARKETS_PARAMS = {
    "vs_currency": CRYPTO_VS_CURRENCY,
    "order": "market_cap_desc",
    "per_page": CRYPTO_TOP_N,
    "page": 1,
    "sparkline": "false",
}


class CryptoSource(BaseSource):
    def __init__(self, client: RemoteDataClient):
        super().__init__("crypto", client)

    def fetch_top_coins(self, limit: int = CRYPTO_TOP_N) -> List[CryptoCoin]:
        """Fetch the top coins by market cap (one batched call)."""
        data = self.client.get("coins/markets", {**MARKETS_PARAMS, "per_page": limit})
        return self._parse_markets(data)

    def fetch_coin(self, coin_id: str) -> CryptoCoin:
        """Fetch market data for a single coin id.

        Raises:
            NotFound: CoinGecko returned no market row for the id
        """
        data = self.client.get(
            "coins/markets", {**MARKETS_PARAMS, "ids": coin_id.strip().lower(), "per_page": 1}
        )
        coins = self._parse_markets(data)
        if not coins:
            raise NotFound(f"No market data for coin {coin_id!r}",
                           url=self.client.url_for("coins/markets"))
        return coins[0]

    def fetch_price_history(self, coin_id: str, days: int = CRYPTO_CHART_DAYS) -> ChartSeries:
        """Fetch ``days`` of USD prices as a chart series (one point per sample)."""
        data = self.client.get(
            f"coins/{path_segment(coin_id)}/market_chart",
            {"vs_currency": CRYPTO_VS_CURRENCY, "days": days},
        )
        prices = expect_mapping(data, "market_chart").get("prices")
        if not isinstance(prices, list):
            raise PayloadError("market_chart response has no price list")

        labels: List[str] = []
        values: List[float] = []
        for point in prices:
            try:
                ts_ms, price = point[0], point[1]
                labels.append(millis_to_date(float(ts_ms)))
                values.append(float(price))
            except (TypeError, ValueError, IndexError) as e:
                raise PayloadError(f"Malformed price point {point!r}") from e
        return ChartSeries(labels=labels, values=values, title="Price (USD)")

    def _parse_markets(self, data: Any) -> List[CryptoCoin]:
        if not isinstance(data, list):
            raise PayloadError(f"Expected a list of markets, got {type(data).__name__}")
        return [self._validate(CryptoCoin, row, "markets") for row in data]
