"""Crypto panel: top coins, coin search, 7-day chart and currency conversion."""

from typing import List, Mapping, Optional, Sequence

from feedboard.config.config import (
    BASE_CURRENCY,
    CRYPTO_LOAD_ERROR,
    CRYPTO_SEARCH_ERROR,
    CRYPTO_TOP_N,
    DEFAULT_EXCHANGE_RATES,
)
from feedboard.errors import UnsupportedCurrency
from feedboard.panels.base import PanelController
from feedboard.sources.crypto import CryptoSource
from feedboard.state.models import ChartSeries, CryptoCoin
from feedboard.state.store import Action, EntitiesReplaced, EntitiesUpserted, PanelStore


def convert(
    amount: float,
    currency: str,
    price: float,
    rates: Mapping[str, float] = DEFAULT_EXCHANGE_RATES,
) -> float:
    """Value of ``amount`` coins priced at ``price`` USD, expressed in ``currency``.

    USD is exact (``amount * price``); other currencies go through the
    static rate table.

    Raises:
        UnsupportedCurrency: ``currency`` is neither USD nor in ``rates``
    """
    code = currency.upper()
    if code == BASE_CURRENCY:
        return amount * price
    if code not in rates:
        raise UnsupportedCurrency(f"No exchange rate for {currency}")
    return amount * price * rates[code]


def format_amount(value: float) -> str:
    return f"{value:.2f}"


class CryptoPanel(PanelController):
    name = "crypto"
    load_error = CRYPTO_LOAD_ERROR
    search_error = CRYPTO_SEARCH_ERROR
    clear_chart_on_deselect = True

    def __init__(
        self,
        source: CryptoSource,
        rates: Optional[Mapping[str, float]] = None,
        top_n: int = CRYPTO_TOP_N,
        store: Optional[PanelStore] = None,
        max_workers: int = 8,
    ):
        super().__init__(store, max_workers)
        self.source = source
        self.rates = dict(DEFAULT_EXCHANGE_RATES if rates is None else rates)
        self.top_n = top_n

    @property
    def currencies(self) -> List[str]:
        return [BASE_CURRENCY, *self.rates]

    def select(self, key: str) -> bool:
        if not super().select(key):
            return False
        self.load_history(key)
        return True

    def convert(self, coin: CryptoCoin, amount: float, currency: str) -> float:
        return convert(amount, currency, coin.current_price, self.rates)

    def _fetch_defaults(self) -> List[CryptoCoin]:
        return self.source.fetch_top_coins(self.top_n)

    def _merge_defaults(self, results: List[CryptoCoin]) -> Sequence[Action]:
        return [EntitiesReplaced(results)]

    def _fetch_one(self, term: str) -> CryptoCoin:
        return self.source.fetch_coin(term)

    def _merge_one(self, entity: CryptoCoin) -> Action:
        return EntitiesUpserted([entity])

    def _fetch_history(self, key: Optional[str]) -> Optional[ChartSeries]:
        if key is None:
            selected = self.state.selected
            if selected is None:
                return None
            key = selected.key
        return self.source.fetch_price_history(key)
