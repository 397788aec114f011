"""Tests for the static-rate currency conversion."""

import pytest

from feedboard.config.config import DEFAULT_EXCHANGE_RATES
from feedboard.errors import UnsupportedCurrency
from feedboard.panels.crypto import convert, format_amount


def test_usd_is_amount_times_price_exactly():
    assert convert(2.5, "USD", 64123.45) == 2.5 * 64123.45
    assert convert(3, "usd", 0.1) == 3 * 0.1


def test_default_rate_table():
    assert DEFAULT_EXCHANGE_RATES == {"EUR": 0.84, "GBP": 0.72, "JPY": 110.14}
    assert convert(1, "EUR", 100.0) == pytest.approx(84.0)
    assert convert(1, "GBP", 100.0) == pytest.approx(72.0)
    assert convert(1, "JPY", 100.0) == pytest.approx(11014.0)


@pytest.mark.parametrize("currency", ["USD", "EUR", "GBP", "JPY"])
def test_conversion_is_linear_in_amount(currency):
    price = 1234.5
    one = convert(1, currency, price)
    assert convert(0, currency, price) == 0
    assert convert(7, currency, price) == pytest.approx(7 * one)
    assert convert(2 + 3, currency, price) == pytest.approx(
        convert(2, currency, price) + convert(3, currency, price)
    )


def test_conversion_is_idempotent():
    assert convert(4, "GBP", 10.0) == convert(4, "GBP", 10.0)


def test_custom_rate_table():
    assert convert(2, "CHF", 50.0, rates={"CHF": 0.9}) == pytest.approx(90.0)


def test_unknown_currency_raises():
    with pytest.raises(UnsupportedCurrency):
        convert(1, "AUD", 100.0)


def test_format_amount_two_decimals():
    assert format_amount(84) == "84.00"
    assert format_amount(1234.5678) == "1234.57"
