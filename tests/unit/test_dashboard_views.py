"""Tests for the display helpers behind the dashboard components."""

import matplotlib.pyplot as plt

from dashboard.components.covid import table_rows
from dashboard.components.crypto import card_view
from dashboard.components.layout import (
    DARK,
    LIGHT,
    change_color,
    format_count,
    get_theme,
    line_chart_figure,
)
from dashboard.components.weather import card_lines, detail_lines, forecast_lines
from feedboard.panels.crypto import CryptoPanel
from feedboard.state.models import (
    ChartSeries,
    CovidCountry,
    CryptoCoin,
    ForecastSlot,
    WeatherCity,
)


def _coin(change=2.5):
    return CryptoCoin(id="bitcoin", symbol="btc", name="Bitcoin",
                      current_price=50000.0, price_change_percentage_24h=change)


def test_theme_lookup_falls_back_to_light():
    assert get_theme("dark") is DARK
    assert get_theme("sepia") is LIGHT
    assert DARK.axis == "white" and LIGHT.axis == "black"


def test_change_color():
    assert change_color(0.1) == "green"
    assert change_color(0.0) == "red"
    assert change_color(-3) == "red"


def test_format_count_uses_thousands_separators():
    assert format_count(1234567) == "1,234,567"
    assert format_count(0) == "0"


def test_weather_card_and_detail_lines():
    city = WeatherCity(
        city="Paris", temperature=18, condition="Rain", humidity=81, wind_speed=4.6,
        forecast=[ForecastSlot(date="11/15/2023", temp=17, condition="Clouds")],
    )

    assert card_lines(city) == ["🌡️ 18°C", "☁️ Rain", "💧 81% Humidity"]
    assert "💨 Wind Speed: 4.6 m/s" in detail_lines(city)
    assert forecast_lines(city) == ["☀️ 11/15/2023: 17°C, Clouds"]


def test_crypto_card_view_converts_with_rate_table():
    panel = CryptoPanel(source=None)

    usd = card_view(panel, _coin(), 2, "USD")
    eur = card_view(panel, _coin(-1.0), 1, "EUR")

    assert usd["title"] == "Bitcoin (BTC)"
    assert usd["price"] == "$50000.00"
    assert usd["change"] == "▲ 2.50%"
    assert usd["change_color"] == "green"
    assert usd["conversion"] == "2 BTC = 100000.00 USD"
    assert eur["conversion"] == "1 BTC = 42000.00 EUR"
    assert eur["change_color"] == "red"


def test_crypto_card_view_unknown_currency():
    panel = CryptoPanel(source=None, rates={})
    assert card_view(panel, _coin(), 1, "EUR")["conversion"] == "1 BTC = n/a EUR"


def test_covid_table_rows():
    rows = table_rows([CovidCountry(country="USA", cases=111820082, deaths=1219487,
                                    recovered=109814428)])
    assert rows == [{
        "Country": "USA",
        "Total Cases": "111,820,082",
        "Deaths": "1,219,487",
        "Recovered": "109,814,428",
    }]


def test_line_chart_uses_theme_axis_colour():
    series = ChartSeries(labels=[f"d{i}" for i in range(30)],
                         values=[float(i) for i in range(30)], title="Global Cases")

    fig = line_chart_figure(series, DARK)
    try:
        ax = fig.axes[0]
        line = ax.get_lines()[0]
        assert len(line.get_ydata()) == 30
        assert ax.title.get_text() == "Global Cases"
        assert ax.title.get_color() == "white"
    finally:
        plt.close(fig)


def test_line_chart_handles_empty_series():
    fig = line_chart_figure(ChartSeries(labels=[], values=[]), LIGHT, title="Empty")
    try:
        assert len(fig.axes[0].get_lines()) == 0
    finally:
        plt.close(fig)
