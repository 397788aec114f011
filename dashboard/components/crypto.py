"""
Cryptocurrency panel component.

Top coins by market cap with 24h change, a conversion calculator driven
by the static exchange-rate table, coin search by id, and a 7-day price
chart for the selected coin.
"""

from typing import Any, Dict

import streamlit as st

from feedboard.config.config import CRYPTO_CHART_DAYS, CRYPTO_PLACEHOLDERS
from feedboard.errors import UnsupportedCurrency
from feedboard.panels.crypto import CryptoPanel, format_amount
from feedboard.state.models import CryptoCoin
from dashboard.components.layout import (
    Theme,
    change_color,
    change_marker,
    render_chart,
    render_skeleton_cards,
)


def card_view(panel: CryptoPanel, coin: CryptoCoin, amount: float, currency: str) -> Dict[str, str]:
    """Display strings for one coin card."""
    symbol = coin.symbol.upper()
    try:
        converted = f"{format_amount(panel.convert(coin, amount, currency))} {currency}"
    except UnsupportedCurrency:
        converted = f"n/a {currency}"
    pct = coin.price_change_percentage_24h
    return {
        "title": f"{coin.name} ({symbol})",
        "price": f"${format_amount(coin.current_price)}",
        "change": f"{change_marker(pct)} {pct:.2f}%",
        "change_color": change_color(pct),
        "conversion": f"{amount:g} {symbol} = {converted}",
    }


def render_panel(panel: CryptoPanel, theme: Theme) -> Dict[str, Any]:
    """
    Render the cryptocurrency panel.

    Args:
        panel: Crypto controller held in the session
        theme: Active light/dark palette (chart colours)

    Returns:
        Dict containing panel state for the sidebar status.
    """
    st.header("🪙 Cryptocurrency Prices")

    col_refresh, col_amount, col_currency = st.columns([2, 2, 1])
    with col_refresh:
        st.button("🔄 Refresh Data", key="crypto-refresh", on_click=panel.refresh)
    with col_amount:
        amount = st.number_input("Convert:", min_value=0.0, value=1.0, step=1.0,
                                 key="crypto-amount")
    with col_currency:
        currency = st.selectbox("Currency", options=panel.currencies, key="crypto-currency")

    with st.form("crypto-search", clear_on_submit=True):
        col_input, col_button = st.columns([4, 1])
        with col_input:
            term = st.text_input("Coin id", placeholder="Enter coin id (e.g. dogecoin)",
                                 label_visibility="collapsed")
        with col_button:
            submitted = st.form_submit_button("🔍 Search", use_container_width=True)
    if submitted:
        panel.search(term)

    if panel.state.loading:
        placeholder = st.empty()
        with placeholder.container():
            render_skeleton_cards(CRYPTO_PLACEHOLDERS)
        panel.mount()
        placeholder.empty()

    state = panel.state
    if state.error:
        st.error(state.error)
        st.button("🔄 Retry", key="crypto-retry", on_click=panel.refresh)
        return {"status": "error", "entity_count": len(state.entities)}

    cols = st.columns(3)
    for i, coin in enumerate(state.entities):
        view = card_view(panel, coin, amount, currency)
        with cols[i % 3]:
            with st.container(border=True):
                st.subheader(view["title"])
                st.write(f"💲 {view['price']}")
                st.markdown(f":{view['change_color']}[{view['change']}]")
                st.write(f"**{view['conversion']}**")
                st.button("📈 Chart", key=f"crypto-chart-{coin.key}",
                          on_click=panel.select, args=(coin.key,))

    if state.selected is not None and state.chart_series is not None:
        with st.container(border=True):
            st.subheader(f"{CRYPTO_CHART_DAYS}-Day Price Chart: {state.selected.name}")
            render_chart(state.chart_series, theme)
            st.button("Close chart", key="crypto-close", on_click=panel.clear)

    return {
        "status": "success",
        "entity_count": len(state.entities),
        "selected": state.selected.key if state.selected else None,
        "chart_points": len(state.chart_series) if state.chart_series else 0,
    }
