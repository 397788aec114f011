"""
COVID-19 panel component.

Global totals card, top-countries table (country search pushes the result
to the top), and the 30-day global cases trend.
"""

from typing import Any, Dict, List

import streamlit as st

from feedboard.config.config import COVID_HISTORY_DAYS, COVID_PLACEHOLDERS
from feedboard.panels.covid import CovidPanel
from feedboard.state.models import CovidCountry, GlobalTotals
from dashboard.components.layout import (
    Theme,
    format_count,
    render_chart,
    render_skeleton_rows,
)

TABLE_HEADERS = ["Country", "Total Cases", "Deaths", "Recovered"]


def table_rows(countries: List[CovidCountry]) -> List[Dict[str, str]]:
    """Rows for the top-countries table, counts with thousands separators."""
    return [
        {
            "Country": c.country,
            "Total Cases": format_count(c.cases),
            "Deaths": format_count(c.deaths),
            "Recovered": format_count(c.recovered),
        }
        for c in countries
    ]


def _render_global(totals: GlobalTotals) -> None:
    with st.container(border=True):
        st.subheader("Global Statistics")
        col_cases, col_deaths, col_recovered = st.columns(3)
        with col_cases:
            st.metric("👥 Total Cases", format_count(totals.cases))
        with col_deaths:
            st.metric("➖ Total Deaths", format_count(totals.deaths))
        with col_recovered:
            st.metric("✔️ Total Recovered", format_count(totals.recovered))


def render_panel(panel: CovidPanel, theme: Theme) -> Dict[str, Any]:
    """
    Render the COVID-19 statistics panel.

    Args:
        panel: COVID controller held in the session
        theme: Active light/dark palette (chart colours)

    Returns:
        Dict containing panel state for the sidebar status.
    """
    st.header("🦠 COVID-19 Statistics")

    with st.form("covid-search", clear_on_submit=True):
        col_input, col_button = st.columns([4, 1])
        with col_input:
            term = st.text_input("Country", placeholder="Enter country name",
                                 label_visibility="collapsed")
        with col_button:
            submitted = st.form_submit_button("🔍 Search", use_container_width=True)
    if submitted:
        panel.search(term)

    if panel.state.loading:
        placeholder = st.empty()
        with placeholder.container():
            st.subheader("Top Countries")
            render_skeleton_rows(COVID_PLACEHOLDERS, TABLE_HEADERS)
        panel.mount()
        placeholder.empty()

    state = panel.state
    if state.error:
        st.error(state.error)
        st.button("🔄 Retry", key="covid-retry", on_click=panel.refresh)
        return {"status": "error", "entity_count": len(state.entities)}

    totals = panel.global_totals
    if totals is not None:
        _render_global(totals)

    with st.container(border=True):
        st.subheader("Top Countries")
        st.table(table_rows(state.entities))

    if state.chart_series is not None:
        with st.container(border=True):
            st.subheader(f"Global Cases Trend (Last {COVID_HISTORY_DAYS} Days)")
            render_chart(state.chart_series, theme)

    return {
        "status": "success",
        "entity_count": len(state.entities),
        "chart_points": len(state.chart_series) if state.chart_series else 0,
    }
