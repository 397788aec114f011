"""
Weather panel component.

Shows a card per city with the current temperature, condition and
humidity, a city search box, and a detail view with wind speed and the
next forecast slots. Use `render_panel()` inside a Streamlit tab.
"""

from typing import Any, Dict, List

import streamlit as st

from feedboard.config.config import WEATHER_PLACEHOLDERS
from feedboard.panels.weather import WeatherPanel
from feedboard.state.models import WeatherCity
from dashboard.components.layout import Theme, render_skeleton_cards


def card_lines(city: WeatherCity) -> List[str]:
    """Summary lines shown on a city card."""
    return [
        f"🌡️ {city.temperature}°C",
        f"☁️ {city.condition}",
        f"💧 {city.humidity:g}% Humidity",
    ]


def detail_lines(city: WeatherCity) -> List[str]:
    return [
        f"🌡️ Temperature: {city.temperature}°C",
        f"☁️ Condition: {city.condition}",
        f"💧 Humidity: {city.humidity:g}%",
        f"💨 Wind Speed: {city.wind_speed:g} m/s",
    ]


def forecast_lines(city: WeatherCity) -> List[str]:
    return [f"☀️ {slot.date}: {slot.temp}°C, {slot.condition}" for slot in city.forecast]


def _render_detail(panel: WeatherPanel, city: WeatherCity) -> None:
    with st.container(border=True):
        st.subheader(f"{city.city} - Detailed Forecast")
        col_now, col_forecast = st.columns(2)
        with col_now:
            for line in detail_lines(city):
                st.write(line)
        with col_forecast:
            st.write("**5-Day Forecast:**")
            for line in forecast_lines(city):
                st.write(line)
        st.button("Close", key="weather-close", on_click=panel.clear)


def render_panel(panel: WeatherPanel, theme: Theme) -> Dict[str, Any]:
    """
    Render the weather panel.

    Args:
        panel: Weather controller held in the session
        theme: Active light/dark palette

    Returns:
        Dict containing panel state for the sidebar status.
    """
    st.header("🌤️ Weather Information")

    with st.form("weather-search", clear_on_submit=True):
        col_input, col_button = st.columns([4, 1])
        with col_input:
            term = st.text_input("City", placeholder="Enter city name",
                                 label_visibility="collapsed")
        with col_button:
            submitted = st.form_submit_button("🔍 Search", use_container_width=True)
    if submitted:
        panel.search(term)

    if panel.state.loading:
        placeholder = st.empty()
        with placeholder.container():
            render_skeleton_cards(WEATHER_PLACEHOLDERS)
        panel.mount()
        placeholder.empty()

    state = panel.state
    if state.error:
        st.error(state.error)
        st.button("🔄 Retry", key="weather-retry", on_click=panel.refresh)
        return {"status": "error", "entity_count": len(state.entities)}

    cols = st.columns(3)
    for i, city in enumerate(state.entities):
        with cols[i % 3]:
            with st.container(border=True):
                st.subheader(city.city)
                for line in card_lines(city):
                    st.write(line)
                st.button("View details", key=f"weather-detail-{city.key}",
                          on_click=panel.select, args=(city.key,))

    if state.selected is not None:
        _render_detail(panel, state.selected)

    return {
        "status": "success",
        "entity_count": len(state.entities),
        "selected": state.selected.key if state.selected else None,
    }
