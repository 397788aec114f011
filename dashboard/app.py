"""
Feedboard - Streamlit Application

Weather, cryptocurrency and COVID-19 feeds in three tabs with a light/dark
theme toggle. Run with ``streamlit run dashboard/app.py``.
"""

import sys
from pathlib import Path
from typing import Any, Dict

import streamlit as st

# Add src and the repository root to the path so `feedboard` and
# `dashboard.*` import without an editable install
repo_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo_root / "src"))
sys.path.insert(0, str(repo_root))

from feedboard.config.settings import Settings, load_settings
from feedboard.panels import Panels, create_panels
from feedboard.utils.logging import get_logger, setup_logging
from dashboard.components import covid, crypto, weather
from dashboard.components.layout import apply_theme_css, get_theme

logger = get_logger(__name__)

PANELS_KEY = "_panels"
THEME_KEY = "_theme"


@st.cache_resource
def get_settings() -> Settings:
    """Resolve configuration once per server process."""
    settings = load_settings()
    setup_logging(settings.log_level)
    logger.info("Settings loaded")
    return settings


def get_panels() -> Panels:
    """Return this session's panel controllers, creating them on first use."""
    if PANELS_KEY not in st.session_state:
        st.session_state[PANELS_KEY] = create_panels(get_settings())
    return st.session_state[PANELS_KEY]


def toggle_theme() -> None:
    current = st.session_state.get(THEME_KEY, "light")
    st.session_state[THEME_KEY] = "dark" if current == "light" else "light"


def render_status(name: str, result: Dict[str, Any]) -> None:
    """Show one panel's status line in the sidebar."""
    status = result.get("status", "unknown")
    count = result.get("entity_count", 0)
    if status == "success":
        st.sidebar.success(f"✅ {name} - {count} items")
    elif status == "error":
        st.sidebar.error(f"❌ {name} - error")
    else:
        st.sidebar.info(f"ℹ️ {name}: {status}")


def main():
    """Main dashboard application."""

    st.set_page_config(
        page_title="Feedboard",
        page_icon="📊",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    theme = get_theme(st.session_state.get(THEME_KEY, "light"))
    apply_theme_css(theme)

    col_title, col_toggle = st.columns([6, 1])
    with col_title:
        st.title("📊 Feedboard")
    with col_toggle:
        label = "☀️ Light" if theme.name == "dark" else "🌙 Dark"
        st.button(label, key="theme-toggle", on_click=toggle_theme)

    panels = get_panels()
    st.sidebar.title("📋 Panel Status")

    weather_tab, crypto_tab, covid_tab = st.tabs(["☀️ Weather", "🪙 Crypto", "🦠 COVID-19"])

    with weather_tab:
        render_status("Weather", weather.render_panel(panels.weather, theme))
    with crypto_tab:
        render_status("Crypto", crypto.render_panel(panels.crypto, theme))
    with covid_tab:
        render_status("COVID-19", covid.render_panel(panels.covid, theme))


if __name__ == "__main__":
    main()
