"""
Shared layout helpers for dashboard components.

Provides theme palettes, loading skeletons, number formatting and the
themed line chart used by the crypto and COVID panels.
"""

from dataclasses import dataclass
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # Use non-interactive backend for Streamlit
import matplotlib.pyplot as plt
import streamlit as st

from feedboard.state.models import ChartSeries


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    surface: str
    text: str
    muted: str
    axis: str
    line: str = "#4bc0c0"


LIGHT = Theme(name="light", background="#ffffff", surface="#f4f4f5",
              text="#09090b", muted="#e4e4e7", axis="black")
DARK = Theme(name="dark", background="#09090b", surface="#18181b",
             text="#fafafa", muted="#27272a", axis="white")

THEMES = {"light": LIGHT, "dark": DARK}


def get_theme(name: str) -> Theme:
    """Return the palette for ``name``, falling back to light."""
    return THEMES.get(name, LIGHT)


def change_color(pct: float) -> str:
    """Green for gains, red otherwise (zero counts as a loss)."""
    return "green" if pct > 0 else "red"


def change_marker(pct: float) -> str:
    return "▲" if pct > 0 else "▼"


def format_count(value: int) -> str:
    """Format a count with thousands separators."""
    return f"{value:,}"


def line_chart_figure(series: ChartSeries, theme: Theme, title: Optional[str] = None) -> plt.Figure:
    """
    Create a line chart for a chart series, coloured for the active theme.

    Args:
        series: Labels and values to plot
        theme: Active light/dark palette
        title: Figure title (defaults to the series title)

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(10, 4))
    fig.patch.set_facecolor(theme.background)
    ax.set_facecolor(theme.background)

    if not series.values:
        ax.text(0.5, 0.5, "No data available", color=theme.axis,
                ha="center", va="center", transform=ax.transAxes)
    else:
        positions = list(range(len(series.values)))
        ax.plot(positions, series.values, label=series.title or "Value",
                color=theme.line, linewidth=2)

        # Thin the x labels so sub-daily series stay readable
        step = max(1, len(positions) // 8)
        ax.set_xticks(positions[::step])
        ax.set_xticklabels(series.labels[::step], rotation=30, ha="right")
        legend = ax.legend()
        for text in legend.get_texts():
            text.set_color(theme.axis)
        legend.get_frame().set_facecolor(theme.background)

    ax.set_title(title if title is not None else series.title, color=theme.axis)
    ax.tick_params(colors=theme.axis)
    for spine in ax.spines.values():
        spine.set_color(theme.axis)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def render_chart(series: ChartSeries, theme: Theme, title: Optional[str] = None) -> None:
    fig = line_chart_figure(series, theme, title)
    st.pyplot(fig)
    plt.close(fig)


def render_skeleton_cards(count: int, columns: int = 3) -> None:
    """Render ``count`` placeholder cards in a grid while a panel loads."""
    cols = st.columns(columns)
    for i in range(count):
        with cols[i % columns]:
            st.markdown(
                '<div class="fb-card"><div class="fb-skeleton fb-skeleton-title"></div>'
                '<div class="fb-skeleton"></div><div class="fb-skeleton"></div>'
                '<div class="fb-skeleton"></div></div>',
                unsafe_allow_html=True,
            )


def render_skeleton_rows(count: int, headers: list[str]) -> None:
    """Render a placeholder table with ``count`` rows under ``headers``."""
    cells = "".join(f"<th>{h}</th>" for h in headers)
    row = "".join('<td><div class="fb-skeleton"></div></td>' for _ in headers)
    body = "".join(f"<tr>{row}</tr>" for _ in range(count))
    st.markdown(
        f'<table class="fb-table"><thead><tr>{cells}</tr></thead><tbody>{body}</tbody></table>',
        unsafe_allow_html=True,
    )


def apply_theme_css(theme: Theme) -> None:
    """Apply the light/dark palette and skeleton styling."""
    st.markdown(f"""
    <style>
    .stApp {{
        background-color: {theme.background};
        color: {theme.text};
    }}

    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label, .stApp span {{
        color: {theme.text};
    }}

    .fb-card {{
        background-color: {theme.surface};
        border-radius: 0.5rem;
        padding: 1rem;
        margin-bottom: 1rem;
    }}

    .fb-skeleton {{
        background-color: {theme.muted};
        border-radius: 0.25rem;
        height: 1rem;
        margin: 0.5rem 0;
    }}

    .fb-skeleton-title {{
        height: 1.5rem;
        width: 6rem;
    }}

    .fb-table {{
        width: 100%;
    }}
    </style>
    """, unsafe_allow_html=True)
