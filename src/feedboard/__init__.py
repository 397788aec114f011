"""Feedboard: weather, crypto and COVID-19 feeds behind one dashboard.

The package is framework-agnostic. Sources fetch and parse upstream JSON,
stores hold per-panel state, and panel controllers coordinate the two.
The Streamlit UI lives in the top-level ``dashboard`` package.
"""

__version__ = "0.1.0"
