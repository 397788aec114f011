"""Streamlit components: one module per panel plus shared layout helpers."""
