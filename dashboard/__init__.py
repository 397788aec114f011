"""Dashboard package namespace.

This package contains the Streamlit app shell and one component module per
panel. Components receive a panel controller from :mod:`feedboard.panels`
and return a small status dict; the controller owns all fetching and state.
"""
