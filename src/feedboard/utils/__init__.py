"""Shared utilities (logging, date formatting)."""
