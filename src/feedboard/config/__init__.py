"""Configuration: named constants plus the startup-resolved ``Settings``."""

from feedboard.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
