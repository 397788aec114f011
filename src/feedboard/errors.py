"""Exception hierarchy shared by sources, stores and panel controllers."""

from typing import Optional


class DashboardError(Exception):
    """Base class for every error raised by feedboard."""


class NetworkError(DashboardError):
    """Request failed in transport or returned a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.url = url

    def __str__(self) -> str:
        status = f"HTTP {self.status}" if self.status is not None else "no response"
        return f"{self.message} ({status}, {self.url})"


class NotFound(NetworkError):
    """Upstream has no entity matching the requested name or id."""


class PayloadError(DashboardError):
    """Upstream JSON is missing fields the panel depends on."""


class ConfigurationError(DashboardError):
    """Required configuration (e.g. an API key) is absent or invalid."""


class UnsupportedCurrency(DashboardError):
    """Conversion target is not in the exchange-rate table."""
