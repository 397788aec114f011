"""DateTime utilities for the project."""

from datetime import datetime, timezone


# Month/day/year without zero padding, the way en-US locales print dates.
def format_local_date(dt: datetime) -> str:
    """Format a datetime as ``M/D/YYYY``."""
    return f"{dt.month}/{dt.day}/{dt.year}"


def seconds_to_date(seconds: float) -> str:
    """Convert seconds since epoch to a display date (UTC)."""
    return format_local_date(datetime.fromtimestamp(seconds, tz=timezone.utc))


def millis_to_date(millis: float) -> str:
    """Convert milliseconds since epoch to a display date (UTC)."""
    return seconds_to_date(millis / 1000.0)
