"""
Epoch-millisecond timestamp helpers and relative time display.

Watchlist documents carry creation timestamps as epoch milliseconds. The
helpers here convert them and render them the way the dashboard shows
them ("2h ago", "Jan 30").
"""

from datetime import datetime, timezone
from typing import Optional, Union

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def now_ms() -> int:
    """Current wall-clock time as UTC epoch milliseconds."""
    return to_epoch_ms(datetime.now(timezone.utc))


def to_epoch_ms(ts: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds.

    Naive datetimes are treated as UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return int(ts.timestamp() * 1000)


def from_epoch_ms(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def format_relative_time(timestamp_ms: int, current_ms: Optional[int] = None) -> str:
    """
    Format a timestamp relative to now.

    Args:
        timestamp_ms: Past timestamp in epoch milliseconds
        current_ms: Reference time, defaults to now

    Returns:
        "3d ago", "2h ago", "5m ago" or "Just now"
    """
    if current_ms is None:
        current_ms = now_ms()

    seconds = (current_ms - timestamp_ms) // 1000
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days}d ago"
    if hours > 0:
        return f"{hours}h ago"
    if minutes > 0:
        return f"{minutes}m ago"
    return "Just now"


def format_short_date(value: Union[datetime, int]) -> str:
    """Format a datetime or epoch-ms timestamp as e.g. "Jan 30"."""
    ts = from_epoch_ms(value) if isinstance(value, int) else value
    return f"{MONTH_ABBREVIATIONS[ts.month - 1]} {ts.day}"


def format_full_date(value: Union[datetime, int]) -> str:
    """Format a datetime or epoch-ms timestamp as e.g. "January 30, 2024"."""
    ts = from_epoch_ms(value) if isinstance(value, int) else value
    return f"{ts.strftime('%B')} {ts.day}, {ts.year}"
