"""
Calendar conversion utilities for match kickoff times.

The registry stores dates as opaque integers. These helpers are what callers
use to produce those integers (UTC epoch seconds) and to display them again.
"""

from datetime import datetime, timezone


KICKOFF_FORMATS = (
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d',
)


def to_timestamp(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """
    Convert calendar fields into UTC epoch seconds.

    Raises:
        ValueError: If the fields do not form a valid calendar date/time
    """
    moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    return int(moment.timestamp())


def parse_kickoff(text: str) -> int:
    """
    Parse a kickoff string into UTC epoch seconds.

    Supported formats:
    - YYYY-MM-DD HH:MM:SS (e.g., 2026-06-11 19:00:00)
    - YYYY-MM-DD HH:MM (e.g., 2026-06-11 19:00)
    - YYYY-MM-DD (e.g., 2026-06-11, midnight UTC)

    Raises:
        ValueError: If the format is invalid
    """
    text = text.strip()

    for fmt in KICKOFF_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return to_timestamp(parsed.year, parsed.month, parsed.day, parsed.hour, parsed.minute, parsed.second)

    raise ValueError(f"Invalid kickoff format: {text}. Use YYYY-MM-DD HH:MM")


def format_timestamp(timestamp: int) -> str:
    """Format UTC epoch seconds as 'YYYY-MM-DD HH:MM UTC', or the raw value if out of calendar range."""
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime('%Y-%m-%d %H:%M UTC')
    except (OverflowError, OSError, ValueError):
        return str(timestamp)
