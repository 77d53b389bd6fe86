"""Formatting and parsing of HH:MM display times."""

import re
from datetime import datetime, tzinfo

_CLOCK_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})")


def format_time(timestamp: float, tz: tzinfo | None = None) -> str:
    """Format a Unix timestamp (seconds) as a 24-hour HH:MM string.

    Args:
        timestamp: Seconds since the epoch.
        tz: Timezone to display in. None means the local timezone.

    Returns:
        Time string like "14:30".
    """
    return datetime.fromtimestamp(timestamp, tz=tz).strftime("%H:%M")


def parse_clock_time(value: str | None, reference: datetime) -> datetime | None:
    """Place an HH:MM string on the date of the reference instant.

    Seconds and anything after the minutes are ignored. The result carries the
    reference's tzinfo.

    Returns:
        The instant, or None if the value is missing or not a valid clock time.
    """
    if not value:
        return None
    match = _CLOCK_TIME_PATTERN.match(value)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return reference.replace(hour=hour, minute=minute, second=0, microsecond=0)
