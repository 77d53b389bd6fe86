"""Classification of stops as completed, current or upcoming."""

from datetime import datetime

from journey_planner.application.services.time_formatter import parse_clock_time
from journey_planner.domain.models.journey_progress import StopStatus

# A stop stays "current" from CURRENT_WINDOW_AHEAD_MINUTES before its time
# until COMPLETED_AFTER_MINUTES after it.
COMPLETED_AFTER_MINUTES = 2
CURRENT_WINDOW_AHEAD_MINUTES = 5


def classify_stop(scheduled_time: str | None, now: datetime | None = None) -> StopStatus:
    """Classify one stop by its scheduled HH:MM time relative to now.

    Unknown or unparseable times are treated as upcoming.
    """
    now = now or datetime.now()
    scheduled_at = parse_clock_time(scheduled_time, now)
    if scheduled_at is None:
        return "upcoming"

    diff_minutes = (scheduled_at - now).total_seconds() / 60
    if diff_minutes < -COMPLETED_AFTER_MINUTES:
        return "completed"
    if diff_minutes < CURRENT_WINDOW_AHEAD_MINUTES:
        return "current"
    return "upcoming"
