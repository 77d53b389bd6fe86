"""Journey completion percentage from wall-clock time."""

from datetime import datetime, timedelta

from journey_planner.application.services.time_formatter import parse_clock_time


def calculate_progress(
    departure: str | None, arrival: str | None, now: datetime | None = None
) -> float:
    """Percentage of the journey completed at the given instant.

    Both times are placed on today's date. An arrival earlier than the departure
    is taken to be after midnight. Missing or unparseable times give 0.

    Args:
        departure: Scheduled departure as HH:MM.
        arrival: Scheduled arrival as HH:MM.
        now: The current instant. Defaults to the local wall clock.

    Returns:
        Progress clamped to [0, 100].
    """
    now = now or datetime.now()
    departure_at = parse_clock_time(departure, now)
    arrival_at = parse_clock_time(arrival, now)
    if departure_at is None or arrival_at is None:
        return 0.0

    if arrival_at < departure_at:
        arrival_at += timedelta(days=1)

    elapsed = (now - departure_at).total_seconds()
    total = (arrival_at - departure_at).total_seconds()
    if total <= 0:
        return 100.0 if elapsed >= 0 else 0.0

    return min(max(elapsed / total * 100, 0.0), 100.0)
