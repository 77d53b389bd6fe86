"""Live tracking snapshot of a journey."""

from datetime import datetime

from journey_planner.application.services.progress_calculator import calculate_progress
from journey_planner.application.services.stop_status_classifier import classify_stop
from journey_planner.domain.models.journey import Journey
from journey_planner.domain.models.journey_progress import JourneyProgress, StopStatus


def track_journey(journey: Journey, now: datetime | None = None) -> JourneyProgress:
    """Compute the journey's progress and per-stop statuses at the given instant.

    Meant to be called on every refresh tick. Nothing is cached.
    """
    now = now or datetime.now()
    statuses = tuple(classify_stop(stop.scheduled_time, now) for stop in journey.stops)
    return JourneyProgress(
        progress_percent=calculate_progress(journey.departure, journey.arrival, now),
        stop_statuses=statuses,
        current_stop_index=locate_current_stop(statuses),
    )


def locate_current_stop(statuses: tuple[StopStatus, ...]) -> int:
    """Index of the first current stop, else the first upcoming one, else the last stop."""
    for wanted in ("current", "upcoming"):
        if wanted in statuses:
            return statuses.index(wanted)
    return max(len(statuses) - 1, 0)
