"""Tests for stop status classification."""

from datetime import datetime

import pytest

from journey_planner.application.services import classify_stop


@pytest.mark.parametrize(
    ("now", "expected"),
    [
        (datetime(2024, 1, 15, 14, 30), "upcoming"),  # 15 min ahead
        (datetime(2024, 1, 15, 14, 40), "upcoming"),  # exactly 5 min ahead
        (datetime(2024, 1, 15, 14, 40, 1), "current"),  # just under 5 min ahead
        (datetime(2024, 1, 15, 14, 44), "current"),  # 1 min ahead
        (datetime(2024, 1, 15, 14, 45), "current"),  # on time
        (datetime(2024, 1, 15, 14, 47), "current"),  # exactly 2 min past
        (datetime(2024, 1, 15, 14, 47, 1), "completed"),  # just over 2 min past
        (datetime(2024, 1, 15, 15, 30), "completed"),
    ],
)
def test_stop_at_1445_is_classified_by_distance_from_now(now: datetime, expected: str) -> None:
    """Given a stop at 14:45, when classifying at various instants, then the tolerance window applies."""
    assert classify_stop("14:45", now) == expected


@pytest.mark.parametrize("scheduled_time", [None, "", "--:--", "later"])
def test_unknown_time_is_upcoming(scheduled_time: str | None) -> None:
    """Given a missing or malformed time, when classifying, then the stop is upcoming."""
    now = datetime(2024, 1, 15, 23, 59)

    assert classify_stop(scheduled_time, now) == "upcoming"
