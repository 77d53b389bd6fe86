"""Tests for backend wire models."""

import pytest
from pydantic import ValidationError

from journey_planner.domain.models import (
    RawSegment,
    RecurringRoute,
    RecurringRouteDetail,
    RouteResponse,
    RouteSummary,
)
from tests.factories import (
    BASE_TIMESTAMP,
    route_response_payload,
    segment_payload,
    summary_payload,
)


def test_route_response_parses_full_payload() -> None:
    """Given a complete backend payload, when validating, then nested models are built."""
    response = RouteResponse.model_validate(route_response_payload())

    assert response.success is True
    assert len(response.route_segments) == 3
    assert response.route_segments[0].type == "walking"
    assert response.route_segments[0].vehicle is None
    assert response.route_segments[1].vehicle is not None
    assert response.route_segments[1].vehicle.line_number == 42
    assert response.summary is not None
    assert response.summary.departure_timestamp == BASE_TIMESTAMP
    assert response.detailed_geometry == [(52.23, 21.01), (52.24, 21.02)]
    assert response.recommendations == []


def test_failed_route_response_needs_no_segments_or_summary() -> None:
    """Given a failure envelope, when validating, then segments and summary default to empty."""
    response = RouteResponse.model_validate({"success": False, "message": "No route"})

    assert response.success is False
    assert response.message == "No route"
    assert response.route_segments == []
    assert response.summary is None


def test_numeric_delay_is_coerced_to_delay_object() -> None:
    """Given a bare number as delay, when validating, then it becomes a SegmentDelay."""
    payload = segment_payload(1, "transit", "A", "B", 0, 10, line_number=7)
    payload["delay"] = 3

    segment = RawSegment.model_validate(payload)

    assert segment.delay is not None
    assert segment.delay.has_delay is True
    assert segment.delay.delay_minutes == 3.0


def test_zero_numeric_delay_has_no_delay() -> None:
    """Given a delay of 0, when validating, then has_delay is False."""
    payload = segment_payload(1, "transit", "A", "B", 0, 10, line_number=7)
    payload["delay"] = 0

    segment = RawSegment.model_validate(payload)

    assert segment.delay is not None
    assert segment.delay.has_delay is False


def test_delay_object_is_kept() -> None:
    """Given a structured delay, when validating, then its fields are preserved."""
    payload = segment_payload(1, "transit", "A", "B", 0, 10, line_number=7)
    payload["delay"] = {"has_delay": True, "delay_minutes": 4.5, "delay_reason": "Traffic"}

    segment = RawSegment.model_validate(payload)

    assert segment.delay is not None
    assert segment.delay.delay_minutes == 4.5
    assert segment.delay.delay_reason == "Traffic"


def test_segment_arriving_before_departure_is_rejected() -> None:
    """Given arrival before departure, when validating, then a ValidationError is raised."""
    payload = segment_payload(1, "transit", "A", "B", 10, 0, line_number=7)
    payload["duration_minutes"] = 0.0

    with pytest.raises(ValidationError, match="arrives before it departs"):
        RawSegment.model_validate(payload)


def test_negative_duration_is_rejected() -> None:
    """Given a negative duration, when validating, then a ValidationError is raised."""
    payload = segment_payload(1, "walking", "A", "B", 0, 10)
    payload["duration_minutes"] = -1.0

    with pytest.raises(ValidationError, match="must not be negative"):
        RawSegment.model_validate(payload)


def test_unknown_segment_type_is_rejected() -> None:
    """Given a segment type other than walking or transit, when validating, then it fails."""
    payload = segment_payload(1, "teleport", "A", "B", 0, 10)

    with pytest.raises(ValidationError):
        RawSegment.model_validate(payload)


def test_unknown_fields_are_ignored() -> None:
    """Given extra keys in the payload, when validating, then they are dropped."""
    payload = summary_payload()
    payload["co2_grams"] = 120

    summary = RouteSummary.model_validate(payload)

    assert not hasattr(summary, "co2_grams")


def test_summary_segment_counts_are_optional() -> None:
    """Given a summary without segment counts, when validating, then they are None."""
    summary = RouteSummary.model_validate(summary_payload())

    assert summary.walking_segments_count is None
    assert summary.transit_segments_count is None


def test_models_are_frozen() -> None:
    """Given a parsed segment, when assigning a field, then it is rejected."""
    segment = RawSegment.model_validate(segment_payload(1, "walking", "A", "B", 0, 5))

    with pytest.raises(ValidationError):
        segment.segment_id = 2  # type: ignore[misc]


def test_recurring_route_detail_defaults() -> None:
    """Given a minimal recurring route detail, when validating, then optional parts default."""
    detail = RecurringRouteDetail.model_validate(
        {
            "id": "r1",
            "name": "Commute",
            "from_location_name": "Home",
            "to_location_name": "Office",
            "departure_time": "08:00",
            "frequency": "weekdays",
        }
    )

    assert isinstance(detail, RecurringRoute)
    assert detail.is_active is True
    assert detail.statistics.total_trips == 0
    assert detail.alternative_times == []
    assert detail.from_coordinates is None
