"""Tests for grouping raw segments into legs."""

from datetime import UTC

import pytest

from journey_planner.application.services import group_segments
from journey_planner.domain.models import GroupedLeg, RawSegment, VehicleInfo
from tests.factories import (
    make_segment,
    segment_payload,
    vehicle_payload,
    walk_then_ride_payloads,
)


def _walk_then_ride() -> list[RawSegment]:
    return [RawSegment.model_validate(p) for p in walk_then_ride_payloads()]


def test_consecutive_transit_segments_merge_into_one_leg() -> None:
    """Given walk + two rides on line 42, when grouping, then yields one walking and one transit leg."""
    legs = group_segments(_walk_then_ride(), UTC)

    assert [leg.type for leg in legs] == ["walking", "transit"]
    walking, transit = legs
    assert (walking.departure_time, walking.arrival_time) == ("14:00", "14:05")
    assert (transit.departure_time, transit.arrival_time) == ("14:05", "14:30")
    assert transit.duration_minutes == 25
    assert transit.leg_id == 2


def test_leg_boundaries_come_from_first_and_last_segment() -> None:
    """Given a merged group, when grouping, then the leg spans first origin to last destination."""
    transit = group_segments(_walk_then_ride(), UTC)[1]

    assert transit.from_stop.name == "Central"
    assert transit.from_stop.departure_time == "14:05"
    assert transit.to_stop.name == "Harbor"
    assert transit.to_stop.arrival_time == "14:30"


def test_grouping_preserves_total_duration_and_endpoints() -> None:
    """Given mixed segments, when grouping, then total duration and journey endpoints are unchanged."""
    segments = [
        make_segment(10, "walking", "A", "B", 0, 4, walking_distance_meters=300.0),
        make_segment(11, "walking", "B", "C", 4, 7, walking_distance_meters=200.0),
        make_segment(14, "transit", "C", "D", 7, 19, line_number=7),
        make_segment(15, "walking", "D", "E", 19, 22, walking_distance_meters=150.0),
        make_segment(20, "transit", "E", "F", 22, 40, line_number=3),
    ]

    legs = group_segments(segments, UTC)

    assert sum(leg.duration_minutes for leg in legs) == sum(s.duration_minutes for s in segments)
    assert legs[0].from_stop.uuid == segments[0].from_stop.uuid
    assert legs[-1].to_stop.uuid == segments[-1].to_stop.uuid
    assert [leg.leg_id for leg in legs] == [10, 14, 15, 20]


def test_walking_distance_is_summed_per_leg() -> None:
    """Given two walking segments, when grouping, then their distances are added."""
    segments = [
        make_segment(1, "walking", "A", "B", 0, 4, walking_distance_meters=300.0),
        make_segment(2, "walking", "B", "C", 4, 7, walking_distance_meters=200.5),
    ]

    (leg,) = group_segments(segments, UTC)

    assert leg.walking_distance_meters == 500.5


def test_walking_distance_is_none_when_zero() -> None:
    """Given a transit leg without walking distance, when grouping, then distance is None."""
    transit = group_segments(_walk_then_ride(), UTC)[1]

    assert transit.walking_distance_meters is None


def test_single_segment_yields_single_leg() -> None:
    """Given one segment, when grouping, then exactly one leg is produced."""
    legs = group_segments([make_segment(5, "transit", "A", "B", 0, 12, line_number=9)], UTC)

    assert len(legs) == 1
    assert legs[0].vehicle_info == VehicleInfo(line_number=9, destination="Terminus 9", type="bus")


def test_all_walking_input_yields_only_walking_legs() -> None:
    """Given only walking segments, when grouping, then no transit leg or vehicle appears."""
    segments = [
        make_segment(1, "walking", "A", "B", 0, 4),
        make_segment(2, "walking", "B", "C", 4, 9),
    ]

    legs = group_segments(segments, UTC)

    assert len(legs) == 1
    assert legs[0].type == "walking"
    assert legs[0].vehicle_info is None


def test_already_alternating_input_yields_one_leg_per_segment() -> None:
    """Given segments with no two adjacent of the same type, when grouping, then each becomes a leg."""
    segments = [
        make_segment(1, "walking", "A", "B", 0, 4, walking_distance_meters=300.0),
        make_segment(2, "transit", "B", "C", 4, 10, line_number=1),
        make_segment(3, "walking", "C", "D", 10, 12, walking_distance_meters=100.0),
    ]

    legs = group_segments(segments, UTC)

    assert len(legs) == len(segments)
    for leg, segment in zip(legs, segments):
        assert leg.leg_id == segment.segment_id
        assert leg.duration_minutes == segment.duration_minutes
        assert leg.from_stop.uuid == segment.from_stop.uuid
        assert leg.to_stop.uuid == segment.to_stop.uuid


def test_vehicle_info_comes_from_first_segment_with_a_vehicle() -> None:
    """Given a group whose first segment lacks a vehicle, when grouping, then the next vehicle is used."""
    segments = [
        RawSegment.model_validate(segment_payload(1, "transit", "A", "B", 0, 5)),
        RawSegment.model_validate(
            segment_payload(2, "transit", "B", "C", 5, 9, vehicle=vehicle_payload(18))
        ),
        make_segment(3, "transit", "C", "D", 9, 14, line_number=33),
    ]

    (leg,) = group_segments(segments, UTC)

    assert leg.vehicle_info is not None
    assert leg.vehicle_info.line_number == 18


def test_legs_are_immutable() -> None:
    """Given a built leg, when assigning a field, then an error is raised."""
    leg: GroupedLeg = group_segments(_walk_then_ride(), UTC)[0]

    with pytest.raises(AttributeError):
        leg.duration_minutes = 0  # type: ignore[misc]


def test_empty_input_is_rejected() -> None:
    """Given no segments, when grouping, then ValueError is raised."""
    with pytest.raises(ValueError, match="empty segment list"):
        group_segments([], UTC)
