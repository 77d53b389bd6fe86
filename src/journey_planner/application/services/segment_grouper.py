"""Folding of raw segments into display legs."""

import logging
from collections.abc import Sequence
from datetime import tzinfo

from journey_planner.application.services.time_formatter import format_time
from journey_planner.domain.models.grouped_leg import GroupedLeg, LegStop, VehicleInfo
from journey_planner.domain.models.raw_segment import RawSegment

logger = logging.getLogger(__name__)


def group_segments(
    segments: Sequence[RawSegment], tz: tzinfo | None = None
) -> list[GroupedLeg]:
    """Group consecutive segments of the same type into legs.

    A single left-to-right pass: a new group is opened whenever the segment
    type changes, so groups keep the relative order of their segments.

    Args:
        segments: Ordered raw segments, at least one.
        tz: Timezone for the formatted times. None means local.

    Returns:
        Ordered list of grouped legs.

    Raises:
        ValueError: If segments is empty.
    """
    if not segments:
        raise ValueError("Cannot group an empty segment list")

    legs: list[GroupedLeg] = []
    current_group: list[RawSegment] = []

    for segment in segments:
        if current_group and segment.type != current_group[0].type:
            legs.append(_build_leg(current_group, tz))
            current_group = []
        current_group.append(segment)

    legs.append(_build_leg(current_group, tz))

    logger.debug(
        f"Grouped {len(segments)} segments into {len(legs)} legs: "
        f"{[leg.type for leg in legs]}"
    )
    return legs


def _build_leg(group: list[RawSegment], tz: tzinfo | None) -> GroupedLeg:
    """Aggregate one run of same-type segments into a leg."""
    first = group[0]
    last = group[-1]
    departure_time = format_time(first.departure_timestamp, tz)
    arrival_time = format_time(last.arrival_timestamp, tz)
    total_duration = sum(s.duration_minutes for s in group)
    total_walking_distance = sum(s.walking_distance_meters or 0 for s in group)

    return GroupedLeg(
        leg_id=first.segment_id,
        type=first.type,
        from_stop=LegStop(
            uuid=first.from_stop.uuid,
            name=first.from_stop.name,
            departure_time=departure_time,
        ),
        to_stop=LegStop(
            uuid=last.to_stop.uuid,
            name=last.to_stop.name,
            arrival_time=arrival_time,
        ),
        departure_time=departure_time,
        arrival_time=arrival_time,
        duration_minutes=total_duration,
        walking_distance_meters=total_walking_distance if total_walking_distance > 0 else None,
        vehicle_info=_first_vehicle_info(group),
    )


def _first_vehicle_info(group: list[RawSegment]) -> VehicleInfo | None:
    """Vehicle of the first segment in the group that has one."""
    for segment in group:
        if segment.vehicle is not None:
            return VehicleInfo(
                line_number=segment.vehicle.line_number,
                destination=segment.vehicle.destination,
                type=segment.vehicle.type,
            )
    return None
