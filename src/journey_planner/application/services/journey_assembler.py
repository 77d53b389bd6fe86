"""Assembly of a UI-ready journey from a raw backend itinerary."""

import logging
import time
from collections.abc import Sequence
from datetime import tzinfo
from typing import Any

from journey_planner.application.services.segment_grouper import group_segments
from journey_planner.application.services.time_formatter import format_time
from journey_planner.domain.models.grouped_leg import GroupedLeg, LegStop
from journey_planner.domain.models.journey import (
    FALLBACK_ROUTE_NUMBER,
    WALKING_ROUTE_MARKER,
    GeoPoint,
    Journey,
)
from journey_planner.domain.models.raw_segment import RawSegment
from journey_planner.domain.models.route_summary import RouteSummary
from journey_planner.domain.models.vehicle import ApiVehicle

logger = logging.getLogger(__name__)


def assemble_journey(
    segments: Sequence[RawSegment],
    summary: RouteSummary,
    *,
    tz: tzinfo | None = None,
    geometry: Sequence[tuple[float, float]] | None = None,
    journey_id: str | None = None,
) -> Journey:
    """Build a Journey from the backend's segments and summary.

    Args:
        segments: Ordered raw segments, at least one.
        summary: Summary block of the same response.
        tz: Timezone for the formatted times. None means local.
        geometry: Optional detailed route geometry as [lat, lon] pairs.
        journey_id: Identifier to use. Generated from the clock if omitted.

    Returns:
        The assembled journey.

    Raises:
        ValueError: If segments is empty.
    """
    if not segments:
        raise ValueError("Cannot assemble a journey from an empty segment list")

    transit_segments = [s for s in segments if s.is_transit]
    legs = tuple(group_segments(segments, tz))
    logger.debug(
        f"Assembling journey from {len(segments)} segments "
        f"({len(transit_segments)} transit, {len(segments) - len(transit_segments)} walking)"
    )

    first_segment = segments[0]
    last_segment = segments[-1]
    common: dict[str, Any] = {
        "id": journey_id or f"route-{int(time.time() * 1000)}",
        "departure": format_time(summary.departure_timestamp, tz),
        "arrival": format_time(summary.arrival_timestamp, tz),
        "segments": legs,
        "stops": _collect_stops(legs),
        "current_stop_index": 0,
        "route_geometry": tuple(
            GeoPoint(latitude=lat, longitude=lon) for lat, lon in geometry or ()
        ),
    }

    if not transit_segments:
        return Journey(
            route_number=WALKING_ROUTE_MARKER,
            destination=last_segment.to_stop.name,
            status="on-time",
            current_stop=first_segment.from_stop.name,
            next_stop=_lookahead_next_stop(segments),
            **common,
        )

    main_vehicle = select_representative_vehicle(transit_segments)
    last_transit = transit_segments[-1]
    has_delay = summary.total_delay_time_minutes > 0

    return Journey(
        route_number=str(main_vehicle.line_number) if main_vehicle else FALLBACK_ROUTE_NUMBER,
        destination=last_transit.to_stop.name or last_segment.to_stop.name,
        status="delayed" if has_delay else "on-time",
        delay_minutes=summary.total_delay_time_minutes if has_delay else None,
        current_stop=transit_segments[0].from_stop.name or first_segment.from_stop.name,
        next_stop=_lookahead_next_stop(transit_segments) or _lookahead_next_stop(segments),
        vehicle_uuid=main_vehicle.uuid if main_vehicle else None,
        **common,
    )


def select_representative_vehicle(segments: Sequence[RawSegment]) -> ApiVehicle | None:
    """Pick the vehicle whose line occurs on the most segments.

    Ties go to the line encountered first. Segments without a vehicle are ignored.
    """
    line_order: list[int] = []
    counts: dict[int, int] = {}
    vehicles: dict[int, ApiVehicle] = {}
    for segment in segments:
        if segment.vehicle is None:
            continue
        line = segment.vehicle.line_number
        if line not in counts:
            line_order.append(line)
            counts[line] = 0
            vehicles[line] = segment.vehicle
        counts[line] += 1

    if not line_order:
        return None
    # max() keeps the first of several equal keys
    best_line = max(line_order, key=lambda line: counts[line])
    return vehicles[best_line]


def _lookahead_next_stop(segments: Sequence[RawSegment]) -> str | None:
    """Origin of the second segment, else the destination of the first."""
    if not segments:
        return None
    if len(segments) > 1 and segments[1].from_stop.name:
        return segments[1].from_stop.name
    return segments[0].to_stop.name or None


def _collect_stops(legs: Sequence[GroupedLeg]) -> tuple[LegStop, ...]:
    """Boundary stops of the legs in travel order.

    Where a leg ends at the stop the next leg starts from, the two are merged
    into one stop carrying both the arrival and the departure time.
    """
    stops: list[LegStop] = [legs[0].from_stop]
    for previous, leg in zip(legs, legs[1:]):
        if previous.to_stop.uuid == leg.from_stop.uuid:
            stops.append(
                LegStop(
                    uuid=leg.from_stop.uuid,
                    name=leg.from_stop.name,
                    departure_time=leg.from_stop.departure_time,
                    arrival_time=previous.to_stop.arrival_time,
                )
            )
        else:
            stops.extend([previous.to_stop, leg.from_stop])
    stops.append(legs[-1].to_stop)
    return tuple(stops)
