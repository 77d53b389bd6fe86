"""Domain models for journey planning."""

from journey_planner.domain.models.error_details import ErrorDetails
from journey_planner.domain.models.grouped_leg import GroupedLeg, LegStop, VehicleInfo
from journey_planner.domain.models.journey import (
    FALLBACK_ROUTE_NUMBER,
    WALKING_ROUTE_MARKER,
    GeoPoint,
    Journey,
    JourneyStatus,
)
from journey_planner.domain.models.journey_progress import JourneyProgress, StopStatus
from journey_planner.domain.models.raw_segment import RawSegment, SegmentType
from journey_planner.domain.models.recurring_route import (
    RecurringRoute,
    RecurringRouteDetail,
    RouteStatistics,
)
from journey_planner.domain.models.route_response import RouteResponse
from journey_planner.domain.models.route_summary import RouteSummary
from journey_planner.domain.models.stop import ApiStop, Coordinates
from journey_planner.domain.models.vehicle import ApiVehicle, SegmentDelay

__all__ = [
    "FALLBACK_ROUTE_NUMBER",
    "WALKING_ROUTE_MARKER",
    "ApiStop",
    "ApiVehicle",
    "Coordinates",
    "ErrorDetails",
    "GeoPoint",
    "GroupedLeg",
    "Journey",
    "JourneyProgress",
    "JourneyStatus",
    "LegStop",
    "RawSegment",
    "RecurringRoute",
    "RecurringRouteDetail",
    "RouteResponse",
    "RouteStatistics",
    "RouteSummary",
    "SegmentDelay",
    "SegmentType",
    "StopStatus",
    "VehicleInfo",
]
