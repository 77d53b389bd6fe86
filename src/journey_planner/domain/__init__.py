"""Domain layer - core models, ports and errors."""

from journey_planner.domain.contracts import JourneyStore
from journey_planner.domain.models import (
    GroupedLeg,
    Journey,
    RawSegment,
    RouteResponse,
    RouteSummary,
)
from journey_planner.domain.ports import (
    RecurringRouteRepository,
    RouteRepository,
)

__all__ = [
    "GroupedLeg",
    "Journey",
    "JourneyStore",
    "RawSegment",
    "RecurringRouteRepository",
    "RouteRepository",
    "RouteResponse",
    "RouteSummary",
]
