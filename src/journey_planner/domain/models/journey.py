"""Journey domain model."""

from dataclasses import dataclass, field
from typing import Literal

from journey_planner.domain.models.grouped_leg import GroupedLeg, LegStop

JourneyStatus = Literal["on-time", "delayed", "cancelled"]

WALKING_ROUTE_MARKER = "🚶"
FALLBACK_ROUTE_NUMBER = "Bus"


@dataclass(frozen=True)
class GeoPoint:
    """A point of the detailed route geometry."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Journey:
    """The UI-facing, assembled representation of one selected itinerary.

    Built in a single assembly pass and replaced wholesale on each new search.
    """

    id: str
    route_number: str  # line number, WALKING_ROUTE_MARKER or FALLBACK_ROUTE_NUMBER
    destination: str
    departure: str
    arrival: str
    status: JourneyStatus
    segments: tuple[GroupedLeg, ...]
    delay_minutes: float | None = None
    current_stop: str | None = None
    next_stop: str | None = None
    vehicle_uuid: str | None = None
    stops: tuple[LegStop, ...] = field(default_factory=tuple)
    current_stop_index: int = 0  # assembly-time value; the live index comes from tracking
    route_geometry: tuple[GeoPoint, ...] = field(default_factory=tuple)

    @property
    def is_walking_only(self) -> bool:
        """Whether no leg of the journey uses a vehicle."""
        return all(leg.type == "walking" for leg in self.segments)
