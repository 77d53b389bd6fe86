"""Grouped leg domain model."""

from dataclasses import dataclass

from journey_planner.domain.models.raw_segment import SegmentType


@dataclass(frozen=True)
class LegStop:
    """A boundary stop of a leg with its formatted times."""

    uuid: str
    name: str
    departure_time: str | None = None
    arrival_time: str | None = None

    @property
    def scheduled_time(self) -> str | None:
        """Time the traveller is expected at this stop."""
        return self.arrival_time or self.departure_time


@dataclass(frozen=True)
class VehicleInfo:
    """Line information displayed for a transit leg."""

    line_number: int
    destination: str
    type: str


@dataclass(frozen=True)
class GroupedLeg:
    """One or more consecutive same-type segments merged into a single display unit."""

    leg_id: int  # id of the first raw segment in the group
    type: SegmentType
    from_stop: LegStop
    to_stop: LegStop
    departure_time: str
    arrival_time: str
    duration_minutes: float
    walking_distance_meters: float | None = None  # None when the group walked zero meters
    vehicle_info: VehicleInfo | None = None
