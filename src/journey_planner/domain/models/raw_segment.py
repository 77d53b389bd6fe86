"""Raw route segment wire model."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from journey_planner.domain.models.stop import ApiStop
from journey_planner.domain.models.vehicle import ApiVehicle, SegmentDelay

SegmentType = Literal["walking", "transit"]


class RawSegment(BaseModel):
    """One atomic leg of an itinerary as returned by the backend.

    Either a walking hop or a single vehicle ride between two stops.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    segment_id: int
    type: SegmentType
    from_stop: ApiStop
    to_stop: ApiStop
    departure_timestamp: int
    arrival_timestamp: int
    duration_minutes: float = 0.0
    walking_distance_meters: float | None = None
    vehicle: ApiVehicle | None = None
    delay: SegmentDelay | None = None

    @field_validator("delay", mode="before")
    @classmethod
    def coerce_numeric_delay(cls, v: Any) -> Any:
        """Accept the bare-number delay sent by older backend revisions."""
        if isinstance(v, bool) or not isinstance(v, int | float):
            return v
        return {"has_delay": v > 0, "delay_minutes": float(v)}

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, v: float) -> float:
        """Validate duration is not negative."""
        if v < 0:
            raise ValueError("duration_minutes must not be negative")
        return v

    @model_validator(mode="after")
    def validate_timestamps(self) -> "RawSegment":
        """Validate arrival is not before departure."""
        if self.arrival_timestamp < self.departure_timestamp:
            raise ValueError(
                f"Segment {self.segment_id} arrives before it departs "
                f"({self.arrival_timestamp} < {self.departure_timestamp})"
            )
        return self

    @property
    def is_transit(self) -> bool:
        """Whether this segment is a vehicle ride."""
        return self.type == "transit"
