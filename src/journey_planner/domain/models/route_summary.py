"""Route summary wire model."""

from pydantic import BaseModel, ConfigDict


class RouteSummary(BaseModel):
    """Aggregate figures the backend computes for a whole itinerary."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    total_duration_minutes: float = 0.0
    total_walking_time_minutes: float = 0.0
    total_walking_distance_meters: float = 0.0
    total_wait_time_minutes: float = 0.0
    total_delay_time_minutes: float = 0.0
    number_of_transfers: int = 0
    departure_timestamp: int
    arrival_timestamp: int
    segments_count: int | None = None
    walking_segments_count: int | None = None
    transit_segments_count: int | None = None
