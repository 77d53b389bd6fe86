"""Recurring route wire models."""

from pydantic import BaseModel, ConfigDict, Field

from journey_planner.domain.models.stop import Coordinates


class RecurringRoute(BaseModel):
    """A saved route the user travels regularly."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    from_location_name: str
    to_location_name: str
    departure_time: str
    frequency: str
    is_active: bool = True
    average_duration_minutes: float = 0.0


class RouteStatistics(BaseModel):
    """Punctuality statistics collected for a recurring route."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    total_trips: int = 0
    on_time_percentage: float = 0.0
    average_delay_minutes: float = 0.0
    most_common_delay_reason: str | None = None


class RecurringRouteDetail(RecurringRoute):
    """Full details of a recurring route."""

    description: str | None = None
    from_coordinates: Coordinates | None = None
    to_coordinates: Coordinates | None = None
    average_walking_time_minutes: float = 0.0
    average_walking_distance_meters: float = 0.0
    typical_transfers: int = 0
    statistics: RouteStatistics = Field(default_factory=RouteStatistics)
    best_departure_time: str | None = None
    alternative_times: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
