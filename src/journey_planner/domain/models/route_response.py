"""Route response envelope wire model."""

from pydantic import BaseModel, ConfigDict, Field

from journey_planner.domain.models.raw_segment import RawSegment
from journey_planner.domain.models.route_summary import RouteSummary


class RouteResponse(BaseModel):
    """Envelope returned by /plan_route and the recurring-route calculation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    success: bool
    message: str = ""
    route_segments: list[RawSegment] = Field(default_factory=list)
    summary: RouteSummary | None = None
    detailed_geometry: list[tuple[float, float]] | None = None
    recommendations: list[str] = Field(default_factory=list)
