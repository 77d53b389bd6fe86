"""Route repository port."""

from datetime import datetime
from typing import Protocol

from journey_planner.domain.models.route_response import RouteResponse


class RouteRepository(Protocol):
    """Port for retrieving planned itineraries from the routing backend."""

    async def plan_route(
        self,
        start_lat: float,
        start_lon: float,
        end_lat: float,
        end_lon: float,
        departure: datetime | None = None,
    ) -> RouteResponse:
        """Plan a route between two coordinates, departing at the given time (default now)."""
        ...
