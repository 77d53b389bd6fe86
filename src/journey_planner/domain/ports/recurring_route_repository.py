"""Recurring route repository port."""

from typing import Protocol

from journey_planner.domain.models.recurring_route import RecurringRoute, RecurringRouteDetail
from journey_planner.domain.models.route_response import RouteResponse


class RecurringRouteRepository(Protocol):
    """Port for the recurring-routes backend."""

    async def list_routes(self, active_only: bool = True) -> list[RecurringRoute]:
        """List saved recurring routes."""
        ...

    async def get_route(self, route_id: str) -> RecurringRouteDetail | None:
        """Get full details of a recurring route."""
        ...

    async def calculate_route(self, route_id: str, use_now: bool = False) -> RouteResponse:
        """Compute an itinerary for a recurring route."""
        ...
