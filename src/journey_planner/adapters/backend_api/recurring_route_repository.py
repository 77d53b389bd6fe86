"""Routing backend recurring route repository adapter."""

from typing import TYPE_CHECKING

from journey_planner.adapters.backend_api.constants import RECURRING_ROUTES_PATH
from journey_planner.adapters.backend_api.http_client import BackendHttpClient
from journey_planner.adapters.backend_api.route_parser import RouteResponseParser
from journey_planner.adapters.config.app_config import AppConfig
from journey_planner.domain.models.recurring_route import RecurringRoute, RecurringRouteDetail
from journey_planner.domain.models.route_response import RouteResponse
from journey_planner.domain.ports.recurring_route_repository import RecurringRouteRepository

if TYPE_CHECKING:
    from aiohttp import ClientSession


class BackendRecurringRouteRepository(RecurringRouteRepository):
    """Adapter for the backend's /recurring-routes endpoints."""

    def __init__(self, session: "ClientSession", config: AppConfig) -> None:
        """Initialize with an aiohttp session and the application configuration."""
        self._http_client = BackendHttpClient(session, config)

    async def list_routes(self, active_only: bool = True) -> list[RecurringRoute]:
        """List saved recurring routes."""
        data = await self._http_client.get_json(
            RECURRING_ROUTES_PATH, {"active_only": active_only}
        )
        return RouteResponseParser.parse_recurring_routes(data)

    async def get_route(self, route_id: str) -> RecurringRouteDetail | None:
        """Get full details of a recurring route, or None if the backend has none."""
        data = await self._http_client.get_json(f"{RECURRING_ROUTES_PATH}/{route_id}")
        return RouteResponseParser.parse_recurring_route_detail(data)

    async def calculate_route(self, route_id: str, use_now: bool = False) -> RouteResponse:
        """Compute an itinerary for a recurring route, optionally departing now."""
        params = {"use_now": True} if use_now else None
        data = await self._http_client.get_json(
            f"{RECURRING_ROUTES_PATH}/{route_id}/calculate-route", params
        )
        return RouteResponseParser.parse_route_response(data)
