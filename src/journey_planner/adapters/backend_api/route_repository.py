"""Routing backend route repository adapter."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from journey_planner.adapters.backend_api.constants import PLAN_ROUTE_PATH
from journey_planner.adapters.backend_api.http_client import BackendHttpClient
from journey_planner.adapters.backend_api.route_parser import RouteResponseParser
from journey_planner.adapters.config.app_config import AppConfig
from journey_planner.domain.models.route_response import RouteResponse
from journey_planner.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class BackendRouteRepository(RouteRepository):
    """Adapter for the backend's /plan_route endpoint."""

    def __init__(self, session: "ClientSession", config: AppConfig) -> None:
        """Initialize with an aiohttp session and the application configuration."""
        self._http_client = BackendHttpClient(session, config)

    async def plan_route(
        self,
        start_lat: float,
        start_lon: float,
        end_lat: float,
        end_lon: float,
        departure: datetime | None = None,
    ) -> RouteResponse:
        """Plan a route between two coordinates.

        Args:
            start_lat: Origin latitude.
            start_lon: Origin longitude.
            end_lat: Destination latitude.
            end_lon: Destination longitude.
            departure: Desired departure time. Defaults to now.

        Returns:
            The backend's route response envelope.
        """
        departure_timestamp = int((departure or datetime.now()).timestamp())
        logger.info(
            f"Planning route ({start_lat}, {start_lon}) -> ({end_lat}, {end_lon}) "
            f"departing at {departure_timestamp}"
        )
        data = await self._http_client.get_json(
            PLAN_ROUTE_PATH,
            {
                "start_lat": start_lat,
                "start_lon": start_lon,
                "end_lat": end_lat,
                "end_lon": end_lon,
                "departure_timestamp": departure_timestamp,
            },
        )
        return RouteResponseParser.parse_route_response(data)
