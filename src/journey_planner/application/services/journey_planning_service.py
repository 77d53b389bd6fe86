"""Journey planning service."""

import logging
from datetime import datetime, tzinfo

from journey_planner.application.services.journey_assembler import assemble_journey
from journey_planner.domain.contracts.journey_store import JourneyStore
from journey_planner.domain.errors import BackendRejectedError, EmptyItineraryError
from journey_planner.domain.models.journey import Journey
from journey_planner.domain.models.recurring_route import RecurringRoute, RecurringRouteDetail
from journey_planner.domain.models.route_response import RouteResponse
from journey_planner.domain.ports.recurring_route_repository import RecurringRouteRepository
from journey_planner.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)


class JourneyPlanningService:
    """Fetches itineraries, turns them into journeys and records them in the session."""

    def __init__(
        self,
        route_repository: RouteRepository,
        recurring_route_repository: RecurringRouteRepository,
        store: JourneyStore,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            route_repository: Source of planned routes.
            recurring_route_repository: Source of recurring routes.
            store: Session store receiving the current journey and history.
            tz: Timezone for displayed times. None means local.
        """
        self._route_repository = route_repository
        self._recurring_route_repository = recurring_route_repository
        self._store = store
        self._tz = tz

    async def plan_journey(
        self,
        start_lat: float,
        start_lon: float,
        end_lat: float,
        end_lon: float,
        departure: datetime | None = None,
    ) -> Journey:
        """Plan a journey between two coordinates and make it the current journey.

        Raises:
            RoutePlanningError: If the backend fails or returns no usable itinerary.
        """
        self._store.is_loading_route = True
        try:
            response = await self._route_repository.plan_route(
                start_lat, start_lon, end_lat, end_lon, departure
            )
        finally:
            self._store.is_loading_route = False
        return self._accept(response)

    async def plan_recurring_journey(self, route_id: str, use_now: bool = False) -> Journey:
        """Compute a recurring route's itinerary and make it the current journey.

        Raises:
            RoutePlanningError: If the backend fails or returns no usable itinerary.
        """
        self._store.is_loading_route = True
        try:
            response = await self._recurring_route_repository.calculate_route(route_id, use_now)
        finally:
            self._store.is_loading_route = False
        for recommendation in response.recommendations:
            logger.info(f"Recommendation for recurring route {route_id}: {recommendation}")
        return self._accept(response)

    async def list_recurring_routes(self, active_only: bool = True) -> list[RecurringRoute]:
        """List the saved recurring routes."""
        return await self._recurring_route_repository.list_routes(active_only)

    async def get_recurring_route(self, route_id: str) -> RecurringRouteDetail | None:
        """Get details of one recurring route."""
        return await self._recurring_route_repository.get_route(route_id)

    def build_journey(self, response: RouteResponse) -> Journey:
        """Validate a response envelope and assemble its journey.

        Raises:
            BackendRejectedError: If the backend reported success=false.
            EmptyItineraryError: If the response carries no segments or summary.
        """
        if not response.success:
            logger.error(f"Backend returned success=false: {response.message}")
            raise BackendRejectedError(response.message or "Failed to fetch route")
        if not response.route_segments or response.summary is None:
            logger.error("Backend returned an itinerary without segments")
            raise EmptyItineraryError(response.message or "No route found")

        return assemble_journey(
            response.route_segments,
            response.summary,
            tz=self._tz,
            geometry=response.detailed_geometry,
        )

    def _accept(self, response: RouteResponse) -> Journey:
        """Build the journey and record it in the session store."""
        journey = self.build_journey(response)
        self._store.set_current_journey(journey)
        self._store.add_journey_to_history(journey)
        logger.info(
            f"Planned journey {journey.id}: {journey.route_number} to {journey.destination} "
            f"({journey.departure}-{journey.arrival}, {len(journey.segments)} legs)"
        )
        return journey
