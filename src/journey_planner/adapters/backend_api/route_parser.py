"""Parser for routing backend responses."""

import logging
from typing import Any

from pydantic import ValidationError

from journey_planner.domain.errors import MalformedResponseError
from journey_planner.domain.models.recurring_route import RecurringRoute, RecurringRouteDetail
from journey_planner.domain.models.route_response import RouteResponse

logger = logging.getLogger(__name__)


class RouteResponseParser:
    """Validates backend JSON into domain wire models."""

    @staticmethod
    def parse_route_response(data: Any) -> RouteResponse:
        """Parse a /plan_route or calculate-route body.

        Raises:
            MalformedResponseError: If the body does not match the itinerary shape.
        """
        if not isinstance(data, dict):
            raise MalformedResponseError("Backend returned an unexpected route response")
        try:
            response = RouteResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid route response: {e}")
            raise MalformedResponseError("Backend returned an invalid route") from e

        logger.debug(
            f"Parsed route response: success={response.success}, "
            f"{len(response.route_segments)} segments, "
            f"{len(response.detailed_geometry or [])} geometry points"
        )
        return response

    @staticmethod
    def parse_recurring_routes(data: Any) -> list[RecurringRoute]:
        """Parse a recurring-routes listing. Returns [] when the backend reports failure."""
        if not isinstance(data, dict) or not data.get("success"):
            return []
        routes = []
        for raw_route in data.get("routes") or []:
            try:
                routes.append(RecurringRoute.model_validate(raw_route))
            except ValidationError as e:
                logger.warning(f"Skipping invalid recurring route: {e}")
        return routes

    @staticmethod
    def parse_recurring_route_detail(data: Any) -> RecurringRouteDetail | None:
        """Parse a recurring-route detail. Returns None when the backend reports failure."""
        if not isinstance(data, dict) or not data.get("success") or not data.get("route"):
            return None
        try:
            return RecurringRouteDetail.model_validate(data["route"])
        except ValidationError as e:
            logger.error(f"Invalid recurring route detail: {e}")
            raise MalformedResponseError("Backend returned an invalid recurring route") from e
