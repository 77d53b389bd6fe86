"""Ports (interfaces) for the ports-and-adapters architecture."""

from journey_planner.domain.ports.recurring_route_repository import RecurringRouteRepository
from journey_planner.domain.ports.route_repository import RouteRepository

__all__ = [
    "RecurringRouteRepository",
    "RouteRepository",
]
