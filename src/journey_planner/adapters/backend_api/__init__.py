"""Routing backend API adapters."""

from journey_planner.adapters.backend_api.recurring_route_repository import (
    BackendRecurringRouteRepository,
)
from journey_planner.adapters.backend_api.route_repository import BackendRouteRepository

__all__ = ["BackendRecurringRouteRepository", "BackendRouteRepository"]
