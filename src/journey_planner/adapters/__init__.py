"""Adapters layer - external system integrations."""

from journey_planner.adapters.backend_api import (
    BackendRecurringRouteRepository,
    BackendRouteRepository,
)
from journey_planner.adapters.config import AppConfig
from journey_planner.adapters.session import JourneySession

__all__ = [
    "AppConfig",
    "BackendRecurringRouteRepository",
    "BackendRouteRepository",
    "JourneySession",
]
