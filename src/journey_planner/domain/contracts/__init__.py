"""Contracts (protocols) shared between the application and adapter layers."""

from journey_planner.domain.contracts.journey_store import JourneyStore

__all__ = ["JourneyStore"]
