"""Session state adapters."""

from journey_planner.adapters.session.journey_session import JourneySession

__all__ = ["JourneySession"]
