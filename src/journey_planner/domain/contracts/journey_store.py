"""Protocol for the session-scoped journey store."""

from typing import Protocol

from journey_planner.domain.models.journey import Journey


class JourneyStore(Protocol):
    """Holds the current journey and the journey history for one session."""

    @property
    def current_journey(self) -> Journey | None:
        """The journey currently being followed, if any."""
        ...

    @property
    def journey_history(self) -> tuple[Journey, ...]:
        """Journeys planned in this session, oldest first."""
        ...

    is_loading_route: bool

    def set_current_journey(self, journey: Journey | None) -> None:
        """Replace the current journey (None clears it)."""
        ...

    def add_journey_to_history(self, journey: Journey) -> None:
        """Append a journey to the history."""
        ...

    def clear_journey_history(self) -> None:
        """Forget all journeys in the history."""
        ...
