"""In-memory journey session state."""

import logging

from journey_planner.domain.contracts.journey_store import JourneyStore
from journey_planner.domain.models.journey import Journey

logger = logging.getLogger(__name__)


class JourneySession(JourneyStore):
    """Holds the current journey and history for one application session.

    Created by the application shell and passed to whatever needs it.
    """

    def __init__(self, history_limit: int = 0) -> None:
        """Initialize an empty session.

        Args:
            history_limit: Maximum journeys kept in history, oldest dropped first.
                0 keeps all of them.
        """
        self._current_journey: Journey | None = None
        self._history: list[Journey] = []
        self._history_limit = history_limit
        self.is_loading_route = False

    @property
    def current_journey(self) -> Journey | None:
        """The journey currently being followed, if any."""
        return self._current_journey

    @property
    def journey_history(self) -> tuple[Journey, ...]:
        """Journeys planned in this session, oldest first."""
        return tuple(self._history)

    def set_current_journey(self, journey: Journey | None) -> None:
        """Replace the current journey (None clears it)."""
        self._current_journey = journey
        if journey is None:
            logger.debug("Cleared current journey")

    def add_journey_to_history(self, journey: Journey) -> None:
        """Append a journey, dropping the oldest ones beyond the history limit."""
        self._history.append(journey)
        if self._history_limit and len(self._history) > self._history_limit:
            del self._history[: len(self._history) - self._history_limit]

    def clear_journey_history(self) -> None:
        """Forget all journeys in the history."""
        self._history.clear()
