"""Journey progress domain model."""

from dataclasses import dataclass
from typing import Literal

StopStatus = Literal["completed", "current", "upcoming"]


@dataclass(frozen=True)
class JourneyProgress:
    """Snapshot of a journey's live state at one instant."""

    progress_percent: float
    stop_statuses: tuple[StopStatus, ...]
    current_stop_index: int
