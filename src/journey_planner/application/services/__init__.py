"""Application services."""

from journey_planner.application.services.journey_assembler import (
    assemble_journey,
    select_representative_vehicle,
)
from journey_planner.application.services.journey_planning_service import (
    JourneyPlanningService,
)
from journey_planner.application.services.journey_tracking_service import (
    locate_current_stop,
    track_journey,
)
from journey_planner.application.services.progress_calculator import calculate_progress
from journey_planner.application.services.segment_grouper import group_segments
from journey_planner.application.services.stop_status_classifier import classify_stop
from journey_planner.application.services.time_formatter import format_time, parse_clock_time

__all__ = [
    "JourneyPlanningService",
    "assemble_journey",
    "calculate_progress",
    "classify_stop",
    "format_time",
    "group_segments",
    "locate_current_stop",
    "parse_clock_time",
    "select_representative_vehicle",
    "track_journey",
]
