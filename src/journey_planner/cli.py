"""Command-line interface for planning and following journeys."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from datetime import UTC, datetime, tzinfo
from typing import Any

import aiohttp

from journey_planner.adapters.backend_api import (
    BackendRecurringRouteRepository,
    BackendRouteRepository,
)
from journey_planner.adapters.config import AppConfig
from journey_planner.adapters.session import JourneySession
from journey_planner.application.services import JourneyPlanningService, track_journey
from journey_planner.domain.errors import RoutePlanningError, RouteTimeoutError
from journey_planner.domain.models import (
    Journey,
    JourneyProgress,
    RecurringRoute,
    RecurringRouteDetail,
)

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    "on-time": "On time",
    "delayed": "Delayed",
    "cancelled": "Cancelled",
}

STOP_STATUS_MARKERS = {
    "completed": "✓",
    "current": "●",
    "upcoming": "○",
}


def _parse_departure(value: str) -> datetime:
    """Parse an ISO 8601 departure time."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid departure time: '{value}'. Use ISO 8601, e.g. 2024-01-15T14:30."
        ) from None


def _setup_argparse() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="journey-planner",
        description="Plan public-transit journeys and follow them live",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  journey-planner plan 52.2297 21.0122 52.2319 21.0067
  journey-planner plan 52.2297 21.0122 52.2319 21.0067 --departure 2024-01-15T14:30
  journey-planner recurring list --all
  journey-planner recurring calculate 3f2a --now --json
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    plan_parser = subparsers.add_parser("plan", help="Plan a journey between two coordinates")
    plan_parser.add_argument("start_lat", type=float, help="Origin latitude")
    plan_parser.add_argument("start_lon", type=float, help="Origin longitude")
    plan_parser.add_argument("end_lat", type=float, help="Destination latitude")
    plan_parser.add_argument("end_lon", type=float, help="Destination longitude")
    plan_parser.add_argument(
        "--departure", type=_parse_departure, help="Departure time (ISO 8601, default now)"
    )
    plan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    recurring_parser = subparsers.add_parser("recurring", help="Work with recurring routes")
    recurring_subparsers = recurring_parser.add_subparsers(
        dest="recurring_command", help="Recurring route command"
    )

    list_parser = recurring_subparsers.add_parser("list", help="List recurring routes")
    list_parser.add_argument("--all", action="store_true", help="Include inactive routes")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    show_parser = recurring_subparsers.add_parser("show", help="Show recurring route details")
    show_parser.add_argument("route_id", help="Recurring route ID")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    calculate_parser = recurring_subparsers.add_parser(
        "calculate", help="Plan the journey for a recurring route"
    )
    calculate_parser.add_argument("route_id", help="Recurring route ID")
    calculate_parser.add_argument(
        "--now", action="store_true", help="Depart now instead of at the saved time"
    )
    calculate_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def format_journey(journey: Journey, progress: JourneyProgress) -> str:
    """Render a journey and its live progress as text."""
    status = STATUS_LABELS.get(journey.status, journey.status)
    if journey.status == "delayed" and journey.delay_minutes is not None:
        status = f"{status} {journey.delay_minutes:g} min"

    lines = [
        f"{journey.route_number} → {journey.destination}",
        f"  {journey.departure} - {journey.arrival}  [{status}]",
        f"  Current stop: {journey.current_stop or '-'}",
        f"  Next stop:    {journey.next_stop or '-'}",
        f"  Progress:     {progress.progress_percent:.0f}%",
        "",
        "Legs:",
    ]
    for leg in journey.segments:
        if leg.type == "walking":
            distance = (
                f", {leg.walking_distance_meters:.0f} m"
                if leg.walking_distance_meters is not None
                else ""
            )
            label = f"Walk ({leg.duration_minutes:g} min{distance})"
        elif leg.vehicle_info is not None:
            vehicle = leg.vehicle_info
            line = f"{vehicle.type or 'Line'} {vehicle.line_number}"
            if vehicle.destination:
                line = f"{line} → {vehicle.destination}"
            label = f"{line} ({leg.duration_minutes:g} min)"
        else:
            label = f"Transit ({leg.duration_minutes:g} min)"
        lines.append(
            f"  {leg.departure_time} {leg.from_stop.name} → "
            f"{leg.arrival_time} {leg.to_stop.name}: {label}"
        )

    if journey.stops:
        lines.extend(["", "Stops:"])
        for index, (stop, stop_status) in enumerate(zip(journey.stops, progress.stop_statuses)):
            pointer = " <" if index == progress.current_stop_index else ""
            lines.append(
                f"  {STOP_STATUS_MARKERS[stop_status]} {stop.scheduled_time or '--:--'} "
                f"{stop.name}{pointer}"
            )
    return "\n".join(lines)


def journey_to_dict(journey: Journey, progress: JourneyProgress) -> dict[str, Any]:
    """Serializable form of a journey with its live progress."""
    return {"journey": asdict(journey), "progress": asdict(progress)}


def format_recurring_routes(routes: list[RecurringRoute]) -> str:
    """Render a recurring route listing as text."""
    if not routes:
        return "No recurring routes found."
    lines = []
    for route in routes:
        inactive = "" if route.is_active else " (inactive)"
        lines.append(
            f"{route.id}: {route.name}{inactive}\n"
            f"  {route.from_location_name} → {route.to_location_name}, "
            f"{route.departure_time} {route.frequency}, ~{route.average_duration_minutes:g} min"
        )
    return "\n".join(lines)


def format_recurring_route_detail(route: RecurringRouteDetail) -> str:
    """Render recurring route details as text."""
    stats = route.statistics
    lines = [
        f"{route.name} ({route.id})",
        f"  {route.from_location_name} → {route.to_location_name}",
        f"  Departs {route.departure_time} ({route.frequency})",
        f"  Average duration: {route.average_duration_minutes:g} min, "
        f"walking {route.average_walking_time_minutes:g} min "
        f"({route.average_walking_distance_meters:.0f} m), "
        f"{route.typical_transfers} transfer(s)",
        f"  Trips: {stats.total_trips}, on time {stats.on_time_percentage:.0f}%, "
        f"average delay {stats.average_delay_minutes:g} min",
    ]
    if route.description:
        lines.insert(1, f"  {route.description}")
    if stats.most_common_delay_reason:
        lines.append(f"  Most common delay: {stats.most_common_delay_reason}")
    if route.best_departure_time:
        lines.append(f"  Best departure: {route.best_departure_time}")
    if route.alternative_times:
        lines.append(f"  Alternatives: {', '.join(route.alternative_times)}")
    for tip in route.tips:
        lines.append(f"  Tip: {tip}")
    return "\n".join(lines)


def _print_journey(
    journey: Journey, as_json: bool, tz: tzinfo | None = None, now: datetime | None = None
) -> None:
    """Print a journey with its progress at now (default: the current instant).

    The clock is read in tz, the zone the journey's HH:MM times were formatted in.
    None means the local timezone.
    """
    progress = track_journey(journey, (now or datetime.now(UTC)).astimezone(tz))
    if as_json:
        print(json.dumps(journey_to_dict(journey, progress), indent=2, ensure_ascii=False))
    else:
        print(format_journey(journey, progress))


async def _run_recurring_command(
    args: argparse.Namespace, service: JourneyPlanningService, tz: tzinfo | None
) -> int:
    """Execute a recurring route subcommand."""
    if args.recurring_command == "list":
        routes = await service.list_recurring_routes(active_only=not args.all)
        if args.json:
            print(json.dumps([r.model_dump() for r in routes], indent=2, ensure_ascii=False))
        else:
            print(format_recurring_routes(routes))
        return 0

    if args.recurring_command == "show":
        detail = await service.get_recurring_route(args.route_id)
        if detail is None:
            print(f"Recurring route '{args.route_id}' not found.", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps(detail.model_dump(), indent=2, ensure_ascii=False))
        else:
            print(format_recurring_route_detail(detail))
        return 0

    journey = await service.plan_recurring_journey(args.route_id, use_now=args.now)
    _print_journey(journey, args.json, tz)
    return 0


async def _run_command(
    args: argparse.Namespace, service: JourneyPlanningService, tz: tzinfo | None
) -> int:
    """Execute the parsed command."""
    if args.command == "plan":
        departure = args.departure
        if departure is not None and departure.tzinfo is None:
            departure = departure.replace(tzinfo=tz)
        journey = await service.plan_journey(
            args.start_lat, args.start_lon, args.end_lat, args.end_lon, departure
        )
        _print_journey(journey, args.json, tz)
        return 0
    return await _run_recurring_command(args, service, tz)


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)
    if not args.command or (args.command == "recurring" and not args.recurring_command):
        parser.print_help()
        return 1

    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    tz = config.get_tzinfo()
    session_state = JourneySession(history_limit=config.history_limit)
    async with aiohttp.ClientSession() as http_session:
        service = JourneyPlanningService(
            BackendRouteRepository(http_session, config),
            BackendRecurringRouteRepository(http_session, config),
            session_state,
            tz=tz,
        )
        try:
            return await _run_command(args, service, tz)
        except RoutePlanningError as e:
            print(f"Error: {e.user_message}", file=sys.stderr)
            if e.details.retryable and not isinstance(e, RouteTimeoutError):
                print(
                    "The routing backend may be temporarily unavailable. Please try again.",
                    file=sys.stderr,
                )
            return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
