"""Command-line entrypoint for the workout log."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import timezone, tzinfo

from workout_log.core.logging_setup import configure_logging
from workout_log.core.settings import AppSettings, SettingsError, load_settings, resolve_timezone
from workout_log.entity.client import EntityClient, HttpEntityClient
from workout_log.entity.memory import DEMO_WORKOUTS, InMemoryEntityClient
from workout_log.ui.controller import WorkoutTrackerController
from workout_log.ui.events import ConfirmRequest, Toast, UIEvent
from workout_log.workout.listing import PAGE_SIZE_OPTIONS


def _timezone_arg(value: str) -> tzinfo:
    try:
        return resolve_timezone(value)
    except SettingsError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser(settings: AppSettings | None = None) -> argparse.ArgumentParser:
    defaults = settings or AppSettings()
    parser = argparse.ArgumentParser(
        description="Personal workout log",
        epilog=(
            "Workout dates are calendar days in --timezone. Records saved as local "
            "midnight by a browser in another zone need that zone here, otherwise "
            "they can show one day early or late."
        ),
    )
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) with the workout table and editor",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the workout history to the terminal",
    )
    parser.add_argument(
        "--api-url",
        default=defaults.api_url,
        help="Base URL of the workout entity backend",
    )
    parser.add_argument(
        "--collection",
        default=defaults.collection,
        help="Name of the workout collection on the backend",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use an in-memory collection seeded with sample workouts (no backend required)",
    )
    parser.add_argument(
        "--web-host",
        default=defaults.web_host,
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=defaults.web_port,
        help="Port for --ui-web",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        choices=PAGE_SIZE_OPTIONS,
        default=defaults.page_size if defaults.page_size in PAGE_SIZE_OPTIONS else 10,
        help="Rows per table page",
    )
    parser.add_argument(
        "--timezone",
        type=_timezone_arg,
        default=defaults.timezone_name,
        help="IANA zone whose calendar days workout dates use (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity",
    )
    return parser


def build_client(args: argparse.Namespace) -> EntityClient:
    if args.demo:
        client = InMemoryEntityClient()
        client.seed(DEMO_WORKOUTS)
        return client
    return HttpEntityClient(args.api_url, collection=args.collection)


def _print_event(event: UIEvent) -> None:
    if isinstance(event, Toast):
        stream = sys.stderr if event.level == "error" else sys.stdout
        print(event.message, file=stream)
    elif isinstance(event, ConfirmRequest):
        print(f"{event.title}: confirmation required", file=sys.stderr)


async def run_list(
    client: EntityClient,
    page_size: int,
    tz: tzinfo = timezone.utc,
) -> int:
    controller = WorkoutTrackerController(client, _print_event, page_size=page_size, tz=tz)
    if not await controller.mount():
        return 1

    rows = controller.list_view.rows
    if not rows:
        print("No workouts logged yet")
        return 0

    for row in rows:
        tags = ", ".join(row.tags)
        if row.more_label:
            tags = f"{tags} {row.more_label}"
        print(f"{row.date_label:<13} {row.name:<24} {row.duration_label:>8}  {tags}")
    print(controller.list_view.total_label)
    return 0


def main() -> int:
    parser = build_parser(load_settings())
    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.ui_web:
        from workout_log.ui.web_app import run_web_ui

        return run_web_ui(
            build_client(args),
            host=args.web_host,
            port=args.web_port,
            page_size=args.page_size,
            demo=args.demo,
            tz=args.timezone,
        )

    if args.list:
        return asyncio.run(run_list(build_client(args), args.page_size, args.timezone))

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
