"""Command-line entry point."""

import argparse
import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from time_debt.api.status_models import StatusResponse
from time_debt.app_logging import configure_logging
from time_debt.config import Settings, parse_timezone
from time_debt.containers import build_container
from time_debt.domain.debt import GoalReport
from time_debt.services.durations import format_duration, parse_duration


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="time-debt", description="Time Debt: goal time owed per project"
    )
    parser.add_argument("snapshot", type=Path, nargs="?", help="Snapshot JSON file")
    parser.add_argument("--today", type=date.fromisoformat, help="As-of date")
    parser.add_argument("--daily-max", type=parse_duration, help="H:MM[:SS]")
    parser.add_argument("--timezone", type=parse_timezone, help="IANA timezone name")
    parser.add_argument("--json", action="store_true", help="Print status JSON")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def render_report(report: GoalReport | None) -> str:
    """Render a goal report as a plain-text table."""
    if report is None:
        return "Time Debt\nNo projects configured."
    width = max((len(goal.name) for goal in report.goals), default=0)
    lines = ["Time Debt", f"Total debt: {format_duration(report.total_debt)}"]
    lines.extend(
        f"  {goal.name.ljust(width)}  {format_duration(goal.time)}"
        for goal in report.goals
    )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    """Calculate and print goals for a snapshot."""
    args = _build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    container = build_container(Settings(), args.snapshot)
    settings = container.settings
    daily_max = args.daily_max if args.daily_max is not None else settings.daily_max
    timezone_name = args.timezone or settings.timezone

    report = container.goal_service.calculate(
        daily_max, timezone_name, today=args.today
    )
    if args.json:
        print(StatusResponse.from_report(report, daily_max).model_dump_json())
    else:
        print(render_report(report))


if __name__ == "__main__":
    main()
