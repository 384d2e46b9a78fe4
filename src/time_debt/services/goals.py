"""Goal calculation: reconcile logged time against project goal schedules."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from time_debt.domain.debt import Goal, GoalReport
from time_debt.domain.projects import Project, ProjectId, TimeEntry
from time_debt.services.ledger import DebtLedger

_logger = logging.getLogger(__name__)


class ProjectRepository(Protocol):
    """Source of configured projects."""

    def list_projects(self) -> dict[ProjectId, Project]:
        """Return the user's projects keyed by project id."""


class TimeEntryRepository(Protocol):
    """Source of logged time entries."""

    def list_entries(self, since: date) -> list[TimeEntry]:
        """Return entries logged on or after ``since``."""


def reconcile(
    entries: Iterable[TimeEntry],
    projects: dict[ProjectId, Project],
    daily_max: timedelta,
    today: date,
) -> tuple[DebtLedger, timedelta]:
    """Simulate every day from the earliest start through ``today``.

    Entries are applied in date order; entries sharing a date keep their
    relative order.
    """
    ledger = DebtLedger.open(projects)

    for entry in sorted(entries, key=lambda item: item.date):
        ledger.catch_up(entry.date, daily_max)
        if ledger.cursor != entry.date:
            _logger.warning(
                "Ledger cursor %s does not match entry date %s",
                ledger.cursor,
                entry.date,
            )
        if not ledger.credit(entry):
            _logger.debug(
                "Skipped entry for project %s on %s", entry.project_id, entry.date
            )

    ledger.catch_up(today, daily_max)
    return ledger, ledger.total_debt


def extract_goals(ledger: DebtLedger) -> list[Goal]:
    """Return per-project debts as goals sorted by project name."""
    goals = [
        Goal(name=item.project.name, time=item.debt) for item in ledger.debts.values()
    ]
    return sorted(goals, key=lambda goal: goal.name)


def calculate_goals(
    projects: dict[ProjectId, Project],
    entries: Iterable[TimeEntry],
    daily_max: timedelta,
    today: date,
) -> GoalReport | None:
    """Return the goal report, or None when no projects are configured."""
    if not projects:
        return None
    ledger, total_debt = reconcile(entries, projects, daily_max, today)
    return GoalReport(goals=extract_goals(ledger), total_debt=total_debt)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class GoalService:
    """Application service that loads inputs and runs the goal calculation."""

    project_repository: ProjectRepository
    entry_repository: TimeEntryRepository
    clock: Callable[[], datetime] = _utc_now

    def today(self, timezone_name: str) -> date:
        """Return the current date in the given timezone."""
        return self.clock().astimezone(ZoneInfo(timezone_name)).date()

    def calculate(
        self,
        daily_max: timedelta,
        timezone_name: str,
        today: date | None = None,
    ) -> GoalReport | None:
        """Calculate goals as of ``today`` or the current date in the timezone."""
        projects = self.project_repository.list_projects()
        if not projects:
            _logger.info("No projects configured; skipping goal calculation")
            return None

        since = min(project.starting_date for project in projects.values())
        entries = self.entry_repository.list_entries(since)
        as_of = today or self.today(timezone_name)
        _logger.info(
            "Calculating goals: projects=%s entries=%s since=%s today=%s",
            len(projects),
            len(entries),
            since,
            as_of,
        )
        return calculate_goals(projects, entries, daily_max, as_of)
