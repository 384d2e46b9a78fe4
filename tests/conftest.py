"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

import pytest

from time_debt.config import Settings
from time_debt.domain.projects import Project, ProjectId, TimeEntry, Weekdays
from time_debt.services.goals import (
    GoalService,
    ProjectRepository,
    TimeEntryRepository,
)


def make_project(  # noqa: PLR0913
    name: str = "Example Project",
    starting_date: date = date(2000, 1, 1),
    daily_goal: timedelta = timedelta(hours=1),
    weekdays: Weekdays | None = None,
    days_off: set[date] | None = None,
) -> Project:
    """Build a project that accrues every day unless told otherwise."""
    return Project(
        name=name,
        starting_date=starting_date,
        daily_goal=daily_goal,
        weekdays=weekdays or Weekdays(),
        days_off=frozenset(days_off or ()),
    )


@dataclass
class InMemoryProjectRepository(ProjectRepository):
    """In-memory project repository for tests."""

    projects: dict[ProjectId, Project] = field(default_factory=dict)

    def list_projects(self) -> dict[ProjectId, Project]:
        return dict(self.projects)


@dataclass
class InMemoryTimeEntryRepository(TimeEntryRepository):
    """In-memory time entry repository that records requested ranges."""

    entries: list[TimeEntry] = field(default_factory=list)
    requested_since: list[date] = field(default_factory=list)

    def list_entries(self, since: date) -> list[TimeEntry]:
        self.requested_since.append(since)
        return [entry for entry in self.entries if entry.date >= since]


@dataclass
class FixedClock:
    """Clock that always returns the same instant."""

    now: datetime

    def __call__(self) -> datetime:
        return self.now


SNAPSHOT = {
    "toggl_projects": [
        {"id": 1234, "name": "Example Project", "active": True},
        {"id": 5678, "name": "Archive", "active": False},
    ],
    "projects": [
        {"project_id": 1234, "starting_date": "2000-01-01", "daily_goal": 3600},
        {"project_id": 9999, "starting_date": "2000-01-01", "daily_goal": 3600},
    ],
    "days_off": [],
    "entries": [
        {"pid": 1234, "start": "2000-01-09T10:00:00+00:00", "dur": 14400000},
    ],
}


@pytest.fixture
def settings() -> Settings:
    return Settings(daily_max=timedelta(hours=3), timezone="UTC")


@pytest.fixture
def project_repository() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def entry_repository() -> InMemoryTimeEntryRepository:
    return InMemoryTimeEntryRepository()


@pytest.fixture
def goal_service(
    project_repository: InMemoryProjectRepository,
    entry_repository: InMemoryTimeEntryRepository,
) -> GoalService:
    return GoalService(
        project_repository=project_repository,
        entry_repository=entry_repository,
        clock=FixedClock(datetime(2000, 1, 10, 12, 0, tzinfo=UTC)),
    )


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT))
    return path
