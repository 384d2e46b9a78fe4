"""JSON snapshot repository for projects and logged time."""

from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path

from pydantic import BaseModel, Field, NonNegativeInt

from time_debt.api.toggl_models import TogglProject, TogglReportEntry
from time_debt.domain.projects import (
    DayOff,
    Project,
    ProjectConfig,
    ProjectId,
    TimeEntry,
    Weekdays,
)
from time_debt.services.goals import ProjectRepository, TimeEntryRepository
from time_debt.services.projects import assemble_projects


class WeekdaysPayload(BaseModel):
    """Enabled weekdays; omitted days default to enabled."""

    monday: bool = True
    tuesday: bool = True
    wednesday: bool = True
    thursday: bool = True
    friday: bool = True
    saturday: bool = True
    sunday: bool = True


class ProjectSettingsPayload(BaseModel):
    """Stored project settings; ``daily_goal`` is in seconds."""

    project_id: int
    starting_date: date
    daily_goal: NonNegativeInt
    weekdays: WeekdaysPayload = Field(default_factory=WeekdaysPayload)


class DayOffPayload(BaseModel):
    """A day off shared by one or more projects."""

    day: date
    project_ids: list[int]


class SnapshotPayload(BaseModel):
    """Everything needed to calculate goals for one user."""

    toggl_projects: list[TogglProject] = Field(default_factory=list)
    projects: list[ProjectSettingsPayload] = Field(default_factory=list)
    days_off: list[DayOffPayload] = Field(default_factory=list)
    entries: list[TogglReportEntry] = Field(default_factory=list)


@dataclass
class JsonSnapshotRepository(ProjectRepository, TimeEntryRepository):
    """Serve projects and entries from a parsed snapshot."""

    payload: SnapshotPayload

    @classmethod
    def from_path(cls, path: Path) -> "JsonSnapshotRepository":
        """Load and validate a snapshot file."""
        return cls(SnapshotPayload.model_validate_json(path.read_text()))

    def list_projects(self) -> dict[ProjectId, Project]:
        """Return configured projects that still exist upstream."""
        return assemble_projects(
            self.payload.toggl_projects,
            [_parse_settings(row) for row in self.payload.projects],
            [
                DayOff(day=row.day, project_ids=frozenset(row.project_ids))
                for row in self.payload.days_off
            ],
        )

    def list_entries(self, since: date) -> list[TimeEntry]:
        """Return entries dated on or after ``since``."""
        entries = [row.to_time_entry() for row in self.payload.entries]
        return [entry for entry in entries if entry.date >= since]


def _parse_settings(row: ProjectSettingsPayload) -> ProjectConfig:
    return ProjectConfig(
        project_id=row.project_id,
        starting_date=row.starting_date,
        daily_goal=timedelta(seconds=row.daily_goal),
        weekdays=Weekdays(**row.weekdays.model_dump()),
    )
