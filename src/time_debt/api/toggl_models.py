"""Pydantic models for Toggl report and project payloads."""

from datetime import timedelta

from pydantic import AwareDatetime, BaseModel

from time_debt.domain.projects import TimeEntry


class TogglReportEntry(BaseModel):
    """A detailed report row; ``dur`` is in milliseconds."""

    pid: int
    start: AwareDatetime
    dur: int

    def to_time_entry(self) -> TimeEntry:
        """Convert to a time entry dated in the row's own UTC offset."""
        return TimeEntry(
            project_id=self.pid,
            date=self.start.date(),
            duration=timedelta(milliseconds=self.dur),
        )


class TogglReportPage(BaseModel):
    """One page of the detailed report."""

    total_count: int
    per_page: int
    data: list[TogglReportEntry]

    def time_entries(self) -> list[TimeEntry]:
        """Return the page's rows as time entries."""
        return [row.to_time_entry() for row in self.data]


class TogglProject(BaseModel):
    """Workspace project payload."""

    id: int
    name: str
    active: bool = True
