"""Domain models for tracked projects and logged time."""

from dataclasses import dataclass, field
from datetime import date, timedelta

ProjectId = int


@dataclass(frozen=True)
class Weekdays:
    """Which days of the week a project accrues goal time on."""

    monday: bool = True
    tuesday: bool = True
    wednesday: bool = True
    thursday: bool = True
    friday: bool = True
    saturday: bool = True
    sunday: bool = True

    def is_enabled(self, day: date) -> bool:
        """Return True when the weekday of ``day`` is enabled."""
        return (
            self.monday,
            self.tuesday,
            self.wednesday,
            self.thursday,
            self.friday,
            self.saturday,
            self.sunday,
        )[day.weekday()]


@dataclass(frozen=True)
class Project:
    """A project with a daily time goal."""

    name: str
    starting_date: date
    daily_goal: timedelta
    weekdays: Weekdays = field(default_factory=Weekdays)
    days_off: frozenset[date] = frozenset()

    def __post_init__(self) -> None:
        if self.daily_goal < timedelta(0):
            raise ValueError(f"Daily goal for {self.name!r} must not be negative")
        if self.starting_date == date.min:
            raise ValueError(
                f"Starting date for {self.name!r} must be after {date.min}"
            )

    def accrues_on(self, day: date) -> bool:
        """Return True when ``day`` counts toward this project's debt."""
        return (
            day >= self.starting_date
            and day not in self.days_off
            and self.weekdays.is_enabled(day)
        )


@dataclass(frozen=True)
class ProjectConfig:
    """Stored goal settings for an upstream project."""

    project_id: ProjectId
    starting_date: date
    daily_goal: timedelta
    weekdays: Weekdays = field(default_factory=Weekdays)


@dataclass(frozen=True)
class DayOff:
    """A date on which the listed projects accrue nothing."""

    day: date
    project_ids: frozenset[ProjectId]


@dataclass(frozen=True)
class TimeEntry:
    """A block of logged time against a project on a calendar date."""

    project_id: ProjectId
    date: date
    duration: timedelta
