"""Domain models for accumulated time debt."""

from dataclasses import dataclass
from datetime import timedelta

from time_debt.domain.projects import Project


@dataclass
class ProjectDebt:
    """Running debt for a single project."""

    project: Project
    debt: timedelta = timedelta(0)


@dataclass(frozen=True)
class Goal:
    """Outstanding time for a named project."""

    name: str
    time: timedelta


@dataclass(frozen=True)
class GoalReport:
    """Per-project goals and the capped total debt."""

    goals: list[Goal]
    total_debt: timedelta
