"""Pydantic models for the status report."""

from datetime import timedelta

from pydantic import BaseModel

from time_debt.domain.debt import Goal, GoalReport


class StatusGoal(BaseModel):
    """Outstanding time for one project, in seconds."""

    name: str
    time: int

    @classmethod
    def from_goal(cls, goal: Goal) -> "StatusGoal":
        return cls(name=goal.name, time=_seconds(goal.time))


class StatusResponse(BaseModel):
    """Total debt, daily cap and per-project goals, in seconds."""

    total_debt: int
    daily_max: int
    goals: list[StatusGoal]

    @classmethod
    def from_report(
        cls, report: GoalReport | None, daily_max: timedelta
    ) -> "StatusResponse":
        """Build a response; a missing report yields an all-zero status."""
        if report is None:
            return cls(total_debt=0, daily_max=0, goals=[])
        return cls(
            total_debt=_seconds(report.total_debt),
            daily_max=_seconds(daily_max),
            goals=[StatusGoal.from_goal(goal) for goal in report.goals],
        )


def _seconds(duration: timedelta) -> int:
    return int(duration.total_seconds())
