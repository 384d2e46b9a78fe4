"""Day-by-day debt ledger."""

from dataclasses import dataclass
from datetime import date, timedelta

from time_debt.domain.debt import ProjectDebt
from time_debt.domain.projects import Project, ProjectId, TimeEntry

_ONE_DAY = timedelta(days=1)


@dataclass
class DebtLedger:
    """Per-project debts, the simulation cursor and the running total.

    The cursor is the last day already priced into the ledger. It only moves
    forward, one day per call to ``advance``.
    """

    debts: dict[ProjectId, ProjectDebt]
    cursor: date
    total_debt: timedelta = timedelta(0)

    @classmethod
    def open(cls, projects: dict[ProjectId, Project]) -> "DebtLedger":
        """Create a zeroed ledger positioned the day before the earliest start."""
        earliest = min(project.starting_date for project in projects.values())
        return cls(
            debts={
                project_id: ProjectDebt(project=project)
                for project_id, project in projects.items()
            },
            cursor=earliest - _ONE_DAY,
        )

    def advance(self, daily_max: timedelta) -> timedelta:
        """Price in the next calendar day and return the new total debt."""
        self.cursor += _ONE_DAY
        for project_debt in self.debts.values():
            if project_debt.project.accrues_on(self.cursor):
                project_debt.debt += project_debt.project.daily_goal

        total = sum((item.debt for item in self.debts.values()), timedelta(0))
        total = min(total, daily_max)
        if self.total_debt < timedelta(0):
            total += self.total_debt
        self.total_debt = total
        return total

    def catch_up(self, target: date, daily_max: timedelta) -> None:
        """Advance one day at a time until the cursor reaches ``target``."""
        while self.cursor < target:
            self.advance(daily_max)

    def credit(self, entry: TimeEntry) -> bool:
        """Apply logged time to its project and the total.

        Only the part of the entry that pays down existing positive debt
        reduces the total. Returns False when the entry was not applied.
        """
        project_debt = self.debts.get(entry.project_id)
        if project_debt is None or entry.date < project_debt.project.starting_date:
            return False

        outstanding = project_debt.debt
        project_debt.debt -= entry.duration
        self.total_debt -= max(min(outstanding, entry.duration), timedelta(0))
        return True
