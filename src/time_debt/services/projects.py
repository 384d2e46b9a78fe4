"""Assemble tracked projects from the upstream listing and stored settings."""

import logging
from collections.abc import Iterable

from time_debt.api.toggl_models import TogglProject
from time_debt.domain.projects import DayOff, Project, ProjectConfig, ProjectId

_logger = logging.getLogger(__name__)


def assemble_projects(
    toggl_projects: Iterable[TogglProject],
    configs: Iterable[ProjectConfig],
    days_off: Iterable[DayOff] = (),
) -> dict[ProjectId, Project]:
    """Join stored project settings with upstream names and days off.

    Settings for projects missing from the upstream listing are dropped.
    """
    names = {project.id: project.name for project in toggl_projects}
    days_off = list(days_off)

    projects: dict[ProjectId, Project] = {}
    for config in configs:
        name = names.get(config.project_id)
        if name is None:
            _logger.info(
                "Project %s has no upstream counterpart; ignoring", config.project_id
            )
            continue
        projects[config.project_id] = Project(
            name=name,
            starting_date=config.starting_date,
            daily_goal=config.daily_goal,
            weekdays=config.weekdays,
            days_off=frozenset(
                day_off.day
                for day_off in days_off
                if config.project_id in day_off.project_ids
            ),
        )
    return projects
