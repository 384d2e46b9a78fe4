"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from time_debt.adapters.snapshot_repository import JsonSnapshotRepository
from time_debt.config import Settings
from time_debt.services.goals import GoalService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    snapshot_repository: JsonSnapshotRepository
    goal_service: GoalService


def build_container(
    settings: Settings | None = None, snapshot_path: Path | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_path = snapshot_path or resolved_settings.snapshot_path
    if resolved_path is None:
        raise ValueError("A snapshot path is required")

    snapshot_repository = JsonSnapshotRepository.from_path(resolved_path)
    goal_service = GoalService(
        project_repository=snapshot_repository,
        entry_repository=snapshot_repository,
    )
    return AppContainer(
        settings=resolved_settings,
        snapshot_repository=snapshot_repository,
        goal_service=goal_service,
    )
