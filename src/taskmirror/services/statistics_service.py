"""Statistics service - active/completed counts over the task list."""

from __future__ import annotations

from taskmirror.models import LoadStatus, TaskStatistics
from taskmirror.repositories import TasksRepository


class StatisticsService:
    """Computes task statistics from the repository."""

    def __init__(self, repository: TasksRepository):
        self.repository = repository

    async def load_statistics(self) -> TaskStatistics:
        """Count active and completed tasks.

        When the task list cannot be loaded the result has ``error`` and
        ``empty`` both set, so callers can show "data unavailable" instead of
        "no tasks".
        """
        result = await self.repository.load_tasks()
        if result.status is LoadStatus.UNAVAILABLE:
            return TaskStatistics(error=True)

        completed = sum(1 for task in result.tasks if task.is_completed)
        return TaskStatistics(
            active=len(result.tasks) - completed,
            completed=completed,
            empty=not result.tasks,
        )
