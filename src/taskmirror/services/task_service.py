"""Task service - Business logic for task operations.

This service layer sits between commands and the TasksRepository, providing
validation and filtering on top of the repository's caching behaviour.
"""

from __future__ import annotations

from taskmirror.models import (
    EmptyTaskError,
    LoadStatus,
    Task,
    TaskFilter,
    TaskNotFoundError,
)
from taskmirror.repositories import TasksRepository


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the tasks repository.
    """

    def __init__(self, repository: TasksRepository):
        """Initialize the task service.

        Args:
            repository: TasksRepository used for all data access
        """
        self.repository = repository

    async def list_tasks(
        self, status: TaskFilter | str = TaskFilter.ALL
    ) -> list[Task] | None:
        """List tasks matching a status filter.

        Args:
            status: "all", "active" or "completed"

        Returns:
            Matching tasks (possibly an empty list), or None when no data
            could be loaded at all
        """
        status = TaskFilter(status)
        result = await self.repository.load_tasks()
        if result.status is LoadStatus.UNAVAILABLE:
            return None
        tasks = result.tasks
        if status is TaskFilter.ACTIVE:
            return [task for task in tasks if task.is_active]
        if status is TaskFilter.COMPLETED:
            return [task for task in tasks if task.is_completed]
        return tasks

    async def get_task(self, task_id: str) -> Task:
        """Get a specific task by ID.

        Raises:
            TaskNotFoundError: If no source holds the task
        """
        task = await self.repository.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def add_task(self, title: str, description: str = "") -> Task:
        """Create and save a new task.

        Raises:
            EmptyTaskError: If both title and description are blank
        """
        task = Task(title=title, description=description)
        if task.is_empty:
            raise EmptyTaskError()
        await self.repository.save_task(task)
        return task

    async def update_task(
        self,
        task_id: str,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> Task:
        """Update the title and/or description of an existing task.

        The task keeps its identifier and completion state.

        Raises:
            TaskNotFoundError: If no source holds the task
            EmptyTaskError: If the update would leave the task blank
        """
        current = await self.get_task(task_id)
        updates = {}
        if title is not None:
            updates["title"] = title
        if description is not None:
            updates["description"] = description

        task = current.model_copy(update=updates)
        if task.is_empty:
            raise EmptyTaskError()
        await self.repository.save_task(task)
        return task

    async def complete_task(self, task_id: str) -> Task:
        task = await self.get_task(task_id)
        await self.repository.complete_task(task)
        return task.as_completed()

    async def activate_task(self, task_id: str) -> Task:
        task = await self.get_task(task_id)
        await self.repository.activate_task(task)
        return task.as_active()

    async def delete_task(self, task_id: str) -> None:
        await self.repository.delete_task(task_id)

    async def delete_all_tasks(self) -> None:
        await self.repository.delete_all_tasks()

    async def clear_completed_tasks(self) -> None:
        await self.repository.clear_completed_tasks()

    def refresh(self) -> None:
        self.repository.refresh_tasks()
