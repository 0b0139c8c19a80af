"""Data source abstraction for taskmirror.

This module defines the abstract base class every task store implements,
following the hexagonal architecture (Ports & Adapters) pattern. The local
SQLite store and the simulated remote service both sit behind this one
interface, so TasksRepository never branches on which store it is talking to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskmirror.models import Task


class TaskDataSource(ABC):
    """Abstract base class for task stores.

    Reads signal "no data" by returning None. That covers an empty store, an
    unreachable store and a missing task alike. Writes return nothing; a
    store that fails to write has no way to tell the caller.
    """

    @abstractmethod
    async def list_all(self) -> list[Task] | None:
        """Return every stored task.

        Returns:
            List of tasks, or None when the store has no data

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, task_id: str) -> Task | None:
        """Return a single task.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Task object, or None if the store does not hold it

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("TaskDataSource.get() must be implemented by adapter")

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Insert or replace a task by identifier.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.save() must be implemented by adapter"
        )

    @abstractmethod
    async def complete(self, task: Task) -> None:
        """Mark a task as completed.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.complete() must be implemented by adapter"
        )

    async def complete_by_id(self, task_id: str) -> None:
        """Mark a task as completed given only its identifier.

        Stores cannot resolve an identifier without the repository's cache,
        so this is a no-op. TasksRepository resolves the task and calls
        complete() instead.
        """

    @abstractmethod
    async def activate(self, task: Task) -> None:
        """Mark a task as active again.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.activate() must be implemented by adapter"
        )

    async def activate_by_id(self, task_id: str) -> None:
        """Identifier-only counterpart of activate(); a no-op, see complete_by_id()."""

    @abstractmethod
    async def clear_completed(self) -> None:
        """Delete every completed task.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.clear_completed() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every task.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.delete_all() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """Delete a single task.

        Args:
            task_id: Unique identifier for the task

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskDataSource.delete() must be implemented by adapter"
        )

    def invalidate(self) -> None:
        """Hint that any store-level cache should be dropped.

        Freshness is owned by TasksRepository, so the reference stores keep
        no cache of their own and ignore this.
        """
