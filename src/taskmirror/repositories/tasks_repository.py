"""Caching tasks repository.

TasksRepository is the one place that decides where task data comes from.
It reconciles three views of the task list:

- an in-memory TaskCache holding the last known-good merged state,
- a local data source acting as the durable mirror,
- a remote data source acting as the service of record.

Reads are local-first. The remote source is consulted only when the local
mirror has nothing, and whatever it returns is written back into the local
mirror. Writes fan out to remote, then local, then update the cache in place.

All cache and dirty-flag mutations run under a single asyncio.Lock. A read
of a clean, non-empty cache is a pure lookup and does not take the lock, but
only once a full list load has completed: entries added one at a time by
get_task() or the write path never count as the whole task list. A reload
publishes its result into the cache in one step.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from taskmirror.models import Task, TaskListResult, TaskNotFoundError
from taskmirror.repositories.cache import TaskCache
from taskmirror.repositories.data_source import TaskDataSource
from taskmirror.utils.logger import get_logger

T = TypeVar("T")


class TasksRepository:
    """Caching façade over a remote and a local TaskDataSource.

    The repository is built once by the composition root
    (see taskmirror.services.context_manager) and lives as long as the
    application.
    """

    def __init__(
        self,
        remote: TaskDataSource,
        local: TaskDataSource,
        *,
        read_timeout: float | None = None,
    ):
        """Initialize the repository.

        Args:
            remote: Remote data source (service of record)
            local: Local data source (durable mirror)
            read_timeout: Optional per-read timeout in seconds. A source read
                that takes longer is treated as "no data".
        """
        self.remote = remote
        self.local = local
        self.read_timeout = read_timeout
        self._cache = TaskCache()
        self._dirty = False
        # True once a full list has been loaded into the cache
        self._loaded = False
        # Bumped by refresh_tasks(); a reload only clears dirty if unchanged
        self._refresh_generation = 0
        self._lock = asyncio.Lock()
        self._logger = get_logger().getChild("repository")

    @property
    def cached_tasks(self) -> dict[str, Task]:
        """Snapshot of the cache contents keyed by task id."""
        return self._cache.snapshot()

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def _cache_is_fresh(self) -> bool:
        return self._loaded and not self._dirty and not self._cache.is_empty

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_tasks(self) -> list[Task] | None:
        """Return all tasks, or None when no source has any data."""
        result = await self.load_tasks()
        return result.tasks if result.is_loaded else None

    async def load_tasks(self) -> TaskListResult:
        """Return all tasks as a tagged TaskListResult.

        A clean, non-empty cache is returned without touching any source.
        Otherwise the local source is read first and the remote source only
        if the local one has no data.
        """
        if self._cache_is_fresh():
            self._logger.debug("serving %d tasks from cache", len(self._cache))
            return TaskListResult.loaded(self._cache.values())

        async with self._lock:
            # Another caller may have reloaded while we waited.
            if self._cache_is_fresh():
                return TaskListResult.loaded(self._cache.values())
            return await self._reload()

    async def _reload(self) -> TaskListResult:
        self._logger.debug("reloading tasks (dirty=%s)", self._dirty)
        generation = self._refresh_generation

        local_tasks = await self._read(self.local.list_all(), "local")
        if local_tasks:
            self._cache.replace_all(local_tasks)
            self._mark_loaded(generation)
            self._logger.debug("loaded %d tasks from local", len(local_tasks))
            return TaskListResult.loaded(self._cache.values())

        self._logger.debug("local has no data, falling back to remote")
        remote_tasks = await self._read(self.remote.list_all(), "remote")
        if remote_tasks:
            for task in remote_tasks:
                await self.local.save(task)
            self._cache.replace_all(remote_tasks)
            self._mark_loaded(generation)
            self._logger.info(
                "repaired local mirror with %d tasks from remote", len(remote_tasks)
            )
            return TaskListResult.loaded(self._cache.values())

        if local_tasks is not None or remote_tasks is not None:
            return TaskListResult.empty()
        self._logger.warning("no data available from local or remote")
        return TaskListResult.unavailable()

    def _mark_loaded(self, generation: int) -> None:
        self._loaded = True
        if generation == self._refresh_generation:
            self._dirty = False
        else:
            self._logger.debug("refresh requested during reload, staying dirty")

    async def get_task(self, task_id: str) -> Task | None:
        """Return one task from the cache, the local source or the remote source.

        The dirty flag is not consulted: a cached entry is returned even when
        the task list as a whole is due for a reload.
        """
        cached = self._cache.get(task_id)
        if cached is not None:
            return cached

        async with self._lock:
            cached = self._cache.get(task_id)
            if cached is not None:
                return cached

            task = await self._read(self.local.get(task_id), "local")
            if task is None:
                task = await self._read(self.remote.get(task_id), "remote")
            if task is None:
                self._logger.debug("task %s not found in any source", task_id)
                return None

            self._cache.put(task)
            return task

    def refresh_tasks(self) -> None:
        """Force the next get_tasks() to reload from the data sources.

        Performs no I/O and leaves the cache in place.
        """
        self._dirty = True
        self._refresh_generation += 1
        self._logger.debug("task list marked dirty")

    async def _read(self, read: Awaitable[T], source: str) -> T | None:
        if self.read_timeout is None:
            return await read
        try:
            return await asyncio.wait_for(read, self.read_timeout)
        except TimeoutError:
            self._logger.warning(
                "%s read timed out after %.2fs", source, self.read_timeout
            )
            return None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save_task(self, task: Task) -> None:
        """Save a task to remote, then local, then the cache."""
        async with self._lock:
            await self.remote.save(task)
            await self.local.save(task)
            self._cache.put(task)

    async def complete_task(self, task: Task | str) -> None:
        """Mark a task completed, given the task or its identifier.

        Raises:
            TaskNotFoundError: An identifier was given and is not cached
        """
        async with self._lock:
            resolved = self._resolve(task)
            await self.remote.complete(resolved)
            await self.local.complete(resolved)
            self._cache.put(resolved.as_completed())

    async def activate_task(self, task: Task | str) -> None:
        """Mark a task active again, given the task or its identifier.

        Raises:
            TaskNotFoundError: An identifier was given and is not cached
        """
        async with self._lock:
            resolved = self._resolve(task)
            await self.remote.activate(resolved)
            await self.local.activate(resolved)
            self._cache.put(resolved.as_active())

    async def clear_completed_tasks(self) -> None:
        async with self._lock:
            await self.remote.clear_completed()
            await self.local.clear_completed()
            self._cache.retain(lambda task: task.is_active)

    async def delete_all_tasks(self) -> None:
        async with self._lock:
            await self.remote.delete_all()
            await self.local.delete_all()
            self._cache.clear()

    async def delete_task(self, task_id: str) -> None:
        async with self._lock:
            await self.remote.delete(task_id)
            await self.local.delete(task_id)
            self._cache.remove(task_id)

    def _resolve(self, task: Task | str) -> Task:
        if isinstance(task, Task):
            return task
        cached = self._cache.get(task)
        if cached is None:
            raise TaskNotFoundError(task)
        return cached
