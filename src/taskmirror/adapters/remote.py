"""Simulated remote task service.

Stands in for a real backend: tasks live in process memory and every read
waits ``latency`` seconds to mimic a network round trip. Nothing here opens a
connection.
"""

from __future__ import annotations

import asyncio

from taskmirror.models import Task
from taskmirror.repositories import TaskDataSource

SEED_TASKS = (
    ("Build tower in Pisa", "Ground looks good, no foundation work required."),
    ("Finish bridge in Tacoma", "Found awesome girders at half the cost!"),
)


class SimulatedRemoteTaskDataSource(TaskDataSource):
    """Remote data source with artificial read latency."""

    def __init__(
        self,
        latency: float = 5.0,
        *,
        seed: bool = True,
        available: bool = True,
    ):
        """Initialize the simulated service.

        Args:
            latency: Seconds every read waits before answering
            seed: Whether to start with the sample tasks
            available: When False, reads answer "no data" as if the service
                could not be reached
        """
        self.latency = latency
        self.available = available
        self._tasks: dict[str, Task] = {}
        if seed:
            for title, description in SEED_TASKS:
                task = Task(title=title, description=description)
                self._tasks[task.id] = task

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def list_all(self) -> list[Task] | None:
        await self._simulate_latency()
        if not self.available:
            return None
        return list(self._tasks.values())

    async def get(self, task_id: str) -> Task | None:
        await self._simulate_latency()
        if not self.available:
            return None
        return self._tasks.get(task_id)

    async def save(self, task: Task) -> None:
        self._tasks[task.id] = task

    async def complete(self, task: Task) -> None:
        self._tasks[task.id] = task.as_completed()

    async def activate(self, task: Task) -> None:
        self._tasks[task.id] = task.as_active()

    async def clear_completed(self) -> None:
        self._tasks = {
            task_id: task for task_id, task in self._tasks.items() if task.is_active
        }

    async def delete_all(self) -> None:
        self._tasks.clear()

    async def delete(self, task_id: str) -> None:
        self._tasks.pop(task_id, None)
