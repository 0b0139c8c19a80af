"""In-memory task cache held by TasksRepository."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from taskmirror.models import Task


class TaskCache:
    """Ordered mapping from task identifier to task.

    Iteration follows insertion order. The cache itself knows nothing about
    freshness; TasksRepository decides when its contents are authoritative.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._entries: dict[str, Task] = {}
        for task in tasks:
            self.put(task)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._entries

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._entries.values()))

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def get(self, task_id: str) -> Task | None:
        return self._entries.get(task_id)

    def put(self, task: Task) -> None:
        """Insert or overwrite the entry for task.id."""
        self._entries[task.id] = task

    def remove(self, task_id: str) -> Task | None:
        return self._entries.pop(task_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Drop every entry and load tasks in their given order."""
        self._entries = {task.id: task for task in tasks}

    def retain(self, predicate: Callable[[Task], bool]) -> None:
        """Keep only the entries for which predicate returns True."""
        self._entries = {
            task_id: task
            for task_id, task in self._entries.items()
            if predicate(task)
        }

    def values(self) -> list[Task]:
        return list(self._entries.values())

    def snapshot(self) -> dict[str, Task]:
        """Return a copy of the id -> task mapping."""
        return dict(self._entries)
