"""Task repository layer for taskmirror.

This package contains the TaskDataSource port both stores implement, the
in-memory TaskCache and the TasksRepository that reconciles them.

Implementations (Adapters) of TaskDataSource are in:
- taskmirror.adapters.sqlite (local storage)
- taskmirror.adapters.remote (simulated remote service)
"""

from .cache import TaskCache
from .data_source import TaskDataSource
from .tasks_repository import TasksRepository

__all__ = [
    "TaskDataSource",
    "TaskCache",
    "TasksRepository",
]
