"""taskmirror domain models.

This package contains the pydantic models shared by the repository, the data
sources and the services, plus the domain exceptions.
"""

from .config_models import AppConfig
from .core import (
    LoadStatus,
    Task,
    TaskFilter,
    TaskListResult,
    TaskStatistics,
)
from .exceptions import (
    EmptyTaskError,
    SchemaVersionError,
    TaskMirrorError,
    TaskNotFoundError,
)

__all__ = [
    # Task models
    "Task",
    "TaskFilter",
    "TaskListResult",
    "LoadStatus",
    "TaskStatistics",
    # Config models
    "AppConfig",
    # Exceptions
    "SchemaVersionError",
    "TaskMirrorError",
    "TaskNotFoundError",
    "EmptyTaskError",
]
