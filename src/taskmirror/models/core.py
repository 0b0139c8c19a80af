"""Task data models."""

from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, Field


def _new_task_id() -> str:
    return str(uuid.uuid4())


class Task(BaseModel):
    """Task model representing a single to-do entry.

    Two tasks are equal when their identifiers match, whatever their other
    fields hold. The cache and the data sources key tasks by ``id``.

    Attributes:
        id: Unique identifier, generated once at creation
        title: Short title
        description: Longer free-form description
        is_completed: Completion status
    """

    id: str = Field(default_factory=_new_task_id)
    title: str = ""
    description: str = ""
    is_completed: bool = False

    @property
    def is_active(self) -> bool:
        return not self.is_completed

    @property
    def is_empty(self) -> bool:
        """True when both title and description are blank."""
        return not self.title.strip() and not self.description.strip()

    @property
    def title_for_list(self) -> str:
        """Title to show in listings, falling back to the description."""
        return self.title if self.title.strip() else self.description

    def as_completed(self) -> Task:
        return self.model_copy(update={"is_completed": True})

    def as_active(self) -> Task:
        return self.model_copy(update={"is_completed": False})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class LoadStatus(str, Enum):
    """Outcome of a full task-list read."""

    LOADED = "loaded"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


class TaskListResult(BaseModel):
    """Tagged result of a full task-list read.

    Attributes:
        status: LOADED when tasks were returned, EMPTY when a source answered
            with an explicit empty collection, UNAVAILABLE when no source
            returned anything usable
        tasks: Loaded tasks (always empty unless status is LOADED)
    """

    status: LoadStatus
    tasks: list[Task] = Field(default_factory=list)

    @classmethod
    def loaded(cls, tasks: list[Task]) -> TaskListResult:
        return cls(status=LoadStatus.LOADED, tasks=tasks)

    @classmethod
    def empty(cls) -> TaskListResult:
        return cls(status=LoadStatus.EMPTY)

    @classmethod
    def unavailable(cls) -> TaskListResult:
        return cls(status=LoadStatus.UNAVAILABLE)

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadStatus.LOADED


class TaskFilter(str, Enum):
    """Filter applied when listing tasks."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class TaskStatistics(BaseModel):
    """Active/completed counts over the current task list.

    Attributes:
        active: Number of active tasks
        completed: Number of completed tasks
        empty: True when there are no tasks to count
        error: True when the task list could not be loaded
    """

    active: int = 0
    completed: int = 0
    empty: bool = True
    error: bool = False

    @property
    def total(self) -> int:
        return self.active + self.completed

    @property
    def active_percent(self) -> float:
        return 100.0 * self.active / self.total if self.total else 0.0

    @property
    def completed_percent(self) -> float:
        return 100.0 * self.completed / self.total if self.total else 0.0
