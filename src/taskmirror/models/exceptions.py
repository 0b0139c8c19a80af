"""Domain exceptions."""


class TaskMirrorError(Exception):
    """Base exception for taskmirror errors."""


class TaskNotFoundError(TaskMirrorError):
    """A task identifier could not be resolved to a task."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class EmptyTaskError(TaskMirrorError):
    """A task with neither title nor description was submitted."""

    def __init__(self):
        super().__init__("Tasks cannot be empty")


class SchemaVersionError(TaskMirrorError):
    """The local database was written by a newer schema than this build knows."""

    def __init__(self, found: int, supported: int):
        super().__init__(
            f"Database schema version {found} is newer than supported version "
            f"{supported}"
        )
        self.found = found
        self.supported = supported
