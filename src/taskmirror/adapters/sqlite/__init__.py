"""SQLite adapter module - Local database storage implementation."""

from taskmirror.adapters.sqlite.connection import default_db_path, get_connection
from taskmirror.adapters.sqlite.task_data_source import SqliteTaskDataSource

__all__ = [
    "SqliteTaskDataSource",
    "get_connection",
    "default_db_path",
]
