"""SQLite implementation of TaskDataSource."""

from __future__ import annotations

import asyncio
import sqlite3
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from taskmirror.adapters.sqlite.connection import get_connection
from taskmirror.adapters.sqlite.utils import row_to_task
from taskmirror.models import Task
from taskmirror.repositories import TaskDataSource

T = TypeVar("T")


class SqliteTaskDataSource(TaskDataSource):
    """Local durable task store backed by SQLite.

    Blocking sqlite3 calls run in a worker thread so the event loop keeps
    serving other callers while the database is busy.
    """

    def __init__(self, db_path: str | Path | None = None):
        """Initialize the SQLite data source.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None
        self._db_lock = threading.Lock()

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    async def _run(self, func: Callable[[sqlite3.Connection], T]) -> T:
        def call() -> T:
            with self._db_lock:
                return func(self.connection)

        return await asyncio.to_thread(call)

    async def list_all(self) -> list[Task] | None:
        """List all tasks; None when the table is empty."""

        def query(conn: sqlite3.Connection) -> list[Task]:
            cursor = conn.execute(
                "SELECT id, title, description, is_completed FROM tasks ORDER BY rowid"
            )
            return [row_to_task(row) for row in cursor.fetchall()]

        tasks = await self._run(query)
        return tasks or None

    async def get(self, task_id: str) -> Task | None:
        def query(conn: sqlite3.Connection) -> Task | None:
            row = conn.execute(
                "SELECT id, title, description, is_completed FROM tasks WHERE id = ?",
                (task_id,),
            ).fetchone()
            return row_to_task(row) if row else None

        return await self._run(query)

    async def save(self, task: Task) -> None:
        def upsert(conn: sqlite3.Connection) -> None:
            conn.execute(
                """INSERT INTO tasks (id, title, description, is_completed)
                   VALUES (?, ?, ?, ?)
                   ON CONFLICT(id) DO UPDATE SET
                       title = excluded.title,
                       description = excluded.description,
                       is_completed = excluded.is_completed""",
                (task.id, task.title, task.description, task.is_completed),
            )
            conn.commit()

        await self._run(upsert)

    async def complete(self, task: Task) -> None:
        await self._set_completed(task.id, True)

    async def activate(self, task: Task) -> None:
        await self._set_completed(task.id, False)

    async def _set_completed(self, task_id: str, completed: bool) -> None:
        def update(conn: sqlite3.Connection) -> None:
            conn.execute(
                "UPDATE tasks SET is_completed = ? WHERE id = ?",
                (completed, task_id),
            )
            conn.commit()

        await self._run(update)

    async def clear_completed(self) -> None:
        await self._execute("DELETE FROM tasks WHERE is_completed = 1")

    async def delete_all(self) -> None:
        await self._execute("DELETE FROM tasks")

    async def delete(self, task_id: str) -> None:
        await self._execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    async def _execute(self, sql: str, params: tuple = ()) -> None:
        def execute(conn: sqlite3.Connection) -> None:
            conn.execute(sql, params)
            conn.commit()

        await self._run(execute)
