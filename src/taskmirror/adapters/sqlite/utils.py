"""Row conversion helpers for the SQLite adapter."""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime

from taskmirror.models import Task


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


def row_to_task(row: sqlite3.Row) -> Task:
    """Build a Task from a ``tasks`` row; SQLite stores the flag as 0/1."""
    fields = dict(row)
    fields["is_completed"] = bool(fields["is_completed"])
    return Task(**fields)
