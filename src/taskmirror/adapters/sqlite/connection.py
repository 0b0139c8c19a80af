"""Database connection management for the local SQLite store.

Connections are opened with WAL mode and sqlite3.Row rows, and the schema is
created on first use.
"""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from taskmirror.adapters.sqlite.schema import ALL_TABLES, SCHEMA_VERSION
from taskmirror.adapters.sqlite.utils import now_iso
from taskmirror.models import SchemaVersionError


def default_db_path() -> Path:
    """Location of the database when none is configured."""
    return Path(user_data_dir("taskmirror")) / "tasks.db"


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open a configured connection to the local database.

    Args:
        db_path: Path to database file. If None, uses default location.

    Returns:
        sqlite3.Connection with the schema applied
    """
    db_path = default_db_path() if db_path is None else Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    # Check if database file exists (for first-time init detection)
    is_new_database = not db_path.exists()

    connection = sqlite3.connect(
        str(db_path),
        check_same_thread=False,  # Used from worker threads
        timeout=30.0,  # Wait up to 30s for locks
    )
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA journal_mode = WAL")

    # Owner read/write only
    if is_new_database:
        os.chmod(db_path, 0o600)

    try:
        apply_schema(connection)
    except Exception:
        connection.close()
        raise
    return connection


def schema_version(connection: sqlite3.Connection) -> int:
    """Return the recorded schema version, 0 for a database never set up."""
    has_table = connection.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_version'"
    ).fetchone()
    if not has_table:
        return 0
    row = connection.execute("SELECT MAX(version) FROM schema_version").fetchone()
    return row[0] or 0


def apply_schema(connection: sqlite3.Connection) -> None:
    """Bring the database up to SCHEMA_VERSION.

    Raises:
        SchemaVersionError: The database is newer than this build
    """
    current = schema_version(connection)
    if current > SCHEMA_VERSION:
        raise SchemaVersionError(current, SCHEMA_VERSION)
    if current == SCHEMA_VERSION:
        return

    for statement in ALL_TABLES:
        connection.execute(statement)
    connection.execute(
        "INSERT OR IGNORE INTO schema_version (version, applied_at) VALUES (?, ?)",
        (SCHEMA_VERSION, now_iso()),
    )
    connection.commit()
