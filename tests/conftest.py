"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state and
mock data sources for the repository tests.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import AsyncMock, MagicMock

import pytest

from taskmirror.models import Task
from taskmirror.repositories import TaskDataSource, TasksRepository

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_logging(tmp_path, monkeypatch):
    """Send the application log file to *tmp_path* and reset the logger."""
    from taskmirror.utils import logger as logger_module

    log_dir = str(tmp_path / "logs")
    monkeypatch.setattr(logger_module, "user_log_dir", lambda *args, **kwargs: log_dir)
    monkeypatch.setattr(logger_module, "_logger", None)
    _drop_handlers()
    yield
    _drop_handlers()


def _drop_handlers() -> None:
    app_logger = logging.getLogger("taskmirror")
    for handler in list(app_logger.handlers):
        if not isinstance(handler, logging.handlers.RotatingFileHandler):
            continue
        handler.close()
        app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Point config and data directories at *tmp_path* and drop cached services."""
    from taskmirror.adapters.sqlite import connection
    from taskmirror.services import config_service, context_manager

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    monkeypatch.setattr(
        config_service, "user_config_dir", lambda *args, **kwargs: config_dir
    )
    monkeypatch.setattr(connection, "user_data_dir", lambda *args, **kwargs: data_dir)

    config_service.get_config_service.cache_clear()
    context_manager.destroy_tasks_repository()
    yield
    context_manager.destroy_tasks_repository()
    config_service.get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Mock data sources
# ---------------------------------------------------------------------------


def _make_source(tasks: list[Task] | None = None, task: Task | None = None) -> MagicMock:
    """Return a MagicMock that behaves like a TaskDataSource.

    Reads answer *tasks* / *task* (None meaning "no data"); writes do nothing.
    """
    source = MagicMock(spec=TaskDataSource)
    source.list_all = AsyncMock(return_value=tasks)
    source.get = AsyncMock(return_value=task)
    for name in (
        "save",
        "complete",
        "complete_by_id",
        "activate",
        "activate_by_id",
        "clear_completed",
        "delete_all",
        "delete",
    ):
        setattr(source, name, AsyncMock(return_value=None))
    return source


@pytest.fixture()
def remote() -> MagicMock:
    return _make_source()


@pytest.fixture()
def local() -> MagicMock:
    return _make_source()


@pytest.fixture()
def repository(remote, local) -> TasksRepository:
    return TasksRepository(remote, local)


@pytest.fixture()
def source_factory():
    """Factory for extra mock data sources with canned read results."""
    return _make_source
