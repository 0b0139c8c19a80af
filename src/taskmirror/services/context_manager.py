"""Composition root for taskmirror.

Key Functions:
- get_tasks_repository(): the process-wide TasksRepository (RECOMMENDED)
- destroy_tasks_repository(): drop it so the next call builds a fresh one

Usage Pattern:
    from taskmirror.services.context_manager import get_tasks_repository

    repository = get_tasks_repository()
    tasks = await repository.get_tasks()

The repository is built once from ConfigService: a SqliteTaskDataSource as
the local mirror and a SimulatedRemoteTaskDataSource as the remote service.
destroy_tasks_repository() exists for test isolation only.
"""

from __future__ import annotations

from functools import lru_cache

from taskmirror.adapters import SimulatedRemoteTaskDataSource, SqliteTaskDataSource
from taskmirror.models import AppConfig
from taskmirror.repositories import TasksRepository
from taskmirror.services.config_service import get_config_service
from taskmirror.utils.logger import get_logger, set_log_level


def build_tasks_repository(config: AppConfig) -> TasksRepository:
    """Wire a TasksRepository from configuration."""
    remote = SimulatedRemoteTaskDataSource(
        latency=config.remote.latency,
        seed=config.remote.seed,
        available=config.remote.available,
    )
    local = SqliteTaskDataSource(config.storage.db_path)
    return TasksRepository(
        remote, local, read_timeout=config.repository.read_timeout
    )


@lru_cache(maxsize=1)
def get_tasks_repository() -> TasksRepository:
    """Get the cached TasksRepository for the current configuration."""
    config = get_config_service().config
    set_log_level(config.logging.level)
    get_logger().debug(
        "building tasks repository (db=%s, remote latency=%.2fs)",
        config.storage.db_path or "default",
        config.remote.latency,
    )
    return build_tasks_repository(config)


def destroy_tasks_repository() -> None:
    """Discard the cached repository and its state."""
    if get_tasks_repository.cache_info().currsize:
        local = get_tasks_repository().local
        if isinstance(local, SqliteTaskDataSource):
            local.close()
    get_tasks_repository.cache_clear()
