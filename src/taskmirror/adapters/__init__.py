"""Adapters module - TaskDataSource implementations for different stores.

This package contains the concrete implementations (adapters) of the
TaskDataSource port:
- sqlite: Local SQLite database storage
- remote: Simulated remote task service
"""

from .remote import SimulatedRemoteTaskDataSource
from .sqlite import SqliteTaskDataSource

__all__ = [
    "SqliteTaskDataSource",
    "SimulatedRemoteTaskDataSource",
]
