"""Persistence backends for Task records."""
from .base import TaskStore
from .memory import InMemoryTaskStore, task_matches
from .sql import SqlTaskStore, task_criteria

__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "SqlTaskStore",
    "task_matches",
    "task_criteria",
]
