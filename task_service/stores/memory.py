import itertools
import threading
from datetime import datetime, timezone
from typing import List, Optional

from ..models.task import Task, TaskStatus
from ..schemas.task import TaskFilter
from .base import TaskStore


def task_matches(task: Task, filters: TaskFilter, owner_id: int) -> bool:
    """Owner-scoped filter predicate, same semantics as ``task_criteria``."""
    if task.user_id != owner_id:
        return False

    if filters.status is not None and task.status != filters.status:
        return False

    if filters.search:
        needle = filters.search.lower()
        haystacks = (task.title or "", task.description or "")
        if not any(needle in text.lower() for text in haystacks):
            return False

    return True


class InMemoryTaskStore(TaskStore):
    """
    Process-local task store.

    Tasks are kept in insertion order in a single list; every access goes
    through one lock so concurrent requests see a consistent view.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list(self, filters: TaskFilter, owner_id: int) -> List[Task]:
        with self._lock:
            return [task for task in self._tasks if task_matches(task, filters, owner_id)]

    def get(self, task_id: int, owner_id: int) -> Optional[Task]:
        with self._lock:
            return self._find(task_id, owner_id)

    def add(self, task: Task) -> Task:
        with self._lock:
            task.id = next(self._ids)
            task.created_at = datetime.now(timezone.utc)
            self._tasks.append(task)
        return task

    def update_status(self, task: Task, status: TaskStatus) -> Task:
        with self._lock:
            task.status = status
            task.updated_at = datetime.now(timezone.utc)
        return task

    def delete(self, task_id: int, owner_id: int) -> int:
        with self._lock:
            task = self._find(task_id, owner_id)
            if task is None:
                return 0
            self._tasks.remove(task)
            return 1

    def _find(self, task_id: int, owner_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id and task.user_id == owner_id:
                return task
        return None
