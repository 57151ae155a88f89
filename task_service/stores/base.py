from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.task import Task, TaskStatus
from ..schemas.task import TaskFilter


class TaskStore(ABC):
    """
    Persistence boundary for Task records.

    Every read and delete is scoped by ``owner_id``; the store applies the
    predicate it is given and holds no business rules.
    """

    @abstractmethod
    def list(self, filters: TaskFilter, owner_id: int) -> List[Task]:
        """Return the owner's tasks matching ``filters`` in insertion order."""

    @abstractmethod
    def get(self, task_id: int, owner_id: int) -> Optional[Task]:
        """Return the task with ``task_id`` if it belongs to ``owner_id``."""

    @abstractmethod
    def add(self, task: Task) -> Task:
        """Insert a new task, assigning its id and creation time."""

    @abstractmethod
    def update_status(self, task: Task, status: TaskStatus) -> Task:
        """Set a stored task's status and update stamp, and persist the change."""

    @abstractmethod
    def delete(self, task_id: int, owner_id: int) -> int:
        """Remove the owner's task and return the number of records removed."""
