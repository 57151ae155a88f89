"""
Task orchestration: ownership checks and error signalling around a TaskStore.
"""
import logging
from typing import List

from ..core.auth import CurrentUser
from ..core.exceptions import BadRequestError, TaskNotFoundError
from ..models.task import Task, TaskStatus
from ..schemas.task import TaskCreate, TaskFilter
from ..stores.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Owner-scoped task operations; the only entry point routers call."""

    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self, filters: TaskFilter, user: CurrentUser) -> List[Task]:
        """Return the caller's tasks matching ``filters`` in insertion order."""
        tasks = self.store.list(filters, user.user_id)
        logger.debug(f"Listed {len(tasks)} tasks for user {user.user_id} ({filters})")
        return tasks

    def get_task(self, task_id: int, user: CurrentUser) -> Task:
        """
        Fetch one of the caller's tasks.

        Tasks owned by other users are reported exactly like missing ones.

        Raises:
            TaskNotFoundError: If no such task belongs to the caller
        """
        task = self.store.get(task_id, user.user_id)
        if task is None:
            logger.warning(f"Task {task_id} not found for user {user.user_id}")
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, data: TaskCreate, user: CurrentUser) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            status=TaskStatus.OPEN,
            user_id=user.user_id
        )
        task = self.store.add(task)
        logger.info(f"Created task {task.id} for user {user.user_id}")
        return task

    def update_task_status(self, task_id: int, status: TaskStatus, user: CurrentUser) -> Task:
        """Set a task's status; ``status`` must already be validated."""
        task = self.get_task(task_id, user)
        previous = task.status

        task = self.store.update_status(task, status)

        logger.info(f"Task {task_id} status {previous.value} -> {status.value}")
        return task

    def delete_task(self, task_id: int, user: CurrentUser) -> None:
        """
        Delete one of the caller's tasks.

        Raises:
            BadRequestError: If no record matched
        """
        affected = self.store.delete(task_id, user.user_id)
        if affected == 0:
            logger.warning(f"Delete matched no task {task_id} for user {user.user_id}")
            raise BadRequestError(f'Could not delete task with ID "{task_id}", does it exist?')
        logger.info(f"Deleted task {task_id} for user {user.user_id}")
