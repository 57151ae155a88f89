"""
Error types raised by the task service layer.

Handlers in ``main.py`` turn these into JSON responses; nothing here
depends on FastAPI.
"""
from typing import Any


class TaskServiceError(Exception):
    """Base class for client-facing task service errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(TaskServiceError):
    """Invalid client input (bad status value, nothing to delete)."""

    status_code = 400


class TaskNotFoundError(TaskServiceError):
    """No task with the given id is visible to the caller."""

    status_code = 404

    def __init__(self, task_id: Any):
        super().__init__(f'Task with ID "{task_id}" not found.')
        self.task_id = task_id
