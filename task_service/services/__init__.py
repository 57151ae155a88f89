"""Business logic for Task Service."""
from .tasks import TaskService
from .validation import validate_task_status

__all__ = ["TaskService", "validate_task_status"]
