from typing import Any

from ..core.exceptions import BadRequestError
from ..models.task import TaskStatus


def validate_task_status(value: Any) -> TaskStatus:
    """
    Normalize a raw status value and check it against TaskStatus.

    Args:
        value: Raw status, any case (e.g. "in_progress")

    Returns:
        TaskStatus: The matching status member

    Raises:
        BadRequestError: If the uppercased value is not a known status
    """
    if not isinstance(value, str):
        raise BadRequestError(f'"{value}" is an invalid status')

    value = value.upper()
    try:
        return TaskStatus(value)
    except ValueError:
        raise BadRequestError(f'"{value}" is an invalid status') from None
