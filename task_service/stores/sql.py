import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import or_, asc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.task import Task, TaskStatus
from ..schemas.task import TaskFilter
from .base import TaskStore

logger = logging.getLogger(__name__)


def task_criteria(filters: TaskFilter, owner_id: int) -> list:
    """
    Build the WHERE clauses for an owner-scoped task query.

    Search is a case-insensitive substring match on title or description,
    with LIKE wildcards in the search text escaped.

    Args:
        filters: Status and search filters
        owner_id: Owning user id

    Returns:
        list: SQLAlchemy boolean clauses to be AND-ed together
    """
    criteria = [Task.user_id == owner_id]

    if filters.status is not None:
        criteria.append(Task.status == filters.status)

    if filters.search:
        criteria.append(
            or_(
                Task.title.icontains(filters.search, autoescape=True),
                Task.description.icontains(filters.search, autoescape=True)
            )
        )

    return criteria


class SqlTaskStore(TaskStore):
    """Task store backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def list(self, filters: TaskFilter, owner_id: int) -> List[Task]:
        return (
            self.db.query(Task)
            .filter(*task_criteria(filters, owner_id))
            .order_by(asc(Task.id))
            .all()
        )

    def get(self, task_id: int, owner_id: int) -> Optional[Task]:
        return self.db.query(Task).filter(
            *task_criteria(TaskFilter(), owner_id), Task.id == task_id
        ).first()

    def add(self, task: Task) -> Task:
        self.db.add(task)
        self._commit()
        self.db.refresh(task)
        return task

    def update_status(self, task: Task, status: TaskStatus) -> Task:
        task.status = status
        task.updated_at = datetime.now(timezone.utc)
        self._commit()
        self.db.refresh(task)
        return task

    def delete(self, task_id: int, owner_id: int) -> int:
        affected = self.db.query(Task).filter(
            *task_criteria(TaskFilter(), owner_id), Task.id == task_id
        ).delete(synchronize_session=False)
        self._commit()
        return affected

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Task store commit failed: {e}")
            self.db.rollback()
            raise
