"""
FastAPI dependencies wiring the task store and service.
"""
import logging
from typing import Generator
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from .config import get_settings
from .database import SessionLocal
from ..services.tasks import TaskService
from ..stores.base import TaskStore
from ..stores.memory import InMemoryTaskStore
from ..stores.sql import SqlTaskStore

logger = logging.getLogger(__name__)

settings = get_settings()

# Shared by all requests when TASK_STORE_BACKEND=memory
memory_store = InMemoryTaskStore()


def get_task_store() -> Generator[TaskStore, None, None]:
    """
    Task store dependency for FastAPI

    Yields:
        TaskStore: In-memory store, or a SQL store bound to a fresh session
    """
    if settings.task_store_backend == "memory":
        yield memory_store
        return

    db = SessionLocal()
    try:
        yield SqlTaskStore(db)
    except SQLAlchemyError as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def get_task_service(store: TaskStore = Depends(get_task_store)) -> TaskService:
    """Task service dependency for FastAPI"""
    return TaskService(store)
