# tests/conftest.py

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

# Must be set before task_service modules build their engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from task_service.core.auth import CurrentUser  # noqa: E402
from task_service.core.database import create_db_engine, init_db  # noqa: E402
from task_service.services.tasks import TaskService  # noqa: E402
from task_service.stores import InMemoryTaskStore, SqlTaskStore, TaskStore  # noqa: E402


@pytest.fixture()
def user() -> CurrentUser:
    return CurrentUser(user_id=1, username="johndoe")


@pytest.fixture()
def other_user() -> CurrentUser:
    return CurrentUser(user_id=2, username="janedoe")


@pytest.fixture()
def db_session() -> Iterator[Session]:
    """Fresh in-memory SQLite database per test."""
    engine = create_db_engine("sqlite://")
    assert init_db(engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def sql_store(db_session: Session) -> SqlTaskStore:
    return SqlTaskStore(db_session)


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture(params=["memory", "sql"])
def store(request: pytest.FixtureRequest) -> TaskStore:
    """Both store backends; tests using this run once per backend."""
    if request.param == "memory":
        return InMemoryTaskStore()
    return request.getfixturevalue("sql_store")


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    return TaskService(store)
