# tests/test_dependencies.py

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from task_service.core import dependencies
from task_service.core.exceptions import BadRequestError, TaskNotFoundError
from task_service.stores import InMemoryTaskStore, SqlTaskStore


class FakeSession:
    def __init__(self) -> None:
        self.rolled_back = False
        self.closed = False

    def rollback(self) -> None:
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def session(monkeypatch: pytest.MonkeyPatch) -> FakeSession:
    fake = FakeSession()
    monkeypatch.setattr(dependencies, "SessionLocal", lambda: fake)
    monkeypatch.setattr(dependencies.settings, "task_store_backend", "sql")
    return fake


@pytest.mark.parametrize("error", [BadRequestError("bad"), TaskNotFoundError(3)])
def test_service_errors_do_not_roll_back(session: FakeSession, error: Exception) -> None:
    gen = dependencies.get_task_store()
    assert isinstance(next(gen), SqlTaskStore)

    with pytest.raises(type(error)):
        gen.throw(error)

    assert not session.rolled_back
    assert session.closed


def test_database_errors_roll_back(session: FakeSession) -> None:
    gen = dependencies.get_task_store()
    next(gen)

    with pytest.raises(OperationalError):
        gen.throw(OperationalError("SELECT 1", {}, Exception("gone away")))

    assert session.rolled_back
    assert session.closed


def test_memory_backend_shares_one_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dependencies.settings, "task_store_backend", "memory")

    first = next(dependencies.get_task_store())
    second = next(dependencies.get_task_store())

    assert isinstance(first, InMemoryTaskStore)
    assert first is second is dependencies.memory_store
