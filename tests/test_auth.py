# tests/test_auth.py

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from task_service.core import auth
from task_service.core.auth import AuthService, CurrentUser
from task_service.core.dependencies import get_task_store
from task_service.main import app
from task_service.stores import InMemoryTaskStore

PREFIX = "/api/v1/tasks"


def _auth_handler(request: httpx.Request) -> httpx.Response:
    """Fake Auth Service accepting only the token 'good'."""
    if request.headers.get("Authorization") != "Bearer good":
        return httpx.Response(401, json={"detail": "bad token"})
    if request.url.path == "/auth/verify":
        return httpx.Response(200, json={"valid": True})
    if request.url.path == "/auth/me":
        return httpx.Response(200, json={"id": 42, "email": "ada@example.com"})
    return httpx.Response(404)


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    fake = AuthService(base_url="http://auth.test", retries=1, transport=httpx.MockTransport(_auth_handler))
    monkeypatch.setattr(auth, "auth_service", fake)
    store = InMemoryTaskStore()
    app.dependency_overrides[get_task_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_valid_token_binds_owner(client: TestClient) -> None:
    response = client.post(
        f"{PREFIX}/",
        json={"title": "owned"},
        headers={"Authorization": "Bearer good"},
    )

    assert response.status_code == 201
    assert response.json()["user_id"] == 42


def test_invalid_token_is_rejected(client: TestClient) -> None:
    response = client.get(f"{PREFIX}/", headers={"Authorization": "Bearer bad"})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_missing_token_is_rejected(client: TestClient) -> None:
    response = client.get(f"{PREFIX}/")

    assert response.status_code in (401, 403)


def test_unreachable_auth_service_is_unauthorized(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    attempts = []

    def refuse(request: httpx.Request) -> httpx.Response:
        attempts.append(request.url.path)
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        auth,
        "auth_service",
        AuthService(base_url="http://auth.test", retries=3, transport=httpx.MockTransport(refuse)),
    )

    response = client.get(f"{PREFIX}/", headers={"Authorization": "Bearer good"})

    assert response.status_code == 401
    assert attempts == ["/auth/verify"] * 3


def test_current_user_from_payload() -> None:
    user = CurrentUser.from_dict({"id": "7", "username": "johndoe", "email": "j@example.com", "user_type": "normal"})

    assert user.user_id == 7
    assert user.username == "johndoe"
    assert user.extra_data == {"user_type": "normal"}
    assert str(user) == "User(id=7, username=johndoe)"
