# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from database.redis import get_redis_client
from taskboard.depends import (get_location_repo, get_location_repo_scope,
                               get_project_repo, get_task_repo, get_user_repo)
from taskboard.main import app

from .fakes import (FakeLocationRepository, FakeProjectRepository, FakeRedis,
                    FakeStore, FakeTaskRepository, FakeUserRepository,
                    fake_location_scope)


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture()
def client(store: FakeStore, redis: FakeRedis) -> Iterator[TestClient]:
    """
    TestClient wired to in-memory repositories and a fake Redis.

    The client is not entered as a context manager, so the lifespan hook
    (table creation against Postgres) never runs.
    """
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository(store)
    app.dependency_overrides[get_project_repo] = lambda: FakeProjectRepository(store)
    app.dependency_overrides[get_task_repo] = lambda: FakeTaskRepository(store)
    app.dependency_overrides[get_location_repo] = lambda: FakeLocationRepository(store)
    app.dependency_overrides[get_location_repo_scope] = lambda: fake_location_scope(store)
    app.dependency_overrides[get_redis_client] = lambda: redis
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def register(client: TestClient) -> Callable[..., dict[str, str]]:
    """Register + log in a user; returns the Authorization header."""

    def _register(username: str = "alice",
                  email: str = "alice@example.com",
                  password: str = "secret123") -> dict[str, str]:
        resp = client.post("/api/auth/register",
                           json={"username": username, "email": email, "password": password})
        assert resp.status_code == 201, resp.text
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        token = resp.json()["user"]["accessToken"]
        client.cookies.clear()
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture()
def auth(register: Callable[..., dict[str, str]]) -> dict[str, str]:
    return register()


@pytest.fixture()
def other_auth(register: Callable[..., dict[str, str]]) -> dict[str, str]:
    return register("bob", "bob@example.com", "hunter22")
