import pytest
from fastapi.testclient import TestClient

from htmx_todos.main import app
from htmx_todos.repositories import InMemoryTaskRepository, get_repository


@pytest.fixture
def repo():
    return InMemoryTaskRepository(lock_timeout=0.2)


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
