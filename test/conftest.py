import pytest
from fastapi.testclient import TestClient

import storage

# This fixture will be automatically used by tests in the same directory or subdirectories.
@pytest.fixture(autouse=True)
def tasks_file(tmp_path, monkeypatch):
    """
    Points the store at a fresh tasks.json inside the test's temp directory,
    so every test starts without a persisted store.
    """
    path = tmp_path / "tasks.json"
    monkeypatch.setattr(storage, "TASKS_FILE", path)
    yield path


@pytest.fixture
def client():
    """A TestClient with the app lifespan running (creates the store on startup)."""
    from main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_task(client):
    """Creates a task through the API and returns the response body."""
    def _make_task(text="Write report", **fields):
        response = client.post("/api/tasks", json={"text": text, **fields})
        assert response.status_code == 201, response.text
        return response.json()
    return _make_task
