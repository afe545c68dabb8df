"""
Shared fixtures: every test gets a fresh in-memory database.
"""
import os

# Keep the module-level app off the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from exercise_tracker.core.config import Settings
from exercise_tracker.main import create_app


@pytest.fixture
def app(tmp_path):
    views_dir = tmp_path / "views"
    views_dir.mkdir()
    (views_dir / "index.html").write_text("<h1>Exercise tracker</h1>")
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    (static_dir / "style.css").write_text("body { color: #222; }")

    return create_app(Settings(
        DATABASE_URL="sqlite://",
        STATIC_DIR=str(static_dir),
        VIEWS_DIR=str(views_dir),
    ))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def create_user(client):
    def _create(username="alice"):
        response = client.post("/api/exercise/new-user", json={"username": username})
        assert response.status_code == 201
        return response.json()["userId"]
    return _create


@pytest.fixture
def add_exercise(client):
    def _add(user_id, description="run", duration=30, date=None):
        payload = {"userId": user_id, "description": description, "duration": duration}
        if date is not None:
            payload["date"] = date
        response = client.post("/api/exercise/add", json=payload)
        assert response.status_code == 201
        return response.json()
    return _add
