"""
Tests for user registration.
"""
from exercise_tracker.models.user import User


def test_new_user(client):
    """Test user creation returns the username as userId."""
    response = client.post("/api/exercise/new-user", json={"username": "alice"})
    assert response.status_code == 201
    assert response.json() == {"username": "alice", "userId": "alice"}


def test_new_user_form_encoded(client):
    """Test user creation from an HTML form post."""
    response = client.post("/api/exercise/new-user", data={"username": "bob"})
    assert response.status_code == 201
    assert response.json()["userId"] == "bob"


def test_new_user_duplicate(client):
    """Test a repeated username is rejected."""
    client.post("/api/exercise/new-user", json={"username": "alice"})

    response = client.post("/api/exercise/new-user", json={"username": "alice"})
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Username already exists"


def test_new_user_missing_username(client, db):
    """Test user creation without a username creates nothing."""
    response = client.post("/api/exercise/new-user", json={})
    assert response.status_code == 400
    assert response.text == "You must provide an username"
    assert db.query(User).count() == 0


def test_new_user_blank_username(client, db):
    response = client.post("/api/exercise/new-user", data={"username": "   "})
    assert response.status_code == 400
    assert db.query(User).count() == 0


def test_new_user_invalid_json(client):
    response = client.post(
        "/api/exercise/new-user",
        content=b"{not json",
        headers={"content-type": "application/json"}
    )
    assert response.status_code == 400


def test_new_user_username_too_long(client, db):
    """Test a username longer than the column allows is rejected."""
    response = client.post("/api/exercise/new-user", json={"username": "x" * 500})
    assert response.status_code == 400
    assert response.text == "Username must be at most 100 characters"
    assert db.query(User).count() == 0


def test_new_user_username_at_max_length(client):
    response = client.post("/api/exercise/new-user", json={"username": "x" * 100})
    assert response.status_code == 201
