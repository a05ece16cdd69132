"""Authentication tests."""
from datetime import datetime, timedelta, timezone

from seiac.auth import TeacherSessionRegistry, verify_password


def test_verify_password_correct():
    assert verify_password("seiac-teacher") is True


def test_verify_password_incorrect():
    assert verify_password("wrongpassword") is False
    assert verify_password("") is False


def test_session_lifecycle():
    """Test session creation, validation, and invalidation."""
    sessions = TeacherSessionRegistry()
    token = sessions.create(1)

    assert len(token) > 20
    assert sessions.validate(token) is True

    sessions.invalidate(token)
    assert sessions.validate(token) is False


def test_invalid_session():
    sessions = TeacherSessionRegistry()
    assert sessions.validate("invalid-token") is False
    assert sessions.validate("") is False
    assert sessions.validate(None) is False


def test_expired_sessions_are_cleaned_up():
    current = [datetime(2026, 1, 1, tzinfo=timezone.utc)]
    sessions = TeacherSessionRegistry(clock=lambda: current[0])
    token = sessions.create(1)

    current[0] += timedelta(hours=2)

    assert sessions.cleanup_expired() == 1
    assert sessions.validate(token) is False


def test_login_success(client):
    response = client.post("/login", data={"password": "seiac-teacher"})
    assert response.status_code == 200
    assert response.json() == {"status": "success"}
    assert "session_token" in response.cookies


def test_login_failure(client):
    response = client.post("/login", data={"password": "nope"})
    assert response.status_code == 401
    assert "session_token" not in response.cookies


def test_session_status(client):
    assert client.get("/session").json() == {"authenticated": False}
    client.post("/login", data={"password": "seiac-teacher"})
    assert client.get("/session").json() == {"authenticated": True}


def test_logout_invalidates_session(authenticated_client):
    authenticated_client.get("/logout")
    response = authenticated_client.get("/live/blocks")
    assert response.status_code == 401
