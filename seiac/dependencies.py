"""Reusable FastAPI dependencies."""
from fastapi import Depends, HTTPException, Query, Request, status

from seiac.auth import SESSION_COOKIE_NAME, teacher_sessions
from seiac.config import Settings, get_settings as _get_settings
from seiac.session_store import LiveCoordinationStore, live_store, make_session_key


def get_settings() -> Settings:
    """Return application settings (cached)."""
    return _get_settings()


def get_live_store() -> LiveCoordinationStore:
    """Return the process-wide live coordination store."""
    return live_store


def get_current_teacher(request: Request) -> str:
    """Ensure the request comes from a logged-in teacher."""
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not teacher_sessions.validate(token):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return token


def get_optional_teacher(request: Request) -> str | None:
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token or not teacher_sessions.validate(token):
        return None
    return token


def build_session_key(unique_code: str, email: str) -> str:
    """Validate the participant identity and turn it into a coordination key."""
    if not unique_code or not unique_code.strip() or not email or not email.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid parameters",
        )
    return make_session_key(unique_code, email)


def get_student_key(
    unique_code: str = Query("", alias="uniqueCode"),
    email: str = Query(""),
) -> str:
    """Coordination key for student polling requests."""
    return build_session_key(unique_code, email)


def require_not_blocked(
    key: str = Depends(get_student_key),
    store: LiveCoordinationStore = Depends(get_live_store),
) -> str:
    """Gate for protected student requests while a teacher block is active."""
    block = store.blocks.is_user_blocked(key)
    if block.blocked:
        raise HTTPException(
            status_code=status.HTTP_423_LOCKED,
            detail={"message": "Access temporarily blocked", "remainingMs": block.remaining_ms},
        )
    return key
