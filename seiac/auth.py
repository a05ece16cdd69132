"""Teacher console authentication for the live panel.

A single shared password unlocks the panel; each login receives an opaque
token that lives in process memory until it expires or the teacher logs out.
"""
from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Callable, Dict, Optional

from seiac.config import get_settings


SESSION_COOKIE_NAME = "session_token"


def _hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def verify_password(password: str) -> bool:
    """Return True if the supplied password matches the teacher password."""
    if not password:
        return False
    expected_hash = _hash_password(get_settings().TEACHER_PASSWORD)
    return secrets.compare_digest(expected_hash, _hash_password(password))


class TeacherSessionRegistry:
    """Token -> expiry map for logged-in teachers."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._sessions: Dict[str, datetime] = {}
        self._lock = Lock()

    def create(self, duration_hours: Optional[int] = None) -> str:
        hours = duration_hours or get_settings().SESSION_DURATION_HOURS
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = self._clock() + timedelta(hours=hours)
        return token

    def validate(self, token: Optional[str]) -> bool:
        """Check whether the token is known and unexpired. Lapsed tokens are dropped."""
        if not token:
            return False
        with self._lock:
            expiry = self._sessions.get(token)
            if expiry is None:
                return False
            if expiry < self._clock():
                del self._sessions[token]
                return False
            return True

    def invalidate(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def cleanup_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [token for token, expiry in self._sessions.items() if expiry < now]
            for token in expired:
                del self._sessions[token]
        return len(expired)


teacher_sessions = TeacherSessionRegistry()
