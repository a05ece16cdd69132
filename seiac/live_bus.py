"""
In-memory message bus for short-lived teacher-to-student notices.
Messages are keyed by a composite session key (uniqueCode|email) and expire on their own.
Nothing is persisted: a process restart drops every bucket.
"""
from __future__ import annotations

import logging
import secrets
import string
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Literal

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 90_000  # tolerates client polling and countdown drift

Scope = Literal["all", "individual"]

_BASE36 = string.digits + string.ascii_lowercase


def now_ms() -> int:
    """Current wall clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def make_message_id(timestamp_ms: int) -> str:
    """Random part followed by the creation time, both base36."""
    return _to_base36(secrets.randbits(52)) + _to_base36(timestamp_ms)


@dataclass
class LiveMessage:
    """A single notice waiting in a student's bucket."""

    id: str
    content: str
    created_at: int
    expires_at: int
    scope: Scope = "individual"

    def is_live(self, current_ms: int) -> bool:
        return self.expires_at > current_ms

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "createdAt": self.created_at,
            "expiresAt": self.expires_at,
            "scope": self.scope,
        }


MessageBucket = list[LiveMessage]


class LiveMessageBus:
    """Thread-safe map from session key to an ordered bucket of messages."""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._buckets: dict[str, MessageBucket] = {}
        self._lock = threading.Lock()

    def publish(
        self,
        key: str,
        content: str,
        ttl_ms: int = DEFAULT_TTL_MS,
        scope: Scope = "individual",
    ) -> LiveMessage:
        """Append a message to the bucket for ``key``, creating the bucket if needed."""
        created = self._clock()
        message = LiveMessage(
            id=make_message_id(created),
            content=content,
            created_at=created,
            expires_at=created + ttl_ms,
            scope=scope,
        )
        with self._lock:
            self._buckets.setdefault(key, []).append(message)
        return message

    def broadcast(
        self,
        keys: Iterable[str],
        content: str,
        ttl_ms: int = DEFAULT_TTL_MS,
        scope: Scope = "all",
    ) -> list[LiveMessage]:
        """Publish the same content once per distinct key, in the order given."""
        sent: list[LiveMessage] = []
        seen: set[str] = set()
        for key in keys:
            if key in seen:
                continue
            seen.add(key)
            sent.append(self.publish(key, content, ttl_ms=ttl_ms, scope=scope))
        return sent

    def consume(self, key: str) -> list[LiveMessage]:
        """Return the live messages for ``key`` and empty its bucket."""
        current = self._clock()
        with self._lock:
            bucket = self._buckets.pop(key, [])
        return [message for message in bucket if message.is_live(current)]

    def peek(self, key: str) -> list[LiveMessage]:
        """Return the live messages for ``key`` without removing anything."""
        current = self._clock()
        with self._lock:
            bucket = list(self._buckets.get(key, []))
        return [message for message in bucket if message.is_live(current)]

    def ack(self, key: str, message_id: str) -> bool:
        """Remove one message by id. Returns True if something was removed."""
        with self._lock:
            bucket = self._buckets.get(key)
            if not bucket:
                return False
            remaining = [message for message in bucket if message.id != message_id]
            if len(remaining) == len(bucket):
                return False
            if remaining:
                self._buckets[key] = remaining
            else:
                del self._buckets[key]
            return True

    def clean_expired(self) -> None:
        """Drop expired messages from every bucket, and buckets left empty."""
        current = self._clock()
        dropped = 0
        with self._lock:
            for key in list(self._buckets):
                bucket = self._buckets[key]
                remaining = [m for m in bucket if m.is_live(current)]
                dropped += len(bucket) - len(remaining)
                if remaining:
                    self._buckets[key] = remaining
                else:
                    del self._buckets[key]
        if dropped:
            logger.debug("Dropped %d expired live messages", dropped)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._buckets)

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)
