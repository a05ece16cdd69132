"""
In-memory registry of temporary access suspensions for live evaluation sessions.
Keyed by the same composite session key as the message bus, stored separately.
"""
from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from seiac.live_bus import now_ms

DEFAULT_BLOCK_MINUTES = 10
MINUTE_MS = 60_000
MAX_BLOCK_MINUTES = 7 * 24 * 60


def clamp_block_minutes(minutes: float) -> float:
    """Bound a block length to between one minute and one week. NaN counts as the minimum."""
    if isinstance(minutes, float) and math.isnan(minutes):
        return 1
    return min(max(1, minutes), MAX_BLOCK_MINUTES)


@dataclass
class BlockRecord:
    key: str
    blocked_until: int  # epoch ms

    def to_dict(self) -> dict:
        return {"key": self.key, "blockedUntil": self.blocked_until}


@dataclass
class BlockStatus:
    blocked: bool
    remaining_ms: int = 0

    def to_dict(self) -> dict:
        return {"blocked": self.blocked, "remainingMs": self.remaining_ms}


class LiveBlockRegistry:
    """Thread-safe key -> deadline map with expiry checked on read."""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._blocks: dict[str, int] = {}
        self._lock = threading.Lock()

    def block_user(self, key: str, minutes: float = DEFAULT_BLOCK_MINUTES) -> BlockRecord:
        """Block ``key`` for at least one minute. Replaces any existing block."""
        until = self._clock() + int(clamp_block_minutes(minutes) * MINUTE_MS)
        with self._lock:
            self._blocks[key] = until
        return BlockRecord(key=key, blocked_until=until)

    def unblock_user(self, key: str) -> bool:
        with self._lock:
            return self._blocks.pop(key, None) is not None

    def is_user_blocked(self, key: str) -> BlockStatus:
        """Report whether ``key`` is blocked, purging its entry if it has lapsed."""
        current = self._clock()
        with self._lock:
            until: Optional[int] = self._blocks.get(key)
            if until is None:
                return BlockStatus(blocked=False)
            if until > current:
                return BlockStatus(blocked=True, remaining_ms=until - current)
            del self._blocks[key]
        return BlockStatus(blocked=False)

    def get_all_blocks(self) -> list[BlockRecord]:
        """List active blocks. Expired entries met during the scan are removed."""
        current = self._clock()
        active: list[BlockRecord] = []
        with self._lock:
            for key, until in list(self._blocks.items()):
                if until > current:
                    active.append(BlockRecord(key=key, blocked_until=until))
                else:
                    del self._blocks[key]
        return active
