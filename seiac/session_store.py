"""
In-memory coordination state for live evaluation sessions.
One store owns the message bus and the block registry for this process.
Data is lost on server restart and is not shared between worker processes.
"""
from __future__ import annotations

import logging
from typing import Callable

from seiac.live_blocks import LiveBlockRegistry
from seiac.live_bus import LiveMessageBus, now_ms

logger = logging.getLogger(__name__)


def make_session_key(unique_code: str, email: str) -> str:
    """Build the coordination key for one participant of one attempt."""
    return f"{unique_code.strip()}|{email.strip().lower()}"


class LiveCoordinationStore:
    """Holds the live message bus and block registry behind one injectable object."""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self.clock = clock
        self.bus = LiveMessageBus(clock=clock)
        self.blocks = LiveBlockRegistry(clock=clock)

    def sweep(self) -> dict[str, int]:
        """Purge expired messages and blocks. Returns what is left."""
        self.bus.clean_expired()
        active_blocks = self.blocks.get_all_blocks()
        summary = {"messageKeys": len(self.bus), "activeBlocks": len(active_blocks)}
        logger.debug("Live store sweep: %s", summary)
        return summary


# Global instance
live_store = LiveCoordinationStore()
