from __future__ import annotations

import asyncio
import time

__all__ = ["RequestDelayManager"]


class RequestDelayManager:
    """Paces provider requests so that consecutive calls are ``delay_ms`` apart.

    Runs are sequential, so no locking is needed: :py:meth:`wait` sleeps until
    the next request slot and then books the one after it.
    """

    def __init__(self, delay_ms: int):
        self.delay_seconds = max(delay_ms / 1000.0, 0.0)
        self.requests = 0
        self._next_slot: float = 0.0

    async def wait(self) -> None:
        self.requests += 1
        if self.delay_seconds <= 0:
            return

        remaining = self._next_slot - time.monotonic()
        if remaining > 0:
            await asyncio.sleep(remaining)
        self._next_slot = time.monotonic() + self.delay_seconds
