"""In-process FIFO mutual exclusion for the diary file.

The gate is an asyncio primitive: waiters suspend on a future rather than
blocking a thread, and ownership passes to waiters strictly in arrival order.
It does not protect against other processes.
"""

import asyncio
import logging
from collections import deque
from contextlib import asynccontextmanager
from typing import AsyncIterator

logger = logging.getLogger(__name__)


class GateToken:
    """Proof of ownership of a Gate. Call release() exactly once."""

    def __init__(self, gate: "Gate"):
        self._gate = gate

    def release(self) -> None:
        self._gate._release()


class Gate:
    """First-come-first-served lock handing ownership directly to the next waiter."""

    def __init__(self):
        self._held = False
        self._waiters: deque[asyncio.Future] = deque()

    @property
    def held(self) -> bool:
        return self._held

    @property
    def waiting(self) -> int:
        return sum(1 for w in self._waiters if not w.done())

    async def acquire(self) -> GateToken:
        """Wait for exclusive ownership and return its token."""
        if not self._held:
            self._held = True
            return GateToken(self)

        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        logger.debug(f"Gate busy, queued behind {len(self._waiters) - 1} waiter(s)")
        try:
            return await waiter
        except asyncio.CancelledError:
            # Cancelled after ownership was handed over: pass it on
            if waiter.done() and not waiter.cancelled():
                self._release()
            raise

    def _release(self) -> None:
        while self._waiters:
            waiter = self._waiters.popleft()
            # Skip waiters cancelled while queued
            if waiter.done():
                continue
            # Ownership transfers; held stays True
            waiter.set_result(GateToken(self))
            logger.debug("Gate handed to next waiter")
            return
        self._held = False

    @asynccontextmanager
    async def hold(self) -> AsyncIterator[GateToken]:
        """Hold the gate for the duration of an async with block."""
        token = await self.acquire()
        try:
            yield token
        finally:
            token.release()


_shared_gate: Gate | None = None


def shared_gate() -> Gate:
    """The process-wide gate guarding the diary file, created on first use."""
    global _shared_gate
    if _shared_gate is None:
        _shared_gate = Gate()
    return _shared_gate
