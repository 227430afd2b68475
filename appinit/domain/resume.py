"""Single-slot resume channel used by steps that wait for the user."""

from __future__ import annotations

import asyncio
import logging

from ..errors import ResumeCancelled

logger = logging.getLogger(__name__)


class ResumeSignal:
    """At-most-once signal that unblocks a suspended step.

    Must be created inside a running event loop. ``resume`` and ``cancel`` are
    loop-thread calls; other threads use ``resume_threadsafe``. Resuming before
    anyone waits is latched, so ``wait`` then returns immediately.
    """

    def __init__(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._future: asyncio.Future[None] = self._loop.create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    @property
    def resumed(self) -> bool:
        return (
            self._future.done()
            and not self._future.cancelled()
            and self._future.exception() is None
        )

    def resume(self) -> bool:
        """Resolve the signal. Returns False when it was already resolved."""
        if self._future.done():
            logger.debug("Ignoring repeated resume on %r", self)
            return False
        self._future.set_result(None)
        return True

    def resume_threadsafe(self) -> None:
        self._loop.call_soon_threadsafe(self.resume)

    def cancel(self, reason: str = "resume signal cancelled") -> bool:
        """Fail the pending wait with ResumeCancelled."""
        if self._future.done():
            return False
        self._future.set_exception(ResumeCancelled(reason))
        return True

    async def wait(self) -> None:
        await self._future

    def __repr__(self) -> str:
        if not self._future.done():
            status = "pending"
        elif self.resumed:
            status = "resumed"
        else:
            status = "cancelled"
        return f"<ResumeSignal {status}>"


__all__ = ["ResumeSignal"]
