"""Unit tests for the single-slot resume signal."""

from __future__ import annotations

import asyncio
import threading

import pytest

from appinit.domain.resume import ResumeSignal
from appinit.errors import ResumeCancelled


pytestmark = pytest.mark.unit


def test_resume_is_at_most_once() -> None:
    async def scenario() -> tuple[bool, bool, bool]:
        signal = ResumeSignal()
        first = signal.resume()
        second = signal.resume()
        await signal.wait()
        return first, second, signal.resumed

    assert asyncio.run(scenario()) == (True, False, True)


def test_wait_blocks_until_resumed() -> None:
    async def scenario() -> list[str]:
        events: list[str] = []
        signal = ResumeSignal()

        async def waiter() -> None:
            await signal.wait()
            events.append("resumed")

        task = asyncio.ensure_future(waiter())
        for _ in range(5):
            await asyncio.sleep(0)
        events.append("still waiting" if not task.done() else "done early")
        signal.resume()
        await task
        return events

    assert asyncio.run(scenario()) == ["still waiting", "resumed"]


def test_cancel_fails_the_wait() -> None:
    async def scenario() -> None:
        signal = ResumeSignal()
        waiter = asyncio.ensure_future(signal.wait())
        await asyncio.sleep(0)
        assert signal.cancel("screen closed")
        assert not signal.resume()
        with pytest.raises(ResumeCancelled, match="screen closed"):
            await waiter
        assert not signal.resumed
        assert "cancelled" in repr(signal)

    asyncio.run(scenario())


def test_resume_threadsafe_from_other_thread() -> None:
    async def scenario() -> bool:
        signal = ResumeSignal()
        thread = threading.Thread(target=signal.resume_threadsafe)
        thread.start()
        await asyncio.wait_for(signal.wait(), timeout=5.0)
        thread.join()
        return signal.resumed

    assert asyncio.run(scenario())


def test_signal_requires_running_loop() -> None:
    with pytest.raises(RuntimeError):
        ResumeSignal()
