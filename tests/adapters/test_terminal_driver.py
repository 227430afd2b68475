"""Adapter tests for rendering and the terminal driver."""

from __future__ import annotations

import asyncio
import io
import threading
import time

import pytest

from appinit.app.driver import drive_terminal
from appinit.app.render import LOADING_TEXT, LOGO_TEXT, render_text
from appinit.domain.flags import StaticFlags
from appinit.domain.routes import ErrorRoute, Finished, ForceUpdate
from appinit.domain.state import BUSY, IDLE, Routed
from appinit.pipeline.steps import OnboardingStep
from appinit.presets import make_instant_launch_deck
from appinit.services import LaunchSession, build_default_launch_service


pytestmark = pytest.mark.adapter


def test_each_state_renders_distinctly() -> None:
    texts = [
        render_text(IDLE),
        render_text(BUSY),
        render_text(Routed(Finished())),
        render_text(Routed(ErrorRoute())),
        render_text(Routed(ForceUpdate())),
    ]
    assert texts[:2] == [LOGO_TEXT, LOADING_TEXT]
    assert len(set(texts)) == len(texts)
    with pytest.raises(TypeError):
        render_text("idle")  # type: ignore[arg-type]


def test_prompt_resumes_call_to_action_once_line_is_read() -> None:
    lines: list[str] = []

    def read_line() -> str:
        lines.append("\n")
        return "\n"

    out = io.StringIO()
    session = build_default_launch_service().prepare(make_instant_launch_deck())

    result = asyncio.run(drive_terminal(session, out=out, read_line=read_line))

    assert result.ok
    assert lines == ["\n"]
    printed = out.getvalue().splitlines()
    assert printed[0] == LOGO_TEXT
    assert "[ Press to continue ]" in printed


def test_cancel_at_prompt_does_not_wait_for_blocked_read() -> None:
    release = threading.Event()
    # frees the reader eventually so a regression fails instead of hanging
    timer = threading.Timer(10.0, release.set)
    timer.daemon = True
    timer.start()

    def read_line() -> str:
        release.wait()
        return "\n"

    async def scenario() -> LaunchSession:
        session = LaunchSession([OnboardingStep("onboarding", flags=StaticFlags({}))])
        task = asyncio.ensure_future(drive_terminal(session, out=io.StringIO(), read_line=read_line))
        while session.pending_action() is None:
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        return session

    t0 = time.perf_counter()
    try:
        session = asyncio.run(scenario())
    finally:
        elapsed = time.perf_counter() - t0
        release.set()
        timer.cancel()

    assert elapsed < 5.0
    assert session.result is None
    assert session.cell.sealed
