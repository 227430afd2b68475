"""Terminal driver: prints transitions and answers call-to-action screens."""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from collections.abc import Callable
from typing import TextIO

from ..domain.routes import CallToAction
from ..domain.state import ProgressState, Routed
from ..services import LaunchResult, LaunchSession
from .render import render_text

logger = logging.getLogger(__name__)


def _call_to_action(state: ProgressState) -> CallToAction | None:
    if isinstance(state, Routed) and isinstance(state.route, CallToAction):
        return state.route
    return None


def attach_printer(session: LaunchSession, out: TextIO | None = None) -> Callable[[], None]:
    """Print every state the session shows. Returns the unsubscribe callable."""
    stream = sys.stdout if out is None else out

    def _print(state: ProgressState) -> None:
        print(render_text(state), file=stream, flush=True)

    return session.cell.subscribe(_print)


def attach_auto_continue(session: LaunchSession) -> Callable[[], None]:
    """Resume every call-to-action on the next loop iteration."""
    loop = asyncio.get_running_loop()

    def _on_state(state: ProgressState) -> None:
        action = _call_to_action(state)
        if action is not None:
            loop.call_soon(action.resume)

    return session.cell.subscribe(_on_state)


def attach_prompt(session: LaunchSession, read_line: Callable[[], str] | None = None) -> Callable[[], None]:
    """Resume a call-to-action once a line is read, off the event loop.

    The line is read on a daemon thread, so a cancelled launch never waits for
    a blocked read. Answers that arrive after the signal settled are ignored.
    """
    loop = asyncio.get_running_loop()
    reader = sys.stdin.readline if read_line is None else read_line

    def _on_state(state: ProgressState) -> None:
        action = _call_to_action(state)
        if action is None:
            return

        def _answered(error: Exception | None) -> None:
            if action.signal.done:
                return
            if error is not None:
                action.signal.cancel(f"reading user input failed: {error}")
                return
            action.resume()

        def _read() -> None:
            error: Exception | None = None
            try:
                reader()
            except Exception as exc:
                error = exc
            try:
                loop.call_soon_threadsafe(_answered, error)
            except RuntimeError:
                logger.debug("Event loop closed before input arrived; dropping answer")

        threading.Thread(target=_read, name=f"prompt-{action.title}", daemon=True).start()

    return session.cell.subscribe(_on_state)


async def drive_terminal(
    session: LaunchSession,
    *,
    auto_continue: bool = False,
    out: TextIO | None = None,
    read_line: Callable[[], str] | None = None,
) -> LaunchResult:
    """Run ``session`` while rendering it to a text stream."""
    stream = sys.stdout if out is None else out
    attach_printer(session, stream)
    if auto_continue:
        attach_auto_continue(session)
    else:
        attach_prompt(session, read_line)
    print(render_text(session.cell.current), file=stream, flush=True)
    return await session.run()
