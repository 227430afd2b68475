"""Background launch runner and Streamlit session-state helpers."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any

from ...domain.state import ProgressState
from ...services import LaunchResult, LaunchSession

logger = logging.getLogger(__name__)

LAUNCH_KEY = "appinit_launch"


class BackgroundLaunch:
    """Run a LaunchSession on its own event loop in a daemon thread.

    The GUI thread only reads ``state``/``result`` and calls ``resume``/``stop``,
    which hop onto the launch loop.
    """

    def __init__(self, session: LaunchSession) -> None:
        self.session = session
        self.error: BaseException | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._ready = threading.Event()
        self._thread = threading.Thread(target=self._main, name="appinit-launch", daemon=True)

    @property
    def state(self) -> ProgressState:
        return self.session.cell.current

    @property
    def result(self) -> LaunchResult | None:
        return self.session.result

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def start(self, timeout: float = 5.0) -> None:
        self._thread.start()
        self._ready.wait(timeout)

    def _main(self) -> None:
        asyncio.run(self._run())

    async def _run(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._ready.set()
        try:
            await self.session.start()
        except asyncio.CancelledError:
            logger.info("Background launch cancelled")
        except Exception as exc:
            logger.exception("Background launch crashed")
            self.error = exc

    def resume(self) -> bool:
        """Resume the call-to-action on screen. False if none is pending."""
        action = self.session.pending_action()
        if action is None or self._loop is None:
            return False
        action.signal.resume_threadsafe()
        return True

    def stop(self) -> None:
        if self._loop is not None and self.running:
            self._loop.call_soon_threadsafe(self.session.cancel)

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)


def get_launch(store: Any) -> BackgroundLaunch | None:
    """Return the launch kept in ``store`` (``st.session_state``), if any."""
    launch = store.get(LAUNCH_KEY)
    if isinstance(launch, BackgroundLaunch):
        return launch
    return None


def set_launch(store: Any, launch: BackgroundLaunch) -> None:
    previous = get_launch(store)
    if previous is not None and previous is not launch:
        previous.stop()
    store[LAUNCH_KEY] = launch


def clear_launch(store: Any) -> None:
    previous = get_launch(store)
    if previous is not None:
        previous.stop()
    store.pop(LAUNCH_KEY, None)
