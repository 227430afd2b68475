"""Fetch step: shows the loading indicator while awaiting some work."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable

from ...config.deck_models import FetchStepConfig
from ...domain.flags import Condition, FlagSource
from ...domain.state import BUSY, IDLE, ProgressState
from ..step_base import Step

Work = Callable[[], Awaitable[object]]


class BusyStep(Step):
    """Show ``Busy``, await ``work`` (or sleep ``delay_s``), then go ``Idle``."""

    def __init__(
        self,
        name: str,
        *,
        flags: FlagSource,
        when: Condition | None = None,
        delay_s: float = 1.0,
        work: Work | None = None,
    ) -> None:
        super().__init__(name, flags=flags, when=when)
        self.delay_s = float(delay_s)
        self.work = work

    async def run(self) -> AsyncIterator[ProgressState]:
        yield BUSY
        if self.work is None:
            await asyncio.sleep(self.delay_s)
        else:
            await self.work()
        yield IDLE


def build_fetch_step(config: FetchStepConfig, flags: FlagSource) -> BusyStep:
    return BusyStep(config.name, flags=flags, when=config.when, delay_s=config.delay_s)
