"""Announce step: flashes a route, then returns to idle."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from ...config.deck_models import AnnounceStepConfig
from ...domain.flags import Condition, FlagSource
from ...domain.routes import Finished, Route, build_announce_route
from ...domain.state import IDLE, ProgressState, Routed
from ..step_base import Step


class AnnounceStep(Step):
    """Show ``route`` for ``delay_s`` seconds."""

    def __init__(
        self,
        name: str,
        *,
        flags: FlagSource,
        when: Condition | None = None,
        route: Route | None = None,
        delay_s: float = 1.4,
    ) -> None:
        super().__init__(name, flags=flags, when=when)
        self.route = route if route is not None else Finished()
        self.delay_s = float(delay_s)

    async def run(self) -> AsyncIterator[ProgressState]:
        yield Routed(self.route)
        await asyncio.sleep(self.delay_s)
        yield IDLE


def build_announce_step(config: AnnounceStepConfig, flags: FlagSource) -> AnnounceStep:
    return AnnounceStep(
        config.name,
        flags=flags,
        when=config.when,
        route=build_announce_route(config.route, config.message),
        delay_s=config.delay_s,
    )
