"""Force-update step: shows the update-required screen and halts the launch."""

from __future__ import annotations

from collections.abc import AsyncIterator

from ...config.deck_models import ForceUpdateStepConfig
from ...domain.flags import Condition, FlagSource
from ...domain.routes import ForceUpdate
from ...domain.state import ProgressState, Routed
from ..step_base import Step


class ForceUpdateStep(Step):
    def __init__(
        self,
        name: str,
        *,
        flags: FlagSource,
        when: Condition | None = None,
        message: str = "Force Update",
    ) -> None:
        super().__init__(name, flags=flags, when=when)
        self.message = message

    async def run(self) -> AsyncIterator[ProgressState]:
        yield Routed(ForceUpdate(self.message))


def build_force_update_step(config: ForceUpdateStepConfig, flags: FlagSource) -> ForceUpdateStep:
    return ForceUpdateStep(config.name, flags=flags, when=config.when, message=config.message)
