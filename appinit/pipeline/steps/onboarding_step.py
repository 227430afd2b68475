"""Onboarding step: shows a call-to-action and waits for the user."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable

from ...config.deck_models import OnboardingStepConfig
from ...domain.flags import Condition, FlagSource
from ...domain.resume import ResumeSignal
from ...domain.routes import CallToAction
from ...domain.state import ProgressState, Routed
from ..step_base import Step

logger = logging.getLogger(__name__)


class OnboardingStep(Step):
    """Yield a call-to-action route and suspend until its signal resumes.

    The wait has no timeout. ``on_signal`` is called with each new signal,
    before the route is shown, so a host can hold on to it.
    """

    def __init__(
        self,
        name: str,
        *,
        flags: FlagSource,
        when: Condition | None = None,
        title: str = "This is onboarding",
        button: str = "Press to continue",
        on_signal: Callable[[ResumeSignal], None] | None = None,
    ) -> None:
        super().__init__(name, flags=flags, when=when)
        self.title = title
        self.button = button
        self.on_signal = on_signal

    async def run(self) -> AsyncIterator[ProgressState]:
        signal = ResumeSignal()
        if self.on_signal is not None:
            self.on_signal(signal)
        yield Routed(CallToAction(signal, title=self.title, button=self.button))
        logger.debug("Step %s waiting for user action", self.name)
        await signal.wait()
        logger.debug("Step %s resumed", self.name)


def build_onboarding_step(config: OnboardingStepConfig, flags: FlagSource) -> OnboardingStep:
    return OnboardingStep(config.name, flags=flags, when=config.when, title=config.title, button=config.button)
