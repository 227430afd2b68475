"""Shared fixtures: a step that records every call the engine makes."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest

from appinit.domain.flags import StaticFlags
from appinit.domain.state import BUSY, IDLE, ProgressState, Routed
from appinit.pipeline.step_base import Step


class RecordingStep(Step):
    """Step whose predicate and action append to a shared log."""

    def __init__(
        self,
        name: str,
        log: list[tuple],
        *,
        eligible: bool = True,
        error: Exception | None = None,
        states: tuple[ProgressState, ...] = (BUSY, IDLE),
    ) -> None:
        super().__init__(name, flags=StaticFlags({}))
        self.log = log
        self.eligible = eligible
        self.error = error
        self.states = states

    def should_run(self) -> bool:
        self.log.append((self.name, "should_run", self.eligible))
        return self.eligible

    async def run(self) -> AsyncIterator[ProgressState]:
        self.log.append((self.name, "run"))
        for state in self.states:
            yield state
            await asyncio.sleep(0)
        if self.error is not None:
            self.log.append((self.name, "failed"))
            raise self.error
        self.log.append((self.name, "resolved"))


def state_label(state: ProgressState) -> str:
    if isinstance(state, Routed):
        return state.route.kind
    return state.kind


@pytest.fixture
def step_log() -> list[tuple]:
    return []


@pytest.fixture
def make_step(step_log: list[tuple]) -> Callable[..., RecordingStep]:
    return functools.partial(RecordingStep, log=step_log)


@pytest.fixture
def label() -> Callable[[ProgressState], str]:
    return state_label


@pytest.fixture
def deck_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "decks"
