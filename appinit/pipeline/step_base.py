"""Step interface used by the pipeline engine and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable
from typing import Any

from ..domain.flags import Condition, FlagSource
from ..domain.state import ProgressState


class Step(ABC):
    """One unit of launch-time work.

    A step never touches the progress cell. ``run`` yields the states it wants
    shown and the engine applies them, one at a time, in order. Work between
    yields (timers, I/O, waiting for the user) is awaited inside ``run``.
    """

    def __init__(self, name: str, *, flags: FlagSource, when: Condition | None = None) -> None:
        self.name = name
        self.flags = flags
        self.when = when if when is not None else Condition.always()

    def should_run(self) -> bool:
        """Evaluate eligibility against the injected flags, at call time."""
        return self.when.evaluate(self.flags)

    @abstractmethod
    def run(self) -> AsyncIterator[ProgressState]:
        """Yield progress-state transitions while performing the step's work."""

    def start_if_eligible(self) -> AsyncIterator[ProgressState] | None:
        """Return the transition stream, or None when the step is skipped."""
        if not self.should_run():
            return None
        return self.run()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} when={self.when.describe()}>"


StepFactory = Callable[[Any, FlagSource], Step]

__all__ = ["Step", "StepFactory"]
