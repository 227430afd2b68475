"""Launch service built on top of pipeline primitives."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from ..config import LaunchDeck, load_deck, parse_deck
from ..domain.flags import FlagSource, StaticFlags
from ..domain.routes import CallToAction, ErrorRoute
from ..domain.state import ProgressCell, Routed
from ..errors import StepFailed
from ..pipeline.engine import StepReport
from ..pipeline.engine import run as run_pipeline
from ..pipeline.registry import StepRegistry, create_step_registry
from ..pipeline.step_base import Step, StepFactory
from ..pipeline.steps import build_default_step_factories

logger = logging.getLogger(__name__)

Outcome = Literal["completed", "failed", "halted"]


@dataclass(slots=True)
class LaunchResult:
    """Final outcome of one launch session."""

    outcome: Outcome
    reports: list[StepReport] = field(default_factory=list)
    error: StepFailed | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == "completed"

    @property
    def ran(self) -> list[str]:
        return [r.name for r in self.reports if r.ran]

    @property
    def skipped(self) -> list[str]:
        return [r.name for r in self.reports if not r.ran]


class LaunchSession:
    """Runs one launch pipeline against its own progress cell.

    Exactly one of ``on_done``, ``on_failed`` or ``on_halted`` fires, once. On
    failure the cell is switched to the error route. The cell is sealed when the
    session ends, so no state change can follow the final signal.
    """

    def __init__(
        self,
        steps: Sequence[Step],
        *,
        cell: ProgressCell | None = None,
        on_done: Callable[[], None] | None = None,
        on_failed: Callable[[StepFailed], None] | None = None,
        on_halted: Callable[[StepReport], None] | None = None,
    ) -> None:
        self.steps = tuple(steps)
        self.cell = cell if cell is not None else ProgressCell()
        self.on_done = on_done
        self.on_failed = on_failed
        self.on_halted = on_halted
        self.result: LaunchResult | None = None
        self._started = False
        self._task: asyncio.Task[LaunchResult] | None = None

    @property
    def started(self) -> bool:
        return self._started

    @property
    def finished(self) -> bool:
        return self.result is not None

    def pending_action(self) -> CallToAction | None:
        """Return the call-to-action currently shown, if any."""
        state = self.cell.current
        if isinstance(state, Routed) and isinstance(state.route, CallToAction):
            return state.route
        return None

    def resume(self) -> bool:
        """Resume the call-to-action on screen. False if none is pending."""
        action = self.pending_action()
        if action is None:
            return False
        return action.resume()

    def start(self) -> asyncio.Task[LaunchResult]:
        """Schedule ``run`` on the running loop and return its task."""
        if self._task is None:
            self._task = asyncio.ensure_future(self.run())
        return self._task

    def cancel(self) -> bool:
        if self._task is None:
            return False
        return self._task.cancel()

    async def run(self) -> LaunchResult:
        if self._started:
            raise RuntimeError("launch session already started")
        self._started = True

        reports: list[StepReport] = []
        try:
            await run_pipeline(self.steps, self.cell, on_step=reports.append)
        except StepFailed as exc:
            logger.error("Launch failed at step %d (%s)", exc.index, exc.name, exc_info=exc.cause)
            self.result = LaunchResult("failed", reports, exc)
            try:
                # listeners can raise on this write too; the session still ends
                self.cell.set(Routed(ErrorRoute()))
            finally:
                self.cell.seal()
                if self.on_failed is not None:
                    self.on_failed(exc)
            return self.result
        except asyncio.CancelledError:
            logger.info("Launch cancelled after %d step(s)", len(reports))
            self.cell.seal()
            raise

        self.cell.seal()
        if reports and reports[-1].halted:
            self.result = LaunchResult("halted", reports)
            if self.on_halted is not None:
                self.on_halted(reports[-1])
            return self.result

        self.result = LaunchResult("completed", reports)
        if self.on_done is not None:
            self.on_done()
        return self.result


@dataclass(slots=True)
class LaunchService:
    """Build launch steps through the configured registry and run them."""

    registry: StepRegistry

    def build_steps(self, deck: LaunchDeck, flags: FlagSource | None = None) -> tuple[Step, ...]:
        source = flags if flags is not None else StaticFlags(deck.flags)
        return self.registry.build_all(deck.steps, source)

    def prepare(
        self,
        deck: Mapping[str, Any] | LaunchDeck,
        *,
        flag_overrides: Mapping[str, bool] | None = None,
        flags: FlagSource | None = None,
        **callbacks: Any,
    ) -> LaunchSession:
        """Parse ``deck`` (if needed) and return an unstarted session."""
        parsed = deck if isinstance(deck, LaunchDeck) else parse_deck(deck, flag_overrides=flag_overrides)
        return LaunchSession(self.build_steps(parsed, flags), **callbacks)

    async def run_payload(
        self,
        deck: Mapping[str, Any] | LaunchDeck,
        *,
        flag_overrides: Mapping[str, bool] | None = None,
        **callbacks: Any,
    ) -> LaunchResult:
        """Run a launch from an in-memory deck payload."""
        session = self.prepare(deck, flag_overrides=flag_overrides, **callbacks)
        return await session.run()

    async def run_deck(self, deck_path: str | Path, **kwargs: Any) -> LaunchResult:
        return await self.run_payload(load_deck(deck_path), **kwargs)


def build_launch_service(factories: dict[str, StepFactory]) -> LaunchService:
    """Create LaunchService from explicit step factories."""
    return LaunchService(registry=create_step_registry(factories))


def build_default_launch_service() -> LaunchService:
    """Create LaunchService using default built-in step factories."""
    return build_launch_service(build_default_step_factories())
