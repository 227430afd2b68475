"""Pipeline execution engine."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from contextlib import aclosing
from dataclasses import dataclass

from ..domain.state import ProgressCell, is_halting
from ..errors import StepFailed
from .step_base import Step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepReport:
    """Outcome of one step reached by the sequence."""

    index: int
    name: str
    ran: bool
    transitions: int = 0
    elapsed_s: float = 0.0
    halted: bool = False


class StepSequence:
    """One-shot async iterator that runs one step per ``__anext__``.

    Steps run strictly in order and only one is active at a time. The sequence
    stops for good after a failure, after a step that leaves a halting route on
    screen, or after cancellation.
    """

    def __init__(self, steps: Sequence[Step], cell: ProgressCell) -> None:
        self._steps = tuple(steps)
        self._cell = cell
        self._index = 0
        self._stopped = False

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def position(self) -> int:
        return self._index

    def __aiter__(self) -> StepSequence:
        return self

    async def __anext__(self) -> StepReport:
        if self._stopped or self._index >= len(self._steps):
            self._stopped = True
            raise StopAsyncIteration

        idx = self._index
        self._index += 1
        step = self._steps[idx]
        try:
            report = await self._run_step(idx, step)
        except asyncio.CancelledError:
            self._stopped = True
            logger.info("Step %d (%s) cancelled", idx, step.name)
            raise
        except Exception as exc:
            self._stopped = True
            logger.error("Step %d (%s) failed: %s", idx, step.name, exc)
            raise StepFailed(idx, step.name, exc) from exc

        if report.halted:
            self._stopped = True
        return report

    async def _run_step(self, idx: int, step: Step) -> StepReport:
        stream = step.start_if_eligible()
        if stream is None:
            logger.info("Skipping step %d (%s)", idx, step.name)
            return StepReport(index=idx, name=step.name, ran=False)

        logger.info("Running step %d (%s)", idx, step.name)
        t0 = time.perf_counter()
        transitions = 0
        async with aclosing(stream) as states:
            async for state in states:
                logger.debug("Step %d (%s) -> %r", idx, step.name, state)
                self._cell.set(state)
                transitions += 1
        elapsed = time.perf_counter() - t0

        halted = transitions > 0 and is_halting(self._cell.current)
        logger.info("Completed step %d (%s) in %.3f s", idx, step.name, elapsed)
        return StepReport(
            index=idx,
            name=step.name,
            ran=True,
            transitions=transitions,
            elapsed_s=elapsed,
            halted=halted,
        )


async def run(
    steps: Sequence[Step],
    cell: ProgressCell,
    *,
    on_done: Callable[[], None] | None = None,
    on_step: Callable[[StepReport], None] | None = None,
) -> list[StepReport]:
    """Run launch steps sequentially, applying their transitions to ``cell``.

    Raises StepFailed on the first failing step. ``on_done`` fires once, after
    the last step, unless a step halted the launch.
    """
    sequence = StepSequence(steps, cell)
    logger.info("Launch pipeline started (%d steps)", len(sequence))

    reports: list[StepReport] = []
    async for report in sequence:
        reports.append(report)
        if on_step is not None:
            on_step(report)

    if reports and reports[-1].halted:
        logger.warning("Launch pipeline halted by step %d (%s)", reports[-1].index, reports[-1].name)
        return reports

    logger.info("Launch pipeline finished")
    if on_done is not None:
        on_done()
    return reports
