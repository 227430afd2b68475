"""Unit tests for the progress cell."""

from __future__ import annotations

import pytest

from appinit.domain.routes import CallToAction, ErrorRoute, Finished, ForceUpdate
from appinit.domain.state import BUSY, IDLE, ProgressCell, Routed, is_halting


pytestmark = pytest.mark.unit


def test_cell_starts_idle_and_overwrites() -> None:
    cell = ProgressCell()
    assert cell.current == IDLE
    assert cell.mutations == 0

    cell.set(BUSY)
    cell.set(Routed(Finished()))

    assert cell.current == Routed(Finished())
    assert cell.mutations == 2


def test_listeners_see_each_write_until_unsubscribed() -> None:
    cell = ProgressCell()
    seen: list[object] = []
    unsubscribe = cell.subscribe(seen.append)

    cell.set(BUSY)
    unsubscribe()
    cell.set(IDLE)
    unsubscribe()

    assert seen == [BUSY]


def test_sealed_cell_rejects_writes() -> None:
    cell = ProgressCell()
    cell.set(BUSY)
    cell.seal()

    with pytest.raises(RuntimeError, match="sealed"):
        cell.set(IDLE)
    assert cell.current == BUSY
    assert cell.sealed


def test_only_error_and_force_update_halt() -> None:
    assert is_halting(Routed(ErrorRoute()))
    assert is_halting(Routed(ForceUpdate()))
    assert not is_halting(Routed(Finished()))
    assert not is_halting(BUSY)
    assert not is_halting(IDLE)
    assert CallToAction.halts is False
