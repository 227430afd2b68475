"""Launch progress state and the single slot that holds it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from .routes import Route


@dataclass(frozen=True)
class Idle:
    """Nothing in progress; the presentation layer shows its resting content."""

    kind = "idle"


@dataclass(frozen=True)
class Busy:
    """Work in progress; the presentation layer shows a loading indicator."""

    kind = "busy"


@dataclass(frozen=True)
class Routed:
    """The presentation layer shows the content described by ``route``."""

    route: Route

    kind = "routed"


ProgressState = Union[Idle, Busy, Routed]
Listener = Callable[[ProgressState], None]

IDLE = Idle()
BUSY = Busy()


def is_halting(state: ProgressState) -> bool:
    """Return True when ``state`` shows a route the launch cannot continue past."""
    return isinstance(state, Routed) and bool(state.route.halts)


class ProgressCell:
    """Mutable slot holding the current ProgressState.

    Writes are total overwrites. Listeners are called synchronously after each
    write, in subscription order. A sealed cell rejects further writes.
    """

    def __init__(self, initial: ProgressState = IDLE) -> None:
        self._current: ProgressState = initial
        self._listeners: list[Listener] = []
        self._mutations = 0
        self._sealed = False

    @property
    def current(self) -> ProgressState:
        return self._current

    @property
    def mutations(self) -> int:
        return self._mutations

    @property
    def sealed(self) -> bool:
        return self._sealed

    def set(self, state: ProgressState) -> None:
        if self._sealed:
            raise RuntimeError(f"progress cell is sealed; rejected {state!r}")
        self._current = state
        self._mutations += 1
        for listener in tuple(self._listeners):
            listener(state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def seal(self) -> None:
        self._sealed = True


__all__ = [
    "BUSY",
    "IDLE",
    "Busy",
    "Idle",
    "Listener",
    "ProgressCell",
    "ProgressState",
    "Routed",
    "is_halting",
]
