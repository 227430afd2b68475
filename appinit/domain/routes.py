"""Route payloads shown by the presentation layer while a step is routed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .resume import ResumeSignal


@dataclass(frozen=True)
class CallToAction:
    """Screen that waits for the user; pressing the control resumes the pipeline."""

    signal: ResumeSignal = field(compare=False)
    title: str = "This is onboarding"
    button: str = "Press to continue"

    kind = "cta"
    terminal = False
    halts = False

    def resume(self) -> bool:
        return self.signal.resume()


@dataclass(frozen=True)
class Finished:
    """Success flash shown near the end of the launch sequence."""

    message: str = "WOOOOO YOU DID IT!!!"

    kind = "finished"
    terminal = True
    halts = False


@dataclass(frozen=True)
class ErrorRoute:
    message: str = "Something went wrong"

    kind = "error"
    terminal = True
    halts = True


@dataclass(frozen=True)
class ForceUpdate:
    message: str = "Force Update"

    kind = "force_update"
    terminal = True
    halts = True


Route = Union[CallToAction, Finished, ErrorRoute, ForceUpdate]

ANNOUNCE_ROUTES: dict[str, type] = {
    "finished": Finished,
    "error": ErrorRoute,
    "force_update": ForceUpdate,
}


def build_announce_route(kind: str, message: str | None = None) -> Route:
    """Build a non-interactive route from its kind name."""
    try:
        route_cls = ANNOUNCE_ROUTES[kind]
    except KeyError:
        supported = ", ".join(ANNOUNCE_ROUTES)
        raise ValueError(f"route must be one of: {supported}. Got '{kind}'.") from None
    if message is None:
        return route_cls()
    return route_cls(message=message)


__all__ = [
    "ANNOUNCE_ROUTES",
    "CallToAction",
    "ErrorRoute",
    "Finished",
    "ForceUpdate",
    "Route",
    "build_announce_route",
]
