"""Typed models for launch-deck configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Union

from ..domain.flags import Condition


@dataclass(frozen=True)
class FetchStepConfig:
    """Simulated fetch: busy indicator for ``delay_s`` seconds."""

    name: str
    type: Literal["fetch"] = "fetch"
    when: Condition = field(default_factory=Condition.always)
    delay_s: float = 1.0


@dataclass(frozen=True)
class AnnounceStepConfig:
    """Show a route for ``delay_s`` seconds, then return to idle."""

    name: str
    type: Literal["announce"] = "announce"
    when: Condition = field(default_factory=Condition.always)
    route: Literal["finished", "error", "force_update"] = "finished"
    message: str | None = None
    delay_s: float = 1.4


@dataclass(frozen=True)
class OnboardingStepConfig:
    """Show a call-to-action and wait for the user to continue."""

    name: str
    type: Literal["onboarding"] = "onboarding"
    when: Condition = field(default_factory=Condition.always)
    title: str = "This is onboarding"
    button: str = "Press to continue"


@dataclass(frozen=True)
class ForceUpdateStepConfig:
    """Show the update-required screen and stop the launch."""

    name: str
    type: Literal["force_update"] = "force_update"
    when: Condition = field(default_factory=lambda: Condition.on_flag("needs_update"))
    message: str = "Force Update"


StepConfig = Union[FetchStepConfig, AnnounceStepConfig, OnboardingStepConfig, ForceUpdateStepConfig]


@dataclass(frozen=True)
class LaunchDeck:
    """Parsed launch deck: flag values plus the ordered step configs."""

    flags: Mapping[str, bool]
    steps: tuple[StepConfig, ...] = ()
