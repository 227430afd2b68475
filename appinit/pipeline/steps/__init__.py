"""Default step factory registry mapping."""

from __future__ import annotations

from ..step_base import StepFactory
from .announce_step import AnnounceStep, build_announce_step
from .fetch_step import BusyStep, build_fetch_step
from .force_update_step import ForceUpdateStep, build_force_update_step
from .onboarding_step import OnboardingStep, build_onboarding_step


def build_default_step_factories() -> dict[str, StepFactory]:
    """Return default step-type -> factory mapping."""
    return {
        "fetch": build_fetch_step,
        "announce": build_announce_step,
        "onboarding": build_onboarding_step,
        "force_update": build_force_update_step,
    }


__all__ = [
    "AnnounceStep",
    "BusyStep",
    "ForceUpdateStep",
    "OnboardingStep",
    "build_default_step_factories",
]
