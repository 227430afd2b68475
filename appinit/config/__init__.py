"""Typed config models and parsers."""

from .deck_models import (
    AnnounceStepConfig,
    FetchStepConfig,
    ForceUpdateStepConfig,
    LaunchDeck,
    OnboardingStepConfig,
    StepConfig,
)
from .parser import load_deck, parse_condition, parse_deck, parse_flag_assignment, parse_flags, parse_step_configs
from .validators import as_mapping, ensure_choice, ensure_nonnegative, opt_mapping, required, to_bool, to_float

__all__ = [
    "AnnounceStepConfig",
    "FetchStepConfig",
    "ForceUpdateStepConfig",
    "LaunchDeck",
    "OnboardingStepConfig",
    "StepConfig",
    "as_mapping",
    "ensure_choice",
    "ensure_nonnegative",
    "load_deck",
    "opt_mapping",
    "parse_condition",
    "parse_deck",
    "parse_flag_assignment",
    "parse_flags",
    "parse_step_configs",
    "required",
    "to_bool",
    "to_float",
]
