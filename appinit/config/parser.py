"""Launch-deck loading and parsing utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..domain.flags import DEFAULT_FLAGS, Condition
from ..domain.routes import ANNOUNCE_ROUTES
from ..errors import DeckError
from .deck_models import (
    AnnounceStepConfig,
    FetchStepConfig,
    ForceUpdateStepConfig,
    LaunchDeck,
    OnboardingStepConfig,
    StepConfig,
)
from .validators import (
    as_list,
    as_mapping,
    ensure_choice,
    ensure_nonnegative,
    opt_mapping,
    required,
    to_bool,
    to_float,
    to_name,
)

STEP_TYPES = ("fetch", "announce", "onboarding", "force_update")


def load_deck(deck_path: str | Path) -> dict[str, Any]:
    """Load YAML launch deck from file."""
    path = Path(deck_path)
    if not path.exists():
        raise DeckError(f"Deck file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DeckError(f"Failed to parse YAML deck: {path}") from exc

    if payload is None:
        raise DeckError(f"Deck is empty: {path}")
    try:
        return as_mapping(payload, "deck")
    except ValueError as exc:
        raise DeckError(str(exc)) from exc


def parse_flags(deck: Mapping[str, Any], overrides: Mapping[str, bool] | None = None) -> dict[str, bool]:
    """Merge deck flags over the defaults, then apply overrides."""
    flags = dict(DEFAULT_FLAGS)
    for key, value in opt_mapping(deck.get("flags"), "deck.flags").items():
        flags[to_name(key, "key", "deck.flags")] = to_bool(value, str(key), "deck.flags")
    for key, value in (overrides or {}).items():
        if key not in flags:
            known = ", ".join(sorted(flags))
            raise ValueError(f"Cannot override unknown flag '{key}'. Known flags: {known}.")
        flags[key] = bool(value)
    return flags


def parse_condition(value: Any, context: str, flags: Mapping[str, bool]) -> Condition:
    """Parse ``when``: a bool, a flag name, or ``not <flag>``."""
    if value is None:
        return Condition.always()
    if isinstance(value, bool):
        return Condition.always() if value else Condition.never()

    text = to_name(value, "when", context)
    negate = False
    if text.startswith("not "):
        negate = True
        text = text[4:].strip()
    if text not in flags:
        known = ", ".join(sorted(flags)) or "(none)"
        raise ValueError(f"{context}.when refers to unknown flag '{text}'. Known flags: {known}.")
    return Condition.unless_flag(text) if negate else Condition.on_flag(text)


def _delay(step: Mapping[str, Any], default: float, context: str) -> float:
    delay_s = to_float(step.get("delay_s", default), "delay_s", context)
    return ensure_nonnegative(f"{context}.delay_s", delay_s)


def parse_step_config(step: Mapping[str, Any], idx: int, flags: Mapping[str, bool]) -> StepConfig:
    """Parse one raw step mapping into its typed config."""
    context = f"steps[{idx}]"
    stype = ensure_choice(f"{context}.type", required(step, "type", context), STEP_TYPES)
    name = to_name(step.get("name", f"{stype}-{idx}"), "name", context)

    if stype == "fetch":
        return FetchStepConfig(
            name=name,
            when=parse_condition(step.get("when"), context, flags),
            delay_s=_delay(step, 1.0, context),
        )
    if stype == "announce":
        route = ensure_choice(f"{context}.route", step.get("route", "finished"), tuple(ANNOUNCE_ROUTES))
        message = step.get("message")
        return AnnounceStepConfig(
            name=name,
            when=parse_condition(step.get("when"), context, flags),
            route=route,  # type: ignore[arg-type]
            message=None if message is None else str(message),
            delay_s=_delay(step, 1.4, context),
        )
    if stype == "onboarding":
        return OnboardingStepConfig(
            name=name,
            when=parse_condition(step.get("when"), context, flags),
            title=str(step.get("title", "This is onboarding")),
            button=str(step.get("button", "Press to continue")),
        )
    when_raw = step.get("when", "needs_update")
    return ForceUpdateStepConfig(
        name=name,
        when=parse_condition(when_raw, context, flags),
        message=str(step.get("message", "Force Update")),
    )


def parse_step_configs(deck: Mapping[str, Any], flags: Mapping[str, bool]) -> list[StepConfig]:
    """Parse deck steps into typed step configs, in deck order."""
    raw_steps = as_list(required(deck, "steps", "deck"), "deck.steps")
    typed: list[StepConfig] = []
    names: set[str] = set()
    for idx, raw in enumerate(raw_steps):
        cfg = parse_step_config(as_mapping(raw, f"steps[{idx}]"), idx, flags)
        if cfg.name in names:
            raise ValueError(f"steps[{idx}].name '{cfg.name}' is used by an earlier step.")
        names.add(cfg.name)
        typed.append(cfg)
    return typed


def parse_deck(deck: Mapping[str, Any], *, flag_overrides: Mapping[str, bool] | None = None) -> LaunchDeck:
    """Validate a deck payload and return the typed LaunchDeck."""
    try:
        payload = as_mapping(deck, "deck")
        flags = parse_flags(payload, flag_overrides)
        steps = parse_step_configs(payload, flags)
    except (TypeError, ValueError) as exc:
        raise DeckError(str(exc)) from exc
    return LaunchDeck(flags=flags, steps=tuple(steps))


def parse_flag_assignment(text: str) -> tuple[str, bool]:
    """Parse a ``NAME=BOOL`` command-line override."""
    name, sep, value = str(text).partition("=")
    if not sep:
        raise DeckError(f"Flag override must look like NAME=BOOL, got '{text}'.")
    try:
        return to_name(name, "name", "--flag"), to_bool(value, name.strip(), "--flag")
    except ValueError as exc:
        raise DeckError(str(exc)) from exc
