"""Unit tests for launch-deck parsing."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from appinit.config import (
    AnnounceStepConfig,
    FetchStepConfig,
    ForceUpdateStepConfig,
    OnboardingStepConfig,
    load_deck,
    parse_deck,
    parse_flag_assignment,
)
from appinit.domain.flags import Condition
from appinit.errors import DeckError
from appinit.presets import make_default_launch_deck


pytestmark = pytest.mark.unit


def test_default_preset_parses_in_order() -> None:
    deck = parse_deck(make_default_launch_deck())

    assert [type(cfg) for cfg in deck.steps] == [
        FetchStepConfig,
        AnnounceStepConfig,
        OnboardingStepConfig,
        FetchStepConfig,
    ]
    assert [cfg.name for cfg in deck.steps] == [
        "setup-async-one",
        "did-finish",
        "show-onboarding",
        "setup-async-two",
    ]
    assert deck.steps[0].delay_s == 2.0
    assert deck.steps[0].when == Condition.on_flag("fetch_one")


def test_bundled_deck_file_parses(deck_dir: Path) -> None:
    deck = parse_deck(load_deck(deck_dir / "launch_default.yaml"))

    assert isinstance(deck.steps[0], ForceUpdateStepConfig)
    assert deck.flags["needs_update"] is False
    assert len(deck.steps) == 5


def test_defaults_names_and_conditions() -> None:
    deck = parse_deck(
        {
            "flags": {"beta": "yes"},
            "steps": [
                {"type": "fetch"},
                {"type": "announce", "when": "not beta", "route": "error", "message": "nope"},
                {"type": "onboarding", "when": False},
                {"type": "force_update"},
            ],
        }
    )

    fetch, announce, onboarding, force = deck.steps
    assert fetch.name == "fetch-0"
    assert fetch.when == Condition.always()
    assert announce.when == Condition.unless_flag("beta")
    assert announce.route == "error"
    assert announce.message == "nope"
    assert onboarding.when == Condition.never()
    assert force.when == Condition.on_flag("needs_update")
    assert deck.flags["beta"] is True
    assert deck.flags["fetch_one"] is True


def test_empty_step_list_is_allowed() -> None:
    assert parse_deck({"steps": []}).steps == ()


def test_flag_overrides_win_over_deck_values() -> None:
    deck = parse_deck({"flags": {"fetch_one": True}, "steps": []}, flag_overrides={"fetch_one": False})
    assert deck.flags["fetch_one"] is False
    with pytest.raises(DeckError, match="unknown flag 'ghost'"):
        parse_deck({"steps": []}, flag_overrides={"ghost": True})


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({}, "Missing required key 'steps'"),
        ({"steps": {}}, "deck.steps must be a list"),
        ({"steps": ["fetch"]}, r"steps\[0\] must be a mapping"),
        ({"steps": [{"type": "teleport"}]}, r"steps\[0\].type must be one of"),
        ({"steps": [{"type": "fetch", "when": "ghost"}]}, "unknown flag 'ghost'"),
        ({"steps": [{"type": "fetch", "delay_s": -1}]}, r"steps\[0\].delay_s must be >= 0"),
        ({"steps": [{"type": "announce", "route": "cta"}]}, r"steps\[0\].route must be one of"),
        ({"steps": [{"type": "fetch", "name": "a"}, {"type": "fetch", "name": "a"}]}, "used by an earlier step"),
        ({"flags": {"x": "maybe"}, "steps": []}, "deck.flags.x must be a boolean"),
    ],
)
def test_invalid_decks_raise_deck_error(payload: dict, message: str) -> None:
    with pytest.raises(DeckError, match=message):
        parse_deck(payload)


def test_load_deck_errors(tmp_path: Path) -> None:
    with pytest.raises(DeckError, match="not found"):
        load_deck(tmp_path / "missing.yaml")

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(DeckError, match="empty"):
        load_deck(empty)

    listing = tmp_path / "list.yaml"
    listing.write_text(yaml.safe_dump([1, 2]), encoding="utf-8")
    with pytest.raises(DeckError, match="deck must be a mapping"):
        load_deck(listing)


def test_parse_flag_assignment() -> None:
    assert parse_flag_assignment("show_onboarding=false") == ("show_onboarding", False)
    with pytest.raises(DeckError, match="NAME=BOOL"):
        parse_flag_assignment("show_onboarding")
