"""Unit tests for config validators."""

from __future__ import annotations

import pytest

from appinit.config.validators import as_mapping, ensure_choice, ensure_nonnegative, required, to_bool, to_float


pytestmark = pytest.mark.unit


def test_as_mapping_and_required() -> None:
    payload = as_mapping({"a": 1}, "ctx")
    assert required(payload, "a", "ctx") == 1


def test_required_raises() -> None:
    with pytest.raises(ValueError, match="Missing required key"):
        required({}, "missing", "ctx")


def test_numeric_converters_raise_contextual_error() -> None:
    with pytest.raises(ValueError, match="ctx.x must be a number"):
        to_float("abc", "x", "ctx")
    with pytest.raises(ValueError, match="ctx.x must be a number"):
        to_float(True, "x", "ctx")


@pytest.mark.parametrize(("raw", "expected"), [(True, True), ("yes", True), ("OFF", False), (0, False)])
def test_to_bool_accepts_common_spellings(raw: object, expected: bool) -> None:
    assert to_bool(raw, "flag", "ctx") is expected


def test_to_bool_rejects_other_values() -> None:
    with pytest.raises(ValueError, match="ctx.flag must be a boolean"):
        to_bool("maybe", "flag", "ctx")


def test_choice_and_nonnegative() -> None:
    assert ensure_choice("kind", "Fetch", ("fetch", "announce")) == "fetch"
    with pytest.raises(ValueError, match="kind must be one of: fetch, announce"):
        ensure_choice("kind", "other", ("fetch", "announce"))
    assert ensure_nonnegative("delay", 0.0) == 0.0
    with pytest.raises(ValueError, match="delay must be >= 0"):
        ensure_nonnegative("delay", -1.0)
