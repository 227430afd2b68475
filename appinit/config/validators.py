"""Shared config validation helpers."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off")


def as_mapping(value: Any, context: str) -> dict[str, Any]:
    """Require mapping value."""
    if not isinstance(value, dict):
        raise ValueError(f"{context} must be a mapping.")
    return value


def opt_mapping(value: Any, context: str) -> dict[str, Any]:
    """Return mapping or empty mapping for None."""
    if value is None:
        return {}
    return as_mapping(value, context)


def as_list(value: Any, context: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{context} must be a list.")
    return value


def required(mapping: Mapping[str, Any], key: str, context: str) -> Any:
    """Require mapping key existence."""
    if not isinstance(mapping, Mapping):
        raise ValueError(f"{context} must be a mapping.")
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context}.")
    return mapping[key]


def to_float(value: Any, key: str, context: str) -> float:
    """Convert value to float with contextual error message."""
    if isinstance(value, bool):
        raise ValueError(f"{context}.{key} must be a number, got {value!r}.")
    try:
        return float(value)
    except Exception as exc:
        raise ValueError(f"{context}.{key} must be a number, got {value!r}.") from exc


def to_bool(value: Any, key: str, context: str) -> bool:
    """Accept real booleans and the usual yes/no spellings."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"{context}.{key} must be a boolean, got {value!r}.")


def to_name(value: Any, key: str, context: str) -> str:
    """Require a non-empty string identifier."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{context}.{key} must be a non-empty string, got {value!r}.")
    return value.strip()


def ensure_choice(name: str, value: str, allowed: Sequence[str]) -> str:
    """Validate str choice and return normalized value."""
    val = str(value).lower()
    if val not in allowed:
        joined = ", ".join(allowed)
        raise ValueError(f"{name} must be one of: {joined}. Got '{val}'.")
    return val


def ensure_nonnegative(name: str, value: float) -> float:
    """Validate scalar non-negativity for already-numeric values."""
    x = float(value)
    if x < 0.0:
        raise ValueError(f"{name} must be >= 0.")
    return x
