"""Feature-flag sources and the step conditions evaluated against them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

DEFAULT_FLAGS: Mapping[str, bool] = MappingProxyType(
    {
        "fetch_one": True,
        "show_onboarding": True,
        "fetch_two": True,
        "show_did_finish": True,
        "needs_update": False,
    }
)


class FlagSource(Protocol):
    """Synchronous, side-effect free boolean lookup."""

    def get(self, name: str) -> bool: ...


@dataclass(frozen=True)
class StaticFlags:
    """Immutable flag source backed by a mapping."""

    values: Mapping[str, bool] = field(default_factory=lambda: dict(DEFAULT_FLAGS))

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType({str(k): bool(v) for k, v in self.values.items()}))

    def get(self, name: str) -> bool:
        try:
            return self.values[name]
        except KeyError:
            raise KeyError(f"Unknown launch flag '{name}'.") from None

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def names(self) -> tuple[str, ...]:
        return tuple(self.values)

    def with_overrides(self, overrides: Mapping[str, bool]) -> StaticFlags:
        merged = dict(self.values)
        merged.update(overrides)
        return StaticFlags(merged)


@dataclass(frozen=True)
class Condition:
    """Eligibility rule for a step: a constant or a (possibly negated) flag."""

    flag: str | None = None
    negate: bool = False
    constant: bool = True

    @classmethod
    def always(cls) -> Condition:
        return cls()

    @classmethod
    def never(cls) -> Condition:
        return cls(constant=False)

    @classmethod
    def on_flag(cls, name: str) -> Condition:
        return cls(flag=name)

    @classmethod
    def unless_flag(cls, name: str) -> Condition:
        return cls(flag=name, negate=True)

    def evaluate(self, flags: FlagSource) -> bool:
        if self.flag is None:
            return self.constant
        value = bool(flags.get(self.flag))
        return not value if self.negate else value

    def describe(self) -> str:
        if self.flag is None:
            return "always" if self.constant else "never"
        return f"not {self.flag}" if self.negate else self.flag


__all__ = ["DEFAULT_FLAGS", "Condition", "FlagSource", "StaticFlags"]
