"""Step registry mapping deck step types to step factories."""

from __future__ import annotations

from collections.abc import Iterable

from ..config.deck_models import StepConfig
from ..domain.flags import FlagSource
from ..errors import DeckError
from .step_base import Step, StepFactory


class StepRegistry:
    """Registry that maps normalized step types to factories."""

    def __init__(self, factories: dict[str, StepFactory] | None = None) -> None:
        self._factories: dict[str, StepFactory] = {}
        if factories:
            for step_type, factory in factories.items():
                self.register(step_type, factory)

    @staticmethod
    def _normalize(step_type: str) -> str:
        return str(step_type).lower()

    def register(self, step_type: str, factory: StepFactory) -> None:
        if not callable(factory):
            raise TypeError(f"Factory for '{step_type}' must be callable.")
        self._factories[self._normalize(step_type)] = factory

    def resolve(self, step_type: str) -> StepFactory | None:
        return self._factories.get(self._normalize(step_type))

    def supported_types(self) -> tuple[str, ...]:
        return tuple(self._factories)

    def build(self, config: StepConfig, flags: FlagSource) -> Step:
        factory = self.resolve(config.type)
        if factory is None:
            supported = ", ".join(self.supported_types())
            raise DeckError(f"Step type '{config.type}' is not supported. Use one of: {supported}.")
        return factory(config, flags)

    def build_all(self, configs: Iterable[StepConfig], flags: FlagSource) -> tuple[Step, ...]:
        """Build the immutable, ordered step list for one launch."""
        return tuple(self.build(cfg, flags) for cfg in configs)


def create_step_registry(factories: dict[str, StepFactory]) -> StepRegistry:
    """Build a registry from a step-type -> factory mapping."""
    return StepRegistry(factories=factories)
