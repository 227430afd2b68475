"""Pipeline primitives for step-based launch execution."""

from .engine import StepReport, StepSequence, run
from .registry import StepRegistry, create_step_registry
from .step_base import Step, StepFactory

__all__ = [
    "Step",
    "StepFactory",
    "StepRegistry",
    "StepReport",
    "StepSequence",
    "create_step_registry",
    "run",
]
