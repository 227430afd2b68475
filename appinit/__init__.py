"""appinit: ordered launch steps with conditional skipping and user-driven pauses."""

from .errors import DeckError, ResumeCancelled, StepFailed
from .services import LaunchResult, LaunchService, LaunchSession, build_default_launch_service

__version__ = "0.1.0"

__all__ = [
    "DeckError",
    "LaunchResult",
    "LaunchService",
    "LaunchSession",
    "ResumeCancelled",
    "StepFailed",
    "build_default_launch_service",
    "__version__",
]
