"""Service-layer entry points for appinit."""

from .launch_service import (
    LaunchResult,
    LaunchService,
    LaunchSession,
    build_default_launch_service,
    build_launch_service,
)

__all__ = [
    "LaunchResult",
    "LaunchService",
    "LaunchSession",
    "build_default_launch_service",
    "build_launch_service",
]
