"""Domain-layer types: progress state, routes, flags and resume signals."""

from .flags import DEFAULT_FLAGS, Condition, FlagSource, StaticFlags
from .resume import ResumeSignal
from .routes import CallToAction, ErrorRoute, Finished, ForceUpdate, Route, build_announce_route
from .state import BUSY, IDLE, Busy, Idle, ProgressCell, ProgressState, Routed, is_halting

__all__ = [
    "BUSY",
    "DEFAULT_FLAGS",
    "IDLE",
    "Busy",
    "CallToAction",
    "Condition",
    "ErrorRoute",
    "Finished",
    "FlagSource",
    "ForceUpdate",
    "Idle",
    "ProgressCell",
    "ProgressState",
    "ResumeSignal",
    "Route",
    "Routed",
    "StaticFlags",
    "build_announce_route",
    "is_halting",
]
