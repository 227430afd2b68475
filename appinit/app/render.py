"""Map progress states to the text shown by the terminal and GUI adapters."""

from __future__ import annotations

from ..domain.routes import CallToAction, ErrorRoute, Finished, ForceUpdate, Route
from ..domain.state import Busy, Idle, ProgressState, Routed

LOGO_TEXT = "[ logo ]"
LOADING_TEXT = "Loading..."
APP_TEXT = "This is the app"


def render_route(route: Route) -> str:
    if isinstance(route, CallToAction):
        return f"{route.title}\n[ {route.button} ]"
    if isinstance(route, (Finished, ErrorRoute, ForceUpdate)):
        return route.message
    raise TypeError(f"Unsupported route: {route!r}")


def render_text(state: ProgressState) -> str:
    """Return the display text for ``state``; each kind renders distinctly."""
    if isinstance(state, Idle):
        return LOGO_TEXT
    if isinstance(state, Busy):
        return LOADING_TEXT
    if isinstance(state, Routed):
        return render_route(state.route)
    raise TypeError(f"Unsupported progress state: {state!r}")
