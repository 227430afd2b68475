"""Streamlit GUI app assembly."""

from __future__ import annotations

import time
from typing import Any

from ...domain.flags import DEFAULT_FLAGS
from ...domain.routes import CallToAction
from ...domain.state import Busy, Routed
from ...presets import make_default_launch_deck
from ...services import build_default_launch_service
from ..render import APP_TEXT, render_text
from .session import BackgroundLaunch, clear_launch, get_launch, set_launch

POLL_INTERVAL_S = 0.2


def start_launch(store: Any, flags: dict[str, bool]) -> BackgroundLaunch:
    """Build a fresh session from the default deck and start it in the background."""
    deck = make_default_launch_deck()
    deck["steps"].insert(0, {"type": "force_update", "name": "check-version"})
    session = build_default_launch_service().prepare(deck, flag_overrides=flags)
    launch = BackgroundLaunch(session)
    set_launch(store, launch)
    launch.start()
    return launch


def _render_flags_sidebar(st: Any) -> tuple[bool, dict[str, bool]]:
    st.sidebar.header("Launch flags")
    flags = {name: st.sidebar.checkbox(name, value=bool(value)) for name, value in DEFAULT_FLAGS.items()}
    restart = st.sidebar.button("Restart launch")
    return restart, flags


def _render_launch(st: Any, launch: BackgroundLaunch) -> None:
    state = launch.state
    if isinstance(state, Routed) and isinstance(state.route, CallToAction):
        st.subheader(state.route.title)
        st.button(state.route.button, on_click=launch.resume)
    elif isinstance(state, Busy):
        st.info(render_text(state))
    else:
        st.markdown(render_text(state))


def run_gui() -> None:
    """Render Streamlit app."""
    import streamlit as st

    st.set_page_config(page_title="appinit", layout="centered")
    st.title("appinit: launch sequence")

    restart, flags = _render_flags_sidebar(st)
    if restart:
        clear_launch(st.session_state)

    launch = get_launch(st.session_state)
    if launch is None:
        launch = start_launch(st.session_state, flags)

    if launch.error is not None:
        st.error(f"Launch crashed: {launch.error}")
        return

    result = launch.result
    if result is None:
        _render_launch(st, launch)
        time.sleep(POLL_INTERVAL_S)
        st.rerun()
        return

    if result.outcome == "completed":
        st.success(APP_TEXT)
    elif result.outcome == "halted":
        st.warning(render_text(launch.state))
    else:
        st.error(f"{render_text(launch.state)}: {result.error}")
    st.caption(f"ran: {', '.join(result.ran) or '-'} | skipped: {', '.join(result.skipped) or '-'}")


__all__ = ["run_gui", "start_launch"]
