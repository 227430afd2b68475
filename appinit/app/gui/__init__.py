"""Streamlit GUI components with lazy import proxies."""

from __future__ import annotations


def run_gui() -> None:
    """Lazy proxy for Streamlit app entrypoint."""
    from .app import run_gui as _impl

    _impl()


__all__ = ["run_gui"]
