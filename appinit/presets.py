from __future__ import annotations

from typing import Any

from .domain.flags import DEFAULT_FLAGS


def make_default_launch_deck(*, fetch_one_s: float = 2.0, fetch_two_s: float = 1.4, finished_s: float = 1.4) -> dict[str, Any]:
    return {
        "flags": dict(DEFAULT_FLAGS),
        "steps": [
            {"type": "fetch", "name": "setup-async-one", "when": "fetch_one", "delay_s": float(fetch_one_s)},
            {
                "type": "announce",
                "name": "did-finish",
                "when": "show_did_finish",
                "route": "finished",
                "delay_s": float(finished_s),
            },
            {"type": "onboarding", "name": "show-onboarding", "when": "show_onboarding"},
            {"type": "fetch", "name": "setup-async-two", "when": "fetch_two", "delay_s": float(fetch_two_s)},
        ],
    }


def make_instant_launch_deck() -> dict[str, Any]:
    """Default deck with every delay set to zero, for smoke runs."""
    return make_default_launch_deck(fetch_one_s=0.0, fetch_two_s=0.0, finished_s=0.0)
