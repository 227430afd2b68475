"""Launcher for Streamlit-based appinit GUI."""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    """Launch the Streamlit GUI app."""
    try:
        from streamlit.web import cli as stcli
    except ImportError:
        print(
            "Streamlit is required for GUI. Install with:\n"
            "  python3 -m pip install -e '.[gui]'"
        )
        return 2

    script = Path(__file__).resolve().with_name("gui_script.py")
    sys.argv = ["streamlit", "run", str(script)]
    return stcli.main()
