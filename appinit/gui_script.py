"""Streamlit script entry for ``streamlit run``."""

from appinit.app.gui import run_gui

run_gui()
