"""Presentation adapters for the launch sequence."""
