"""Shared error types for appinit orchestration layers."""

from __future__ import annotations


class DeckError(ValueError):
    """Raised when a launch deck is invalid."""


class ResumeCancelled(RuntimeError):
    """Raised by a resume signal that was cancelled instead of resumed."""


class StepFailed(RuntimeError):
    """Raised when a launch step fails; the remaining steps are not started."""

    def __init__(self, index: int, name: str, cause: BaseException) -> None:
        super().__init__(f"Step {index} ('{name}') failed: {cause}")
        self.index = index
        self.name = name
        self.cause = cause
