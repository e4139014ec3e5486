"""Errors that abort a run before any output is rendered."""

from __future__ import annotations

from pathlib import Path


class CoreError(Exception):
    """Base class for time resolution failures."""


class PreEpochDateError(CoreError):
    """Raised when an explicit time resolves to a year before 1970."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Dates before 1970 are not supported: {text!r}")


class FileStatError(CoreError):
    """Raised when a file's timestamps cannot be read."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f'Couldn\'t get status of "{path}"'
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnrecognizedTimeError(CoreError):
    """Raised when an explicit time string matches no known date/time form."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unrecognized time: {text!r}")
