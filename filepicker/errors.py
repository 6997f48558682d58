"""Exception hierarchy raised by the picker.

Every failure propagates to the caller immediately; nothing is retried and the
widget never prints error text on its own.
"""

from __future__ import annotations

from pathlib import Path


class FilePickerError(Exception):
    """Base exception for picker failures."""


class DirectoryUnreadableError(FilePickerError):
    """Raised when a directory cannot be enumerated."""

    def __init__(self, directory: Path, cause: Exception | None = None) -> None:
        self.directory = directory
        self.cause = cause
        message = f"Cannot read directory {directory}"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class TerminalIOError(FilePickerError):
    """Raised when a terminal write, flush, cursor change, or key read fails."""

    def __init__(self, operation: str, cause: Exception | None = None) -> None:
        self.operation = operation
        self.cause = cause
        message = f"Terminal {operation} failed"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class CancellationNotPermittedError(FilePickerError):
    """Raised when the non-cancellable entry point ends without a selection."""

    def __init__(self) -> None:
        super().__init__("Quit not allowed in this case")


__all__ = [
    "FilePickerError",
    "DirectoryUnreadableError",
    "TerminalIOError",
    "CancellationNotPermittedError",
]
