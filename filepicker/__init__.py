"""Public package surface for filepicker.

Exports the picker, its filter types, themes, and errors. ``main`` is imported
lazily so embedding the widget does not pull in the CLI.
"""

from __future__ import annotations

from .config import PickerConfig
from .errors import (
    CancellationNotPermittedError,
    DirectoryUnreadableError,
    FilePickerError,
    TerminalIOError,
)
from .listing import AnyEntry, Entry, FileType, Folder, WithExtension, list_entries
from .picker import FilePicker
from .terminal import Terminal, TerminalLike
from .theme import ColorfulTheme, SimpleTheme, Theme, resolve_theme


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "FilePicker",
    "PickerConfig",
    "FileType",
    "Folder",
    "WithExtension",
    "AnyEntry",
    "Entry",
    "list_entries",
    "Terminal",
    "TerminalLike",
    "Theme",
    "SimpleTheme",
    "ColorfulTheme",
    "resolve_theme",
    "FilePickerError",
    "DirectoryUnreadableError",
    "TerminalIOError",
    "CancellationNotPermittedError",
]
