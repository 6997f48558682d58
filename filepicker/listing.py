"""Directory listing and entry-type filtering for the picker.

Listings keep the native ``os.scandir`` order. Children whose kind cannot be
determined are skipped; only a directory that cannot be opened is an error.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import DirectoryUnreadableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Folder:
    """Keep directories only."""


@dataclass(frozen=True)
class WithExtension:
    """Keep directories plus files whose extension matches ``extension``."""

    extension: str

    def __post_init__(self) -> None:
        normalized = self.extension.strip().lstrip(".").lower()
        object.__setattr__(self, "extension", normalized)


@dataclass(frozen=True)
class AnyEntry:
    """Keep every entry that has a name."""


FileType = Folder | WithExtension | AnyEntry


@dataclass(frozen=True)
class Entry:
    """One listed directory child."""

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


def file_extension(name: str) -> str | None:
    """Return the extension of ``name`` without its dot, or ``None``.

    Dotfiles such as ``.bashrc`` have no extension.
    """
    suffix = Path(name).suffix
    if not suffix:
        return None
    return suffix[1:]


def entry_matches(file_type: FileType, name: str, is_dir: bool) -> bool:
    """Return whether a child named ``name`` passes ``file_type``."""
    if not name:
        return False
    if isinstance(file_type, Folder):
        return is_dir
    if isinstance(file_type, WithExtension):
        if is_dir:
            return True
        extension = file_extension(name)
        return extension is not None and extension.lower() == file_type.extension
    return True


def list_entries(directory: Path, file_type: FileType) -> list[Entry]:
    """List children of ``directory`` accepted by ``file_type``.

    Raises ``DirectoryUnreadableError`` when the directory cannot be scanned.
    """
    entries: list[Entry] = []
    skipped = 0
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    skipped += 1
                    continue
                if not entry_matches(file_type, child.name, is_dir):
                    continue
                entries.append(Entry(path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        raise DirectoryUnreadableError(directory, exc) from exc

    logger.debug(
        "Listed %d entries in %s (%d unreadable skipped)", len(entries), directory, skipped
    )
    return entries


__all__ = [
    "Folder",
    "WithExtension",
    "AnyEntry",
    "FileType",
    "Entry",
    "file_extension",
    "entry_matches",
    "list_entries",
]
