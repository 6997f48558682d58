"""Picker configuration and read-only user defaults.

``PickerConfig`` is fixed at build time. The optional JSON defaults file only
seeds CLI options (theme, page length, clear-on-exit); the picker never writes
anything back. Malformed or missing defaults fall back to empty values.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .listing import AnyEntry, FileType

logger = logging.getLogger(__name__)

APP_NAME = "filepicker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class PickerConfig:
    """Immutable picker options.

    ``max_length`` is the user-facing page length; the page window reserves two
    extra rows for the page indicator, see ``page_capacity``.
    """

    file_type: FileType = field(default_factory=AnyEntry)
    prompt: str | None = None
    report: bool = False
    clear: bool = True
    max_length: int | None = None
    initial_folder: Path | None = None

    @classmethod
    def create(
        cls,
        file_type: FileType | None = None,
        *,
        prompt: str | None = None,
        report: bool | None = None,
        clear: bool = True,
        max_length: int | None = None,
        initial_folder: Path | str | None = None,
    ) -> PickerConfig:
        """Build a config, defaulting ``report`` to whether a prompt is set."""
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be >= 1")
        return cls(
            file_type=file_type if file_type is not None else AnyEntry(),
            prompt=prompt,
            report=(prompt is not None) if report is None else bool(report),
            clear=bool(clear),
            max_length=max_length,
            initial_folder=Path(initial_folder) if initial_folder is not None else None,
        )

    @property
    def page_capacity(self) -> int | None:
        if self.max_length is None:
            return None
        return self.max_length + 2

    def start_directory(self) -> Path:
        if self.initial_folder is not None:
            return self.initial_folder
        return Path.cwd()


def load_config() -> dict[str, object]:
    """Load the user defaults JSON object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable defaults file %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load default theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_max_length() -> int | None:
    """Load default page length; only positive integers are accepted."""
    value = load_config().get("max_length")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


def load_clear() -> bool:
    """Load default clear-on-exit; only explicit booleans override ``True``."""
    value = load_config().get("clear")
    return value if isinstance(value, bool) else True


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "PickerConfig",
    "load_config",
    "load_theme_name",
    "load_max_length",
    "load_clear",
]
