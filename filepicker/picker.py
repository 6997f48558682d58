"""Interactive file/folder picker.

One ``_browse`` call handles one directory: it lists and filters entries,
paints page after page, and reacts to keys until the user selects, cancels,
or descends. ``_interact_on`` iterates over directories, so drilling down does
not grow the call stack. Selection and page never carry over between
directories.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .ansi import line_widths
from .config import PickerConfig
from .errors import CancellationNotPermittedError, DirectoryUnreadableError
from .listing import FileType, list_entries
from .paging import Paging
from .render import TermThemeRenderer
from .terminal import Terminal, TerminalLike
from .theme import SimpleTheme, Theme

logger = logging.getLogger(__name__)

DOWN_KEYS = frozenset({"DOWN", "TAB", "j"})
UP_KEYS = frozenset({"UP", "SHIFT_TAB", "k"})
PREVIOUS_PAGE_KEYS = frozenset({"LEFT", "h"})
NEXT_PAGE_KEYS = frozenset({"RIGHT", "l"})
QUIT_KEYS = frozenset({"ESC", "q"})
SELECT_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})
DESCEND_KEYS = frozenset({" "})


@dataclass(frozen=True)
class Browsing:
    """Showing ``directory``; the loop continues."""

    directory: Path


@dataclass(frozen=True)
class Selected:
    """The user picked ``path``."""

    path: Path


@dataclass(frozen=True)
class Cancelled:
    """The user quit with Escape or ``q``."""


PickerState = Browsing | Selected | Cancelled


def next_selection(selected: int | None, items_len: int) -> int | None:
    """Move down one row, wrapping to the top; from no selection pick the first."""
    if items_len == 0:
        return selected
    if selected is None:
        return 0
    return (selected + 1) % items_len


def previous_selection(selected: int | None, items_len: int) -> int | None:
    """Move up one row, wrapping to the bottom; from no selection pick the last."""
    if items_len == 0:
        return selected
    if selected is None:
        return items_len - 1
    return (selected - 1) % items_len


class FilePicker:
    """Keyboard-driven picker over a directory tree.

    ``Enter`` returns the highlighted entry, file or directory. ``Space``
    descends into a highlighted directory and returns a highlighted file.
    """

    def __init__(
        self,
        file_type: FileType | None = None,
        *,
        prompt: str | None = None,
        report: bool | None = None,
        clear: bool = True,
        max_length: int | None = None,
        initial_folder: Path | str | None = None,
        theme: Theme | None = None,
    ) -> None:
        self.config = PickerConfig.create(
            file_type,
            prompt=prompt,
            report=report,
            clear=clear,
            max_length=max_length,
            initial_folder=initial_folder,
        )
        self.theme = theme if theme is not None else SimpleTheme()

    @classmethod
    def from_config(cls, config: PickerConfig, theme: Theme | None = None) -> FilePicker:
        picker = cls(theme=theme)
        picker.config = config
        return picker

    def interact(self) -> Path:
        """Run on stderr until a path is chosen; Escape and ``q`` are ignored."""
        return self.interact_on(Terminal.stderr())

    def interact_opt(self) -> Path | None:
        """Run on stderr; returns ``None`` when the user quits with Escape or ``q``."""
        return self.interact_on_opt(Terminal.stderr())

    def interact_on(self, terminal: TerminalLike) -> Path:
        """Like ``interact`` but on a specific terminal."""
        result = self._interact_on(terminal, allow_quit=False)
        if result is None:
            raise CancellationNotPermittedError()
        return result

    def interact_on_opt(self, terminal: TerminalLike) -> Path | None:
        """Like ``interact_opt`` but on a specific terminal."""
        return self._interact_on(terminal, allow_quit=True)

    def _start_directory(self) -> Path:
        try:
            return self.config.start_directory()
        except OSError as exc:
            raise DirectoryUnreadableError(Path("."), exc) from exc

    def _interact_on(self, terminal: TerminalLike, allow_quit: bool) -> Path | None:
        state: PickerState = Browsing(self._start_directory())
        with terminal.hidden_cursor():
            while isinstance(state, Browsing):
                state = self._browse(terminal, state.directory, allow_quit)

        if isinstance(state, Selected):
            logger.debug("Selected %s", state.path)
            return state.path
        logger.debug("Picker cancelled")
        return None

    def _report(self, render: TermThemeRenderer, name: str) -> None:
        """Apply clear-on-exit and print the confirmation line if enabled."""
        if self.config.clear:
            render.clear()
        if self.config.prompt is not None and self.config.report:
            render.select_prompt_selection(self.config.prompt, name)

    def _browse(self, terminal: TerminalLike, directory: Path, allow_quit: bool) -> PickerState:
        """Run the key loop for one directory and return the next state."""
        config = self.config
        entries = list_entries(directory, config.file_type)
        names = [entry.name for entry in entries]
        # Measure the printed line, marker included, not just the name.
        item_widths = line_widths([self.theme.format_select_prompt_item(name, True) for name in names])
        paging = Paging(terminal, len(entries), config.page_capacity)
        render = TermThemeRenderer(terminal, self.theme)
        selected: int | None = None

        def draw_prompt(paging_info: tuple[int, int] | None) -> None:
            render.select_prompt(config.prompt, paging_info)

        while True:
            if config.prompt is not None:
                paging.render_prompt(draw_prompt)
            for idx in paging.visible_range():
                render.select_prompt_item(names[idx], selected == idx)
            terminal.flush()

            key = terminal.read_key()
            if key in DOWN_KEYS:
                selected = next_selection(selected, len(entries))
            elif key in UP_KEYS:
                selected = previous_selection(selected, len(entries))
            elif key in PREVIOUS_PAGE_KEYS:
                if paging.active:
                    selected = paging.previous_page()
            elif key in NEXT_PAGE_KEYS:
                if paging.active:
                    selected = paging.next_page()
            elif key in QUIT_KEYS:
                if allow_quit:
                    if config.clear:
                        render.clear()
                    else:
                        terminal.clear_last_lines(paging.capacity)
                    return Cancelled()
            elif key in SELECT_KEYS and selected is not None:
                self._report(render, names[selected])
                return Selected(entries[selected].path)
            elif key in DESCEND_KEYS and selected is not None:
                self._report(render, names[selected])
                entry = entries[selected]
                if not entry.is_dir:
                    return Selected(entry.path)
                render.clear()
                logger.debug("Descending into %s", entry.path)
                return Browsing(entry.path)

            paging.update(selected)
            if paging.active:
                render.clear()
            else:
                render.clear_preserve_prompt(item_widths)


__all__ = [
    "Browsing",
    "Selected",
    "Cancelled",
    "PickerState",
    "next_selection",
    "previous_selection",
    "FilePicker",
]
