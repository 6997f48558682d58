"""Frame rendering with exact line accounting.

The renderer remembers how many lines it printed so the next frame can erase
exactly those lines instead of clearing the whole screen. Prompt lines are
counted separately from item lines; an item-only redraw keeps the prompt.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ansi import line_widths
from .paging import PagingInfo
from .terminal import TerminalLike
from .theme import Theme


def format_paging_info(paging_info: PagingInfo) -> str:
    return f" [Page {paging_info[0]}/{paging_info[1]}] "


class TermThemeRenderer:
    """Write themed prompt and item lines to a terminal."""

    def __init__(self, terminal: TerminalLike, theme: Theme) -> None:
        self.terminal = terminal
        self.theme = theme
        self.height = 0
        self.prompt_height = 0
        # Extra physical rows taken by soft-wrapped lines, kept apart from the
        # logical counters above.
        self.wrapped = 0
        self.prompt_wrapped = 0

    def _extra_rows(self, text: str) -> int:
        columns = max(1, self.terminal.size()[1])
        return sum(max(0, -(-width // columns) - 1) for width in line_widths([text]))

    def _write_line(self, text: str) -> None:
        self.height += text.count("\n") + 1
        self.wrapped += self._extra_rows(text)
        self.terminal.write_line(text)

    def _write_prompt(self, text: str) -> None:
        self._write_line(text)
        self.prompt_height = self.height
        self.prompt_wrapped = self.wrapped
        self.height = 0
        self.wrapped = 0

    def select_prompt(self, prompt: str, paging_info: PagingInfo | None = None) -> None:
        """Write the prompt, with a page indicator when ``paging_info`` is set."""
        text = self.theme.format_select_prompt(prompt)
        if paging_info is not None:
            text += format_paging_info(paging_info)
        self._write_prompt(text)

    def select_prompt_selection(self, prompt: str, selection: str) -> None:
        """Write the confirmation line naming the chosen entry."""
        self._write_prompt(self.theme.format_select_prompt_selection(prompt, selection))

    def select_prompt_item(self, text: str, active: bool) -> None:
        self._write_line(self.theme.format_select_prompt_item(text, active))

    def clear(self) -> None:
        """Erase the prompt and the items of the current frame."""
        self.terminal.clear_last_lines(
            self.height + self.prompt_height + self.wrapped + self.prompt_wrapped
        )
        self.height = 0
        self.prompt_height = 0
        self.wrapped = 0
        self.prompt_wrapped = 0

    def clear_preserve_prompt(self, item_widths: Sequence[int]) -> None:
        """Erase item lines only, counting soft-wrapped items twice."""
        columns = self.terminal.size()[1]
        new_height = self.height
        for width in item_widths:
            if width > columns:
                new_height += 1
        self.terminal.clear_last_lines(new_height)
        self.height = 0
        self.wrapped = 0


__all__ = ["format_paging_info", "TermThemeRenderer"]
