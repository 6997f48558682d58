"""Tests for renderer line accounting and incremental clears."""

from __future__ import annotations

import unittest

from filepicker.render import TermThemeRenderer, format_paging_info
from filepicker.theme import ColorfulTheme, SimpleTheme


class _RecordingTerminal:
    def __init__(self, columns: int = 80) -> None:
        self.columns = columns
        self.lines: list[str] = []
        self.cleared: list[int] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def clear_last_lines(self, count: int) -> None:
        self.cleared.append(count)

    def size(self) -> tuple[int, int]:
        return 24, self.columns


class RendererTests(unittest.TestCase):
    def test_prompt_with_paging_info_appends_page_indicator(self) -> None:
        terminal = _RecordingTerminal()
        render = TermThemeRenderer(terminal, SimpleTheme())

        render.select_prompt("Pick", (2, 3))

        self.assertEqual(terminal.lines, ["Pick: [Page 2/3] "])
        self.assertEqual(format_paging_info((1, 4)), " [Page 1/4] ")

    def test_prompt_latches_prompt_height_and_resets_item_height(self) -> None:
        terminal = _RecordingTerminal()
        render = TermThemeRenderer(terminal, SimpleTheme())

        render.select_prompt_item("stale", False)
        render.select_prompt("two\nlines")

        self.assertEqual(render.prompt_height, 3)
        self.assertEqual(render.height, 0)

    def test_items_increment_height_and_use_theme_markers(self) -> None:
        terminal = _RecordingTerminal()
        render = TermThemeRenderer(terminal, SimpleTheme())

        render.select_prompt("Pick")
        render.select_prompt_item("a.txt", True)
        render.select_prompt_item("b.txt", False)

        self.assertEqual(terminal.lines, ["Pick:", "> a.txt", "  b.txt"])
        self.assertEqual(render.height, 2)
        self.assertEqual(render.prompt_height, 1)

    def test_clear_erases_prompt_and_items_and_resets_counters(self) -> None:
        terminal = _RecordingTerminal()
        render = TermThemeRenderer(terminal, SimpleTheme())
        render.select_prompt("Pick")
        render.select_prompt_item("a", False)
        render.select_prompt_item("b", False)

        render.clear()

        self.assertEqual(terminal.cleared, [3])
        self.assertEqual((render.height, render.prompt_height), (0, 0))

    def test_clear_preserve_prompt_keeps_prompt_height(self) -> None:
        terminal = _RecordingTerminal()
        render = TermThemeRenderer(terminal, SimpleTheme())
        render.select_prompt("Pick")
        render.select_prompt_item("a", False)
        render.select_prompt_item("b", False)

        render.clear_preserve_prompt([1, 1])

        self.assertEqual(terminal.cleared, [2])
        self.assertEqual(render.height, 0)
        self.assertEqual(render.prompt_height, 1)

    def test_clear_preserve_prompt_counts_wrapped_items(self) -> None:
        terminal = _RecordingTerminal(columns=10)
        render = TermThemeRenderer(terminal, SimpleTheme())
        for _ in range(3):
            render.select_prompt_item("x", False)

        render.clear_preserve_prompt([5, 10, 11, 25])

        self.assertEqual(terminal.cleared, [5])

    def test_clear_includes_rows_of_wrapped_lines(self) -> None:
        terminal = _RecordingTerminal(columns=10)
        render = TermThemeRenderer(terminal, SimpleTheme())
        render.select_prompt("Pick")
        render.select_prompt_item("aaaaaaaaaaaa", False)
        render.select_prompt_item("b", True)

        render.clear()

        self.assertEqual(terminal.cleared, [4])
        self.assertEqual((render.wrapped, render.prompt_wrapped), (0, 0))

    def test_selection_line_replaces_prompt_height(self) -> None:
        terminal = _RecordingTerminal()
        render = TermThemeRenderer(terminal, ColorfulTheme())

        render.select_prompt_selection("Pick", "a.txt")

        self.assertEqual(render.prompt_height, 1)
        self.assertIn("a.txt", terminal.lines[0])
        self.assertIn("✔", terminal.lines[0])


if __name__ == "__main__":
    unittest.main()
