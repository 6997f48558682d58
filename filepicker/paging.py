"""Page window bookkeeping for long listings.

A page holds ``capacity`` items. Paging is *active* only when the listing does
not fit in one page; the loop ignores page keys otherwise. The terminal is
re-measured on every ``update`` so resizes take effect on the next frame.
"""

from __future__ import annotations

from collections.abc import Callable

from .terminal import TerminalLike

PagingInfo = tuple[int, int]


def compute_capacity(max_capacity: int | None, term_rows: int) -> int:
    """Return items per page: ``max_capacity`` when bounded, else terminal rows."""
    if max_capacity is not None:
        return max(1, max_capacity)
    return max(1, term_rows)


def page_count(items_len: int, capacity: int) -> int:
    """Return ``ceil(items_len / capacity)``."""
    return -(-items_len // capacity)


class Paging:
    """Current page, page count, and capacity for one directory listing."""

    def __init__(self, terminal: TerminalLike, items_len: int, max_capacity: int | None = None) -> None:
        self.terminal = terminal
        self.items_len = items_len
        self.max_capacity = max_capacity
        self.current_term_size = terminal.size()
        self.capacity = compute_capacity(max_capacity, self.current_term_size[0])
        self.pages = page_count(items_len, self.capacity)
        self.current_page = 0
        self.active = items_len > self.capacity
        # True on start so the prompt is drawn once even without paging.
        self.activity_transition = True

    def update(self, selected: int | None) -> None:
        """Recompute the window after a key press so ``selected`` is visible."""
        new_term_size = self.terminal.size()
        if new_term_size != self.current_term_size:
            self.current_term_size = new_term_size
            self.capacity = compute_capacity(self.max_capacity, new_term_size[0])
            self.pages = page_count(self.items_len, self.capacity)
            self.current_page = min(self.current_page, max(0, self.pages - 1))

        now_active = self.items_len > self.capacity
        if self.active == now_active:
            self.activity_transition = False
        else:
            self.active = now_active
            self.activity_transition = True
            # Wipe ghost lines left behind when a resize toggles paging.
            self.terminal.clear_last_lines(self.capacity)

        if selected is not None and not (
            self.current_page * self.capacity <= selected < (self.current_page + 1) * self.capacity
        ):
            self.current_page = selected // self.capacity

    def render_prompt(self, render: Callable[[PagingInfo | None], None]) -> None:
        """Draw the prompt when paging is active or has just toggled."""
        if self.active:
            render((self.current_page + 1, self.pages))
        elif self.activity_transition:
            render(None)

    def visible_range(self) -> range:
        """Return the item indices shown on the current page."""
        start = self.current_page * self.capacity
        return range(start, min(start + self.capacity, self.items_len))

    def next_page(self) -> int:
        """Advance one page, wrapping to the first; return its first index."""
        if self.pages == 0:
            return 0
        if self.current_page >= self.pages - 1:
            self.current_page = 0
        else:
            self.current_page += 1
        return self.current_page * self.capacity

    def previous_page(self) -> int:
        """Go back one page, wrapping to the last; return its first index."""
        if self.pages == 0:
            return 0
        if self.current_page == 0:
            self.current_page = self.pages - 1
        else:
            self.current_page -= 1
        return self.current_page * self.capacity


__all__ = ["PagingInfo", "compute_capacity", "page_count", "Paging"]
