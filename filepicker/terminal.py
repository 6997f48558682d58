"""Terminal control for the picker session.

Owns cursor visibility, buffered line output, relative line erasure, and the
raw-mode window around each blocking key read. The picker draws inline on the
normal screen buffer (stderr by default), never on the alternate screen.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import sys
import termios
import tty
from collections.abc import Iterator
from typing import Protocol, TextIO

from .errors import TerminalIOError
from .input import read_key

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def clear_last_lines_sequence(count: int) -> str:
    """Return the escape sequence that erases the ``count`` lines above the cursor.

    The cursor ends on the first erased line, at column 0.
    """
    if count <= 0:
        return ""
    # Up ``count`` lines, wipe each one walking down, then return to the top.
    return f"\x1b[{count}A" + "\r\x1b[2K\x1b[1B" * count + f"\x1b[{count}A"


class TerminalLike(Protocol):
    """Terminal capability consumed by the picker loop and renderer."""

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def hidden_cursor(self) -> contextlib.AbstractContextManager[None]: ...

    def write_line(self, text: str) -> None: ...

    def clear_last_lines(self, count: int) -> None: ...

    def flush(self) -> None: ...

    def size(self) -> tuple[int, int]: ...

    def read_key(self) -> str: ...


class Terminal:
    """Drive an interactive tty: output on ``stream``, keys from ``stdin_fd``."""

    def __init__(self, stream: TextIO | None = None, stdin_fd: int | None = None) -> None:
        stream = stream if stream is not None else sys.stderr
        self.stdout_fd = stream.fileno()
        self.stdin_fd = stdin_fd if stdin_fd is not None else sys.stdin.fileno()
        self._pending: list[str] = []

    @classmethod
    def stderr(cls) -> Terminal:
        return cls(sys.stderr)

    @classmethod
    def stdout(cls) -> Terminal:
        return cls(sys.stdout)

    def hide_cursor(self) -> None:
        self._pending.append(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._pending.append(SHOW_CURSOR)

    @contextlib.contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the block and restore it on every exit path."""
        self.hide_cursor()
        try:
            yield
        except BaseException:
            self.show_cursor()
            # Keep the original failure; a broken terminal fails this flush too.
            with contextlib.suppress(TerminalIOError):
                self.flush()
            raise
        self.show_cursor()
        self.flush()

    def write_line(self, text: str) -> None:
        self._pending.append(text + "\n")

    def clear_last_lines(self, count: int) -> None:
        self._pending.append(clear_last_lines_sequence(count))

    def flush(self) -> None:
        if not self._pending:
            return
        payload = "".join(self._pending).encode("utf-8")
        self._pending.clear()
        try:
            while payload:
                written = os.write(self.stdout_fd, payload)
                payload = payload[written:]
        except OSError as exc:
            raise TerminalIOError("write", exc) from exc

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` of the output terminal."""
        try:
            term = os.get_terminal_size(self.stdout_fd)
        except OSError:
            term = shutil.get_terminal_size((80, 24))
        return term.lines, term.columns

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Put stdin in raw mode for the block, restoring the saved tty state."""
        try:
            saved_tty_state = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except (termios.error, OSError) as exc:
            raise TerminalIOError("raw mode", exc) from exc
        try:
            yield
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved_tty_state)

    def read_key(self) -> str:
        """Block until one key is pressed and return its token.

        Ctrl-C raises ``KeyboardInterrupt`` since raw mode suppresses SIGINT.
        """
        with self.raw_mode():
            try:
                key = read_key(self.stdin_fd)
            except OSError as exc:
                raise TerminalIOError("read", exc) from exc
        if key == "CTRL_C":
            raise KeyboardInterrupt
        if key == "":
            raise TerminalIOError("read", EOFError("end of input"))
        return key


__all__ = [
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "clear_last_lines_sequence",
    "TerminalLike",
    "Terminal",
]
