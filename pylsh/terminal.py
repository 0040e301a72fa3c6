"""Terminal control for single-key reads.

Owns the per-keypress input-mode switch: each read enters non-canonical,
no-echo mode and restores the saved attributes before returning.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .errors import TerminalModeError


class TerminalController:
    """Bracket single-byte reads with a scoped input-mode change."""

    def __init__(self, stdin_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.mode_error: TerminalModeError | None = None

    @contextlib.contextmanager
    def key_mode(self):
        """Context manager that holds key mode for the duration of the block.

        Raises ``TerminalModeError`` on entry when attributes cannot be read or
        set, and a fatal ``TerminalModeError`` on exit when the saved
        attributes cannot be restored.
        """
        try:
            saved = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalModeError(f"cannot read terminal attributes: {exc}") from exc
        try:
            tty.setcbreak(self.stdin_fd, termios.TCSANOW)
        except termios.error as exc:
            self._restore(saved)
            raise TerminalModeError(f"cannot enter key mode: {exc}") from exc
        try:
            yield
        finally:
            self._restore(saved)

    def _restore(self, saved: list) -> None:
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSANOW, saved)
        except termios.error as exc:
            raise TerminalModeError(f"cannot restore terminal attributes: {exc}", fatal=True) from exc

    def read_key(self) -> bytes:
        """Read one byte in key mode; ``b""`` means end of input.

        When the descriptor is not a terminal the byte is read in whatever
        mode the input is in, so piped keystrokes still work. The entry error
        is kept in ``mode_error`` for the caller to report.
        """
        self.mode_error = None
        try:
            with self.key_mode():
                return os.read(self.stdin_fd, 1)
        except TerminalModeError as exc:
            if exc.fatal:
                raise
            self.mode_error = exc
        return os.read(self.stdin_fd, 1)


def read_key(fd: int) -> bytes:
    """Read one keypress byte from ``fd`` with the terminal mode scoped to the read."""
    return TerminalController(fd).read_key()


__all__ = [
    "TerminalController",
    "read_key",
]
