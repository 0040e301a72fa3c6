"""Interactive browser session: render, read one key, act, repeat.

The session owns the snapshot and cursor. Terminal, launcher, clock and
frame output are injected so the loop can run against fakes in tests.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from ..config import BrowserConfig
from ..dir_model import Entry, Snapshot, build_snapshot
from ..errors import LaunchFailure, PylshError, TerminalModeError
from ..input import KeyComboRegistry
from ..launcher import launch_program
from ..render import RenderContext, build_frame
from ..ui_theme import DEFAULT_THEME, UITheme
from .actions import change_directory, make_directory, remove_entry
from .navigation import clamp_cursor, move_delta
from .state import BrowserState


class KeyReader(Protocol):
    mode_error: TerminalModeError | None

    def read_key(self) -> bytes: ...


def _write_stdout(frame: str) -> None:
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


class BrowserSession:
    """One run of the directory browser in the process working directory.

    Recoverable errors become the status message of the next frame. Only a
    fatal ``TerminalModeError`` escapes ``run``.
    """

    def __init__(
        self,
        terminal: KeyReader,
        config: BrowserConfig | None = None,
        *,
        theme: UITheme = DEFAULT_THEME,
        launch: Callable[[str], int] = launch_program,
        write_frame: Callable[[str], None] = _write_stdout,
        now: Callable[[], float] = time.time,
    ) -> None:
        self.terminal = terminal
        self.config = config if config is not None else BrowserConfig()
        self.theme = theme
        self._launch = launch
        self._write_frame = write_frame
        self._now = now
        self._mode_error_reported = False
        self.state = BrowserState(snapshot=build_snapshot(".", self.config))
        self._report_scan_error()
        self.keys = KeyComboRegistry.from_keymap(
            self.config.keymap,
            {
                "right": self.move_right,
                "left": self.move_left,
                "up": self.move_up,
                "down": self.move_down,
                "enter": self.enter,
                "quit": self.quit,
                "delete": self.delete,
                "create": self.create_directory,
            },
        )

    @property
    def snapshot(self) -> Snapshot:
        return self.state.snapshot

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def running(self) -> bool:
        return self.state.running

    def _report_scan_error(self) -> None:
        if self.state.snapshot.scan_error is not None:
            self.state.status_message = str(self.state.snapshot.scan_error)

    def _fail(self, exc: PylshError) -> PylshError:
        self.state.status_message = str(exc)
        return exc

    def rebuild(self) -> None:
        """Rebuild the snapshot from the working directory and reset the cursor."""
        self.state.snapshot = build_snapshot(".", self.config)
        self.state.cursor = 0
        self._report_scan_error()

    def current_path(self) -> Path:
        try:
            return Path.cwd()
        except OSError:
            return self.state.snapshot.directory

    def clamp_cursor(self) -> int:
        self.state.cursor = clamp_cursor(self.state.cursor, len(self.state.snapshot))
        return self.state.cursor

    def selected_entry(self) -> Entry | None:
        return self.state.snapshot.entry_at(self.clamp_cursor())

    def move(self, delta: int) -> None:
        # Clamping is deferred to the next render.
        self.state.cursor += delta

    def move_right(self) -> None:
        self.move(move_delta("right", self.config.columns))

    def move_left(self) -> None:
        self.move(move_delta("left", self.config.columns))

    def move_up(self) -> None:
        self.move(move_delta("up", self.config.columns))

    def move_down(self) -> None:
        self.move(move_delta("down", self.config.columns))

    def enter(self) -> PylshError | None:
        """Enter the selected directory or launch the selected non-directory."""
        entry = self.selected_entry()
        if entry is None:
            return None
        if entry.is_dir:
            try:
                change_directory(self.state.snapshot.directory, entry)
            except PylshError as exc:
                return self._fail(exc)
            self.rebuild()
            return None

        try:
            status = self._launch(entry.name)
        except LaunchFailure as exc:
            return self._fail(exc)
        except KeyboardInterrupt:
            self.state.status_message = f"{entry.name} interrupted"
            return None
        # Contents are assumed unchanged by the child; no rebuild.
        self.state.status_message = f"{entry.name} exited with status {status}"
        return None

    def delete(self) -> PylshError | None:
        """Delete the selected entry; on failure the snapshot is left as is."""
        entry = self.selected_entry()
        if entry is None:
            return None
        try:
            remove_entry(self.state.snapshot.directory, entry)
        except PylshError as exc:
            return self._fail(exc)
        self.rebuild()
        return None

    def create_directory(self) -> PylshError | None:
        """Create the default-named directory in the snapshot directory."""
        try:
            make_directory(
                self.state.snapshot.directory,
                self.config.new_directory_name,
                self.config.new_directory_mode,
            )
        except PylshError as exc:
            return self._fail(exc)
        self.rebuild()
        return None

    def quit(self) -> None:
        self.state.running = False

    def handle_key(self, key: bytes) -> None:
        """Apply one key. ``b""`` (end of input) quits; unbound keys do nothing."""
        self.state.status_message = ""
        if not key:
            self.quit()
            return
        self.keys.dispatch(key.decode("latin-1"))

    def frame(self) -> str:
        self.clamp_cursor()
        return build_frame(
            RenderContext(
                snapshot=self.state.snapshot,
                cursor=self.state.cursor,
                current_path=self.current_path(),
                columns=self.config.columns,
                theme=self.theme,
                keymap=self.config.keymap,
                status_message=self.state.status_message,
                now=self._now,
            )
        )

    def step(self) -> bool:
        """Run one render/read/act cycle; return whether the session continues."""
        self._write_frame(self.frame())
        try:
            key = self.terminal.read_key()
        except KeyboardInterrupt:
            # Ctrl+C only redraws.
            return self.state.running
        except OSError:
            # Input is gone; treat like end of input.
            self.quit()
            return False
        self.handle_key(key)
        mode_error = self.terminal.mode_error
        if mode_error is not None and not self._mode_error_reported:
            self._mode_error_reported = True
            if not self.state.status_message:
                self.state.status_message = f"{mode_error}; reading keys in line mode"
        return self.state.running

    def run(self) -> None:
        """Loop until the quit key or end of input."""
        while self.step():
            pass


__all__ = [
    "KeyReader",
    "BrowserSession",
]
