"""Grid renderer for the directory browser.

Composes one full ANSI frame (status line, entry grid, key legend) from the
snapshot and cursor, then writes it in a single ``os.write`` call.
Composition reads only its inputs; it never touches the filesystem.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .config import Keymap
from .dir_model import Entry, Snapshot
from .ui_theme import DEFAULT_THEME, UITheme

CLEAR_SCREEN = "\033[H\033[J"
CELL_GUTTER = "  "
EMPTY_MARKER = "(empty)"


@dataclass
class RenderContext:
    snapshot: Snapshot
    cursor: int
    current_path: Path
    columns: int
    theme: UITheme = DEFAULT_THEME
    keymap: Keymap | None = None
    status_message: str = ""
    now: Callable[[], float] = time.time


def format_timestamp(epoch_seconds: float) -> str:
    """Format wall-clock time like ``ctime`` (``Sun Dec  8 12:00:00 2019``)."""
    return time.ctime(epoch_seconds)


def build_status_line(current_path: Path, entry_count: int, timestamp: str) -> str:
    return f"  Path : {current_path}  |  File Count : {entry_count}  |  {timestamp}"


def build_legend_line(keymap: Keymap) -> str:
    return (
        f"[{keymap.left}/{keymap.right}/{keymap.up}/{keymap.down}] move  "
        f"[{keymap.enter}] open  [{keymap.delete}] delete  "
        f"[{keymap.create}] new dir  [{keymap.quit}] quit"
    )


def format_cell(entry: Entry, selected: bool, theme: UITheme) -> str:
    """Style one grid cell: kind color, optional cursor highlight, reset."""
    style = theme.color_for(entry.kind)
    if selected:
        style += theme.cursor
    if not style:
        return entry.label
    return f"{style}{entry.label}{theme.reset}"


def build_grid_lines(entries: tuple[Entry, ...], cursor: int, columns: int, theme: UITheme) -> list[str]:
    """Lay entries out row-major, ``columns`` cells per row."""
    columns = max(1, columns)
    lines: list[str] = []
    for row_start in range(0, len(entries), columns):
        row = entries[row_start : row_start + columns]
        cells = [format_cell(entry, entry.index == cursor, theme) for entry in row]
        lines.append(CELL_GUTTER.join(cells))
    return lines


def build_frame(context: RenderContext) -> str:
    """Return the complete frame text for ``context``.

    An empty snapshot renders the status line and ``EMPTY_MARKER`` only; no
    entry is looked up by cursor position.
    """
    theme = context.theme
    snapshot = context.snapshot
    out: list[str] = [CLEAR_SCREEN]

    status = build_status_line(context.current_path, len(snapshot), format_timestamp(context.now()))
    if theme.status:
        status = f"{theme.status}{status}{theme.reset}"
    out.append(status + "\n")

    if context.status_message:
        message = context.status_message
        if theme.message:
            message = f"{theme.message}{message}{theme.reset}"
        out.append(message + "\n")
    out.append("\n")

    if len(snapshot) == 0:
        out.append(EMPTY_MARKER + "\n")
    else:
        for line in build_grid_lines(snapshot.entries, context.cursor, context.columns, theme):
            out.append(line + "\n")

    if context.keymap is not None:
        legend = build_legend_line(context.keymap)
        if theme.legend:
            legend = f"{theme.legend}{legend}{theme.reset}"
        out.append("\n" + legend + "\n")
    return "".join(out)


def render(context: RenderContext, fd: int | None = None) -> None:
    """Write one frame for ``context`` to ``fd`` (stdout by default)."""
    if fd is None:
        fd = sys.stdout.fileno()
    os.write(fd, build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "CLEAR_SCREEN",
    "CELL_GUTTER",
    "EMPTY_MARKER",
    "RenderContext",
    "format_timestamp",
    "build_status_line",
    "build_legend_line",
    "format_cell",
    "build_grid_lines",
    "build_frame",
    "render",
]
