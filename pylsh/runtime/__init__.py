"""Browser runtime package exports.

Exposes the interactive session plus a convenience ``run_browser`` that wires
it to the real terminal.
"""

from __future__ import annotations

import sys

from ..config import BrowserConfig
from ..terminal import TerminalController
from ..ui_theme import DEFAULT_THEME, UITheme
from .loop import BrowserSession, KeyReader
from .navigation import clamp_cursor, move_delta
from .state import BrowserState


def run_browser(config: BrowserConfig | None = None, theme: UITheme = DEFAULT_THEME, stdin_fd: int | None = None) -> None:
    """Run the browser on the controlling terminal until the user quits.

    The working directory is left wherever the user navigated.
    """
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    BrowserSession(TerminalController(stdin_fd), config, theme=theme).run()


__all__ = [
    "BrowserSession",
    "BrowserState",
    "KeyReader",
    "clamp_cursor",
    "move_delta",
    "run_browser",
]
