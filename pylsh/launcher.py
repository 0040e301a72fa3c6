"""Foreground process launching for the shell and the browser.

Children inherit the terminal and the parent blocks until they exit.
Start failures raise ``LaunchFailure`` so callers can report them.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from .errors import LaunchFailure


def program_path(name: str) -> str:
    """Return the path used to execute a directory entry named ``name``.

    Bare names are anchored to the working directory so ``PATH`` is never
    searched for a browser entry.
    """
    if os.sep in name:
        return name
    return os.path.join(os.curdir, name)


def run_command(argv: Sequence[str], cwd: str | None = None) -> int:
    """Run ``argv`` in the foreground and return its exit status.

    A child killed by a signal reports the negated signal number.
    """
    if not argv:
        raise LaunchFailure("empty command", "")
    try:
        completed = subprocess.run(list(argv), cwd=cwd, check=False)
    except OSError as exc:
        raise LaunchFailure(f"{argv[0]}: {exc.strerror or exc}", argv[0], exc) from exc
    return completed.returncode


def launch_program(name: str, cwd: str | None = None) -> int:
    """Execute the directory entry ``name`` and wait for it to exit."""
    return run_command([program_path(name)], cwd=cwd)


__all__ = [
    "program_path",
    "run_command",
    "launch_program",
]
