"""Error taxonomy for the shell and the directory browser.

Browser actions translate ``OSError`` into these types so the session can
show a status message instead of unwinding the loop.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path


class PylshError(Exception):
    """Base class for all pylsh errors."""


class FilesystemError(PylshError):
    """A filesystem operation on a browser entry failed."""

    def __init__(self, message: str, path: Path | str | None = None, cause: OSError | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause


class DirectoryNotEmpty(FilesystemError):
    """Delete targeted a directory that still has children."""


class AlreadyExists(FilesystemError):
    """Create collided with an existing entry."""


class TooManyEntries(FilesystemError):
    """Directory listing exceeded the configured entry cap."""


class EntryVanished(FilesystemError):
    """Entry disappeared between snapshot and action."""


class LaunchFailure(PylshError):
    """A child process could not be started."""

    def __init__(self, message: str, program: str, cause: OSError | None = None) -> None:
        super().__init__(message)
        self.program = program
        self.cause = cause


class TerminalModeError(PylshError):
    """Reading or changing terminal attributes failed.

    ``fatal`` is set when restoring saved attributes failed; the terminal may
    be left in raw mode, so callers must not swallow it.
    """

    def __init__(self, message: str, fatal: bool = False) -> None:
        super().__init__(message)
        self.fatal = fatal


def filesystem_error_from_os(exc: OSError, action: str, path: Path | str) -> FilesystemError:
    """Map an ``OSError`` raised by ``action`` on ``path`` to a browser error."""
    reason = exc.strerror or str(exc)
    message = f"{action} {os.fspath(path)}: {reason}"
    if exc.errno == errno.ENOTEMPTY:
        return DirectoryNotEmpty(message, path, exc)
    if isinstance(exc, FileExistsError):
        return AlreadyExists(message, path, exc)
    if isinstance(exc, FileNotFoundError):
        return EntryVanished(message, path, exc)
    return FilesystemError(message, path, exc)


__all__ = [
    "PylshError",
    "FilesystemError",
    "DirectoryNotEmpty",
    "AlreadyExists",
    "TooManyEntries",
    "EntryVanished",
    "LaunchFailure",
    "TerminalModeError",
    "filesystem_error_from_os",
]
