"""Filesystem mutations behind the browser's enter, delete and create keys.

Each helper raises a ``FilesystemError`` subclass on failure and leaves
snapshot bookkeeping to the caller.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

from ..dir_model import DOT_ENTRIES, Entry
from ..errors import DirectoryNotEmpty, FilesystemError, filesystem_error_from_os


def change_directory(directory: Path, entry: Entry) -> Path:
    """Make ``entry`` (a directory under ``directory``) the working directory."""
    target = directory / entry.name
    try:
        os.chdir(target)
    except OSError as exc:
        raise filesystem_error_from_os(exc, "cannot enter", target) from exc
    return Path.cwd()


def remove_entry(directory: Path, entry: Entry) -> None:
    """Remove ``entry``: ``rmdir`` for directories, ``unlink`` otherwise.

    Directory removal never recurses; a non-empty directory raises
    ``DirectoryNotEmpty``.
    """
    if entry.name in DOT_ENTRIES:
        raise FilesystemError(f"refusing to delete {entry.name!r}", directory / entry.name)
    target = directory / entry.name
    try:
        if entry.is_dir:
            os.rmdir(target)
        else:
            os.unlink(target)
    except OSError as exc:
        if entry.is_dir and exc.errno in {errno.ENOTEMPTY, errno.EEXIST}:
            raise DirectoryNotEmpty(f"cannot delete {target}: directory not empty", target, exc) from exc
        raise filesystem_error_from_os(exc, "cannot delete", target) from exc


def make_directory(directory: Path, name: str, mode: int) -> Path:
    """Create ``directory / name`` with ``mode``; collisions raise ``AlreadyExists``."""
    target = directory / name
    try:
        os.mkdir(target, mode)
    except OSError as exc:
        raise filesystem_error_from_os(exc, "cannot create", target) from exc
    return target
