"""Directory scanning and snapshot construction."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from ..ansi import fit_to_width
from ..config import BrowserConfig
from ..errors import FilesystemError, TooManyEntries, filesystem_error_from_os
from .types import Entry, EntryKind, Snapshot

DOT_ENTRIES: tuple[str, ...] = (".", "..")

_MODE_KINDS: tuple[tuple[object, EntryKind], ...] = (
    (stat.S_ISLNK, EntryKind.SYMLINK),
    (stat.S_ISDIR, EntryKind.DIRECTORY),
    (stat.S_ISREG, EntryKind.REGULAR),
    (stat.S_ISCHR, EntryKind.CHAR_DEVICE),
    (stat.S_ISBLK, EntryKind.BLOCK_DEVICE),
    (stat.S_ISFIFO, EntryKind.FIFO),
    (stat.S_ISSOCK, EntryKind.SOCKET),
)


def classify_mode(st_mode: int) -> EntryKind:
    """Map an ``st_mode`` value to its ``EntryKind``."""
    for predicate, kind in _MODE_KINDS:
        if predicate(st_mode):
            return kind
    return EntryKind.UNKNOWN


def classify_path(path: Path | str) -> EntryKind:
    """Classify ``path`` via ``lstat``; missing or unreadable paths are ``UNKNOWN``."""
    try:
        return classify_mode(os.lstat(path).st_mode)
    except OSError:
        return EntryKind.UNKNOWN


def _sort_key(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def list_directory_names(directory: Path) -> tuple[list[tuple[str, EntryKind]], FilesystemError | None]:
    """List ``(name, kind)`` pairs for ``directory`` sorted by name.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned, in which case ``children`` is empty.
    """
    children: list[tuple[str, EntryKind]] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    kind = classify_mode(child.stat(follow_symlinks=False).st_mode)
                except OSError:
                    # Vanished between readdir and stat.
                    kind = EntryKind.UNKNOWN
                children.append((child.name, kind))
    except OSError as exc:
        return [], filesystem_error_from_os(exc, "cannot open directory", directory)

    children.sort(key=lambda item: _sort_key(item[0]))
    return children, None


def build_snapshot(directory: Path | str = ".", config: BrowserConfig | None = None) -> Snapshot:
    """Build an indexed snapshot of ``directory``.

    Real children come first in name order, followed by ``.`` and ``..`` when
    ``config.include_dot_entries`` is set. Never raises: unreadable
    directories produce an empty snapshot, and listings past
    ``config.max_entries`` lose their trailing children (never the dot
    entries). Both cases set ``scan_error``.
    """
    if config is None:
        config = BrowserConfig()
    try:
        resolved = Path(directory).resolve()
    except OSError:
        resolved = Path(directory)

    children, scan_error = list_directory_names(resolved)
    if scan_error is not None:
        return Snapshot(directory=resolved, entries=(), scan_error=scan_error)

    dot_entries: list[tuple[str, EntryKind]] = []
    if config.include_dot_entries:
        dot_entries = [(name, classify_path(resolved / name)) for name in DOT_ENTRIES]

    # The cap counts dot entries, but only real children are ever dropped.
    child_limit = max(0, config.max_entries - len(dot_entries))
    if len(children) > child_limit:
        scan_error = TooManyEntries(
            f"{resolved}: {len(children) + len(dot_entries)} entries exceed the limit of {config.max_entries}",
            resolved,
        )
        children = children[:child_limit]
    children.extend(dot_entries)

    entries = tuple(
        Entry(index=index, name=name, label=fit_to_width(name, config.name_width), kind=kind)
        for index, (name, kind) in enumerate(children)
    )
    return Snapshot(directory=resolved, entries=entries, scan_error=scan_error)


__all__ = [
    "DOT_ENTRIES",
    "classify_mode",
    "classify_path",
    "list_directory_names",
    "build_snapshot",
]
