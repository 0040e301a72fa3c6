"""Domain datatypes for directory snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..errors import FilesystemError


class EntryKind(Enum):
    """Filesystem type of an entry, observed without following symlinks."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Entry:
    """One directory entry as shown in the browser grid.

    ``name`` is the real file name used for filesystem actions; ``label`` is
    the fixed-width display text.
    """

    index: int
    name: str
    label: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Snapshot:
    """Indexed listing of one directory at build time."""

    directory: Path
    entries: tuple[Entry, ...] = ()
    scan_error: FilesystemError | None = None

    def __len__(self) -> int:
        return len(self.entries)

    def entry_at(self, index: int) -> Entry | None:
        """Return the entry at ``index`` or ``None`` when out of range."""
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]


__all__ = [
    "EntryKind",
    "Entry",
    "Snapshot",
]
