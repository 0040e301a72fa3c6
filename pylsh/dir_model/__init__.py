"""Directory snapshot model for the browser.

This package contains non-UI primitives:
- entry kind, entry, and snapshot datatypes
- directory scanning and kind classification without symlink dereference
"""

from __future__ import annotations

from .types import Entry, EntryKind, Snapshot
from .fs import DOT_ENTRIES, build_snapshot, classify_mode, classify_path, list_directory_names

__all__ = [
    "Entry",
    "EntryKind",
    "Snapshot",
    "DOT_ENTRIES",
    "build_snapshot",
    "classify_mode",
    "classify_path",
    "list_directory_names",
]
