"""Cursor arithmetic for the browser grid.

Moves store the raw result; ``clamp_cursor`` brings it back into range
before each render. This module has no UI or filesystem concerns.
"""

from __future__ import annotations

MOVE_ACTIONS: tuple[str, ...] = ("right", "left", "up", "down")


def move_delta(action: str, columns: int) -> int:
    """Return the cursor offset for a move action on a ``columns``-wide grid."""
    if action not in MOVE_ACTIONS:
        raise ValueError(f"unknown move action: {action!r}")
    columns = max(1, columns)
    deltas = {"right": 1, "left": -1, "up": -columns, "down": columns}
    return deltas[action]


def clamp_cursor(cursor: int, entry_count: int) -> int:
    """Clamp ``cursor`` into ``[0, entry_count)``; empty listings clamp to 0."""
    if entry_count <= 0:
        return 0
    return max(0, min(cursor, entry_count - 1))
