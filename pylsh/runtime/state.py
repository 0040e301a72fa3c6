from __future__ import annotations

from dataclasses import dataclass

from ..dir_model import Snapshot


@dataclass
class BrowserState:
    snapshot: Snapshot
    cursor: int = 0
    status_message: str = ""
    running: bool = True
