"""
Application State Module
The in-memory state shared by the GUI and the background transfer thread.
"""

import threading
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable copy of AppState for rendering."""

    pending: Tuple[str, ...]
    device: str
    target_fragment: str
    output: Tuple[str, ...]
    sending: bool
    refreshing: bool
    installing: bool


class AppState:
    """Pending files, active device, target fragment and output log.

    Every read or write of more than one field goes through ``lock``.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.pending: List[str] = []
        self.device: str = ""
        self.target_fragment: str = ""
        self.output: List[str] = []
        self.sending: bool = False
        self.refreshing: bool = False
        self.installing: bool = False
        # Bumped by every clear of the pending list; a batch only removes
        # its own files if no clear happened while it ran.
        self.pending_generation: int = 0

    def append_output(self, line: str) -> None:
        with self.lock:
            self.output.append(line)

    def snapshot(self) -> StateSnapshot:
        with self.lock:
            return StateSnapshot(
                pending=tuple(self.pending),
                device=self.device,
                target_fragment=self.target_fragment,
                output=tuple(self.output),
                sending=self.sending,
                refreshing=self.refreshing,
                installing=self.installing,
            )
