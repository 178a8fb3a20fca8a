"""
Transfer Manager Module
Stages dropped files and runs push batches against the shared AppState.
"""

import logging
import os
import threading
from typing import Callable, Iterable, List, Optional, Tuple

from ..core.device_registry import is_sentinel
from ..core.transfer import TransferOrchestrator, TransferOutcome
from .app_state import AppState

logger = logging.getLogger(__name__)

Notify = Callable[[str, object], None]

NO_FILES_MESSAGE = "No files to send."
NO_DEVICE_MESSAGE = "No valid device connected."
BUSY_MESSAGE = "A transfer is already in progress."


class TransferManager:
    """Manages the pending set and push batches."""

    def __init__(self, state: AppState, orchestrator: TransferOrchestrator,
                 notify: Optional[Notify] = None):
        """Initialize the transfer manager.

        Args:
            state: Shared application state
            orchestrator: Runs the per-file adb pushes
            notify: Callback receiving (event kind, payload) pairs
        """
        self.state = state
        self.orchestrator = orchestrator
        self.notify = notify

    def add_dropped_paths(self, paths: Iterable[str]) -> int:
        """Stage dropped paths in drop order. Directories are rejected.

        Returns:
            Number of files added to the pending set
        """
        added = 0
        for path in paths:
            path = str(path)
            if os.path.isdir(path):
                self._log(f"{path} is a directory")
                continue
            with self.state.lock:
                self.state.pending.append(path)
            added += 1
        if added:
            self._notify("pending")
        return added

    def set_target_fragment(self, fragment: str) -> None:
        with self.state.lock:
            self.state.target_fragment = fragment

    def clear_pending(self) -> None:
        with self.state.lock:
            self.state.pending.clear()
            self.state.pending_generation += 1
        self._notify("pending")

    def clear_output(self) -> None:
        with self.state.lock:
            self.state.output.clear()
        self._notify("output")

    def send(self) -> List[TransferOutcome]:
        """Check preconditions and run one batch on the calling thread."""
        batch = self._begin_batch()
        if batch is None:
            return []
        return self._run_batch(*batch)

    def start_send(self) -> Optional[threading.Thread]:
        """Check preconditions and run one batch on a background thread.

        Returns:
            The worker thread, or None if the batch was refused
        """
        batch = self._begin_batch()
        if batch is None:
            return None
        thread = threading.Thread(target=self._run_batch, args=batch, daemon=True)
        thread.start()
        return thread

    def _begin_batch(self) -> Optional[Tuple[List[str], str, str, int]]:
        """Validate preconditions and move the state to sending.

        Returns:
            (files, device, target fragment, pending generation) for the batch, or None
        """
        with self.state.lock:
            if self.state.sending:
                message = BUSY_MESSAGE
            elif not self.state.pending:
                message = NO_FILES_MESSAGE
            elif is_sentinel(self.state.device):
                message = NO_DEVICE_MESSAGE
            else:
                self.state.sending = True
                batch = (list(self.state.pending), self.state.device,
                         self.state.target_fragment, self.state.pending_generation)
                message = None

        if message:
            self._log(message)
            return None
        self._notify("sending", True)
        return batch

    def _run_batch(self, files: List[str], device: str, fragment: str,
                   generation: int) -> List[TransferOutcome]:
        outcomes: List[TransferOutcome] = []
        try:
            outcomes = self.orchestrator.send_files(
                files, device, fragment, on_outcome=self._record_outcome
            )
        except Exception as e:
            logger.exception("Transfer batch failed")
            self._log(f"Transfer error: {e}")
        finally:
            with self.state.lock:
                # Files dropped while the batch ran stay pending for the next one.
                # After a mid-batch clear the batch files are already gone.
                if self.state.pending_generation == generation:
                    del self.state.pending[:len(files)]
                self.state.sending = False
            self._notify("pending")
            self._notify("sending", False)
        return outcomes

    def _record_outcome(self, outcome: TransferOutcome) -> None:
        self._log(outcome.to_log_line())

    def _log(self, line: str) -> None:
        self.state.append_output(line)
        self._notify("log", line)

    def _notify(self, kind: str, payload: object = None) -> None:
        if self.notify:
            self.notify(kind, payload)
