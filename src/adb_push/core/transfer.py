"""
Transfer orchestration.
Pushes a batch of local files to one remote directory, one adb call per file.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..config import DEFAULT_REMOTE_ROOT
from .adb_command import ADBCommandRunner, ADBLaunchError

logger = logging.getLogger(__name__)

REMOTE_ROOT = DEFAULT_REMOTE_ROOT


def build_destination(target_fragment: str, remote_root: str = REMOTE_ROOT) -> str:
    """Append the user's fragment to the remote root exactly as typed."""
    return f"{remote_root}{target_fragment}"


@dataclass(frozen=True)
class TransferOutcome:
    """Result of one attempted push."""

    source: str
    destination: str
    output: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_log_line(self) -> str:
        if self.succeeded:
            return f'Sent "{self.source}" to "{self.destination}": {self.output or ""}'
        return f'Failed to send "{self.source}": {self.error}'


class TransferOrchestrator:
    """Runs a batch of pushes. Keeps no state between batches."""

    def __init__(self, runner: Optional[ADBCommandRunner] = None,
                 remote_root: str = REMOTE_ROOT,
                 timeout: Optional[float] = None):
        self.runner = runner or ADBCommandRunner()
        self.remote_root = remote_root
        self.timeout = timeout

    def push_one(self, source: str, destination: str) -> TransferOutcome:
        """Push a single file and describe what happened."""
        try:
            result = self.runner.push(source, destination, timeout=self.timeout)
        except ADBLaunchError as e:
            logger.error("Failed to send %s: %s", source, e)
            return TransferOutcome(source=source, destination=destination, error=str(e))

        # Only a launch failure counts as an error; adb's own exit status is informational.
        if result.returncode != 0:
            logger.debug("adb push %s exited with %s: %s",
                         source, result.returncode, (result.stderr or "").strip())
        logger.info("Sent %s to %s", source, destination)
        return TransferOutcome(source=source, destination=destination, output=result.stdout)

    def send_files(self, pending: Iterable[str], device: str, target_fragment: str,
                   on_outcome: Optional[Callable[[TransferOutcome], None]] = None
                   ) -> List[TransferOutcome]:
        """Push every pending file, in order, to the same destination.

        ``device`` has already been checked by the caller. Every file is
        attempted; a failure never stops the batch.

        Args:
            pending: Local file paths in drop order
            device: Active device identifier
            target_fragment: Directory fragment appended to the remote root
            on_outcome: Called with each outcome as soon as it is known

        Returns:
            One TransferOutcome per pending file, in the same order
        """
        destination = build_destination(target_fragment, self.remote_root)
        files = list(pending)
        logger.info("Sending %d file(s) to %s on %s", len(files), destination, device)

        outcomes = []
        for source in files:
            outcome = self.push_one(str(source), destination)
            outcomes.append(outcome)
            if on_outcome:
                on_outcome(outcome)
        return outcomes
