"""
ADB command execution.
Runs the adb binary synchronously and captures its output as text.
"""

import logging
import subprocess
from typing import Callable, List, Optional

from .platform_tools import get_adb_binary_path

logger = logging.getLogger(__name__)


class ADBLaunchError(RuntimeError):
    """The adb process could not be started, or did not finish in time."""


class ADBCommandRunner:
    """Handles ADB command execution."""

    def __init__(self, binary_resolver: Callable[[], str] = get_adb_binary_path):
        self.binary_resolver = binary_resolver

    def run(self, args: List[str], timeout: Optional[float] = None) -> subprocess.CompletedProcess:
        """Run ``adb <args>`` to completion and return the finished process.

        The exit status is not checked; callers decide what it means.
        Raises ADBLaunchError if the process cannot be launched or the
        timeout elapses.
        """
        cmd = [self.binary_resolver()] + list(args)
        logger.debug("Running %s", cmd)
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ADBLaunchError(f"{cmd[0]} timed out after {timeout} seconds") from e
        except OSError as e:
            raise ADBLaunchError(str(e)) from e

    def devices(self, timeout: Optional[float] = None) -> str:
        """Return the raw standard output of ``adb devices``."""
        return self.run(["devices"], timeout=timeout).stdout

    def push(self, source: str, destination: str,
             timeout: Optional[float] = None) -> subprocess.CompletedProcess:
        """Run ``adb push <source> <destination>``."""
        return self.run(["push", source, destination], timeout=timeout)
