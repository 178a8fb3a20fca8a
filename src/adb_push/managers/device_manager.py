"""
Device Manager Module
Keeps the active device identifier in AppState up to date.
"""

import logging
import threading
import zipfile
from typing import Callable, Optional

import requests

from ..core.device_registry import BRIDGE_UNAVAILABLE, DeviceRegistry
from ..core.platform_tools import install_platform_tools
from .app_state import AppState

logger = logging.getLogger(__name__)

Notify = Callable[[str, object], None]


class DeviceManager:
    """Refreshes the device identifier and bootstraps adb when it is missing."""

    def __init__(self, state: AppState, registry: DeviceRegistry,
                 notify: Optional[Notify] = None):
        """Initialize the device manager.

        Args:
            state: Shared application state
            registry: Registry used to query adb
            notify: Callback receiving (event kind, payload) pairs
        """
        self.state = state
        self.registry = registry
        self.notify = notify
        # Serialises adb devices calls so results land in request order.
        self._refresh_lock = threading.Lock()

    def refresh(self) -> str:
        """Query adb and store the resolved identifier. The last refresh wins."""
        with self._refresh_lock:
            device = self.registry.refresh_device()
            with self.state.lock:
                self.state.device = device
        if device == BRIDGE_UNAVAILABLE:
            self._log("adb could not be started. Install Android platform-tools "
                      "or put adb on your PATH, then press Refresh.")
        self._notify("device", device)
        return device

    def start_refresh(self) -> Optional[threading.Thread]:
        """Run refresh() on a background thread.

        Returns:
            The worker thread, or None if a refresh is already running
        """
        return self._start_exclusive("refreshing", self.refresh)

    def install_platform_tools(self) -> bool:
        """Download platform-tools, then refresh the device.

        Returns:
            True if adb was installed, False otherwise
        """
        self._log("Downloading Android platform-tools...")
        try:
            adb_path = install_platform_tools()
        except (requests.RequestException, zipfile.BadZipFile, RuntimeError, OSError) as e:
            logger.error("platform-tools install failed: %s", e)
            self._log(f"Failed to install platform-tools: {e}")
            return False

        self._log(f"Installed adb at {adb_path}")
        self.refresh()
        return True

    def start_install(self) -> Optional[threading.Thread]:
        """Run install_platform_tools() on a background thread.

        Returns:
            The worker thread, or None if an install is already running
        """
        return self._start_exclusive("installing", self.install_platform_tools)

    def _start_exclusive(self, flag: str, target: Callable[[], object]) -> Optional[threading.Thread]:
        """Start ``target`` on a daemon thread unless ``flag`` is already set in state."""
        with self.state.lock:
            if getattr(self.state, flag):
                logger.debug("Ignoring request, %s already in progress", flag)
                return None
            setattr(self.state, flag, True)
        self._notify(flag, True)

        def run():
            try:
                target()
            finally:
                with self.state.lock:
                    setattr(self.state, flag, False)
                self._notify(flag, False)

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        return thread

    def _log(self, line: str) -> None:
        self.state.append_output(line)
        self._notify("log", line)

    def _notify(self, kind: str, payload: object = None) -> None:
        if self.notify:
            self.notify(kind, payload)
