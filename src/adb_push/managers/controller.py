"""
Controller Module
Owns the application state and is the only entry point the GUI uses to change it.
"""

import queue
import threading
from typing import Any, Iterable, List, Optional, Tuple

from ..config import AppConfig
from ..core.adb_command import ADBCommandRunner
from ..core.device_registry import DeviceRegistry
from ..core.transfer import TransferOrchestrator, TransferOutcome
from .app_state import AppState, StateSnapshot
from .device_manager import DeviceManager
from .transfer_manager import TransferManager


class PushController:
    """Wires the device and transfer managers to one AppState.

    Background threads never touch the GUI. They put (kind, payload)
    events on ``events`` and the GUI drains them from its own loop.
    """

    def __init__(self, config: Optional[AppConfig] = None,
                 runner: Optional[ADBCommandRunner] = None):
        self.config = config or AppConfig()
        self.state = AppState()
        self.events: "queue.Queue[Tuple[str, Any]]" = queue.Queue()

        runner = runner or ADBCommandRunner()
        self.device_manager = DeviceManager(
            self.state,
            DeviceRegistry(runner, timeout=self.config.devices_timeout),
            self._notify,
        )
        self.transfer_manager = TransferManager(
            self.state,
            TransferOrchestrator(runner, remote_root=self.config.remote_root,
                                 timeout=self.config.push_timeout),
            self._notify,
        )

    def _notify(self, kind: str, payload: Any = None) -> None:
        self.events.put((kind, payload))

    def drain_events(self) -> List[Tuple[str, Any]]:
        """Return every queued event without blocking."""
        drained = []
        while True:
            try:
                drained.append(self.events.get_nowait())
            except queue.Empty:
                return drained

    def snapshot(self) -> StateSnapshot:
        return self.state.snapshot()

    def refresh_device(self) -> str:
        return self.device_manager.refresh()

    def start_refresh(self) -> Optional[threading.Thread]:
        return self.device_manager.start_refresh()

    def start_install(self) -> Optional[threading.Thread]:
        return self.device_manager.start_install()

    def drop_files(self, paths: Iterable[str]) -> int:
        return self.transfer_manager.add_dropped_paths(paths)

    def set_target_fragment(self, fragment: str) -> None:
        self.transfer_manager.set_target_fragment(fragment)

    def send(self) -> List[TransferOutcome]:
        return self.transfer_manager.send()

    def start_send(self) -> Optional[threading.Thread]:
        return self.transfer_manager.start_send()

    def clear_pending(self) -> None:
        self.transfer_manager.clear_pending()

    def clear_output(self) -> None:
        self.transfer_manager.clear_output()
