"""
Main Window Module
Drop-target window that stages files and sends them to the connected device.
"""

import logging
import tkinter as tk
from typing import Optional

from tkinterdnd2 import DND_FILES, TkinterDnD

from ..config import AppConfig
from ..core.device_registry import BRIDGE_UNAVAILABLE
from ..managers.controller import PushController
from .ui_components import DeviceStatusFrame, FileListPane, OutputLogPane, TargetPathFrame

logger = logging.getLogger(__name__)


class AdbPushGUI(TkinterDnD.Tk):
    """Main window. All state changes go through the PushController."""

    def __init__(self, controller: Optional[PushController] = None):
        super().__init__()
        self.controller = controller or PushController()
        self.app_config = self.controller.config

        self.title(self.app_config.window_title)
        self.geometry(self.app_config.window_size)
        self.minsize(480, 520)

        self._setup_main_ui()

        self.drop_target_register(DND_FILES)
        self.dnd_bind("<<Drop>>", self._on_drop)
        self.protocol("WM_DELETE_WINDOW", self.on_close)

        self._render()
        self.controller.start_refresh()
        self._poll_id = self.after(self.app_config.poll_interval_ms, self._poll_events)

    def _setup_main_ui(self):
        """Setup the main user interface."""
        tk.Label(
            self, text="ADB Push - File Transfer Tool", font=("TkDefaultFont", 14, "bold")
        ).pack(anchor="w", padx=10, pady=(10, 0))
        tk.Label(
            self, text="Drop files anywhere on this window. Larger files may take a while to transfer."
        ).pack(anchor="w", padx=10)

        self.device_frame = DeviceStatusFrame(
            self, self.controller.start_refresh, self.controller.start_install
        )
        self.file_pane = FileListPane(self, self.controller.clear_pending)
        self.target_frame = TargetPathFrame(
            self,
            self.app_config.remote_root,
            self.controller.set_target_fragment,
            self.controller.start_send,
        )
        self.output_pane = OutputLogPane(self, self.controller.clear_output)

    def _on_drop(self, event):
        paths = self.tk.splitlist(event.data)
        logger.debug("Dropped %d path(s)", len(paths))
        self.controller.drop_files(paths)
        return event.action

    def _poll_events(self):
        """Drain controller events and redraw if anything changed."""
        if self.controller.drain_events():
            self._render()
        self._poll_id = self.after(self.app_config.poll_interval_ms, self._poll_events)

    def _render(self):
        snapshot = self.controller.snapshot()
        self.device_frame.set_device(snapshot.device or "Checking...")
        self.device_frame.show_install(snapshot.device == BRIDGE_UNAVAILABLE or snapshot.installing)
        self.device_frame.set_busy(snapshot.refreshing, snapshot.installing)
        self.file_pane.set_files(snapshot.pending)
        self.target_frame.set_sending(snapshot.sending)
        self.output_pane.set_lines(snapshot.output)

    def on_close(self):
        """Handle window close event.

        A running batch is not cancelled; its daemon thread dies with the process.
        """
        self.after_cancel(self._poll_id)
        self.destroy()


def main(config: Optional[AppConfig] = None):
    """Main entry point for the application."""
    app = AdbPushGUI(PushController(config))
    app.mainloop()


if __name__ == "__main__":
    main()
