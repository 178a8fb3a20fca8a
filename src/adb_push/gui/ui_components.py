"""
UI Components Module
Contains the panes that make up the ADB Push window.
"""

import tkinter as tk
from tkinter import scrolledtext
from typing import Callable, Sequence


class DeviceStatusFrame:
    """Shows the active device with Refresh and Install ADB buttons."""

    def __init__(self, parent: tk.Widget, refresh_command: Callable,
                 install_command: Callable):
        """Initialize the device status frame.

        Args:
            parent: Parent widget
            refresh_command: Command to execute when Refresh is clicked
            install_command: Command to execute when Install ADB is clicked
        """
        self.frame = tk.LabelFrame(parent, text="Device")
        self.frame.pack(fill="x", padx=10, pady=(10, 0))

        tk.Label(self.frame, text="Device Connected:").pack(side="left", padx=(5, 0))

        self.device_var = tk.StringVar(value="Checking...")
        tk.Label(
            self.frame,
            textvariable=self.device_var,
            font=("TkDefaultFont", 10, "bold"),
        ).pack(side="left", padx=(5, 0))

        self.refresh_btn = tk.Button(self.frame, text="Refresh", command=refresh_command)
        self.refresh_btn.pack(side="right", padx=5, pady=5)

        self.install_btn = tk.Button(self.frame, text="Install ADB", command=install_command)
        self._install_visible = False

    def set_device(self, device: str) -> None:
        self.device_var.set(device)

    def show_install(self, visible: bool) -> None:
        """Show the Install ADB button only while adb cannot be launched."""
        if visible and not self._install_visible:
            self.install_btn.pack(side="right", pady=5)
        elif not visible and self._install_visible:
            self.install_btn.pack_forget()
        self._install_visible = visible

    def set_busy(self, refreshing: bool, installing: bool) -> None:
        """Disable each button while its own background job runs."""
        self.refresh_btn.config(state="disabled" if refreshing else "normal")
        self.install_btn.config(
            state="disabled" if installing else "normal",
            text="Installing..." if installing else "Install ADB",
        )


class FileListPane:
    """Lists the files waiting to be sent."""

    PLACEHOLDER = "No files dropped yet."

    def __init__(self, parent: tk.Widget, clear_command: Callable):
        self.frame = tk.LabelFrame(parent, text="Dropped Files")
        self.frame.pack(fill="both", expand=True, padx=10, pady=(10, 0))

        self.placeholder = tk.Label(self.frame, text=self.PLACEHOLDER, anchor="w")

        self.list_frame = tk.Frame(self.frame)
        scrollbar = tk.Scrollbar(self.list_frame, orient="vertical")
        self.listbox = tk.Listbox(self.list_frame, height=8, yscrollcommand=scrollbar.set)
        scrollbar.config(command=self.listbox.yview)
        scrollbar.pack(side="right", fill="y")
        self.listbox.pack(side="left", fill="both", expand=True)

        self.clear_btn = tk.Button(self.frame, text="Clear files", command=clear_command)
        self._showing_files = None
        self.set_files(())

    def set_files(self, files: Sequence[str]) -> None:
        has_files = bool(files)
        if has_files != self._showing_files:
            if has_files:
                self.placeholder.pack_forget()
                self.list_frame.pack(fill="both", expand=True, padx=5, pady=5)
                self.clear_btn.pack(anchor="e", padx=5, pady=(0, 5))
            else:
                self.list_frame.pack_forget()
                self.clear_btn.pack_forget()
                self.placeholder.pack(fill="x", padx=5, pady=5)
            self._showing_files = has_files

        self.listbox.delete(0, tk.END)
        for path in files:
            self.listbox.insert(tk.END, path)


class TargetPathFrame:
    """Remote root label, target fragment entry and Send button."""

    def __init__(self, parent: tk.Widget, remote_root: str,
                 on_fragment_change: Callable[[str], None], send_command: Callable):
        self.frame = tk.LabelFrame(parent, text="Target")
        self.frame.pack(fill="x", padx=10, pady=(10, 0))

        tk.Label(self.frame, text=remote_root).pack(side="left", padx=(5, 0))

        self.fragment_var = tk.StringVar(value="")
        self.fragment_var.trace_add(
            "write", lambda *_: on_fragment_change(self.fragment_var.get())
        )
        self.entry = tk.Entry(self.frame, textvariable=self.fragment_var)
        self.entry.pack(side="left", fill="x", expand=True, padx=5, pady=5)

        self.send_btn = tk.Button(self.frame, text="Send", command=send_command)
        self.send_btn.pack(side="right", padx=5, pady=5)

    def set_sending(self, sending: bool) -> None:
        """Disable Send while a batch is running."""
        self.send_btn.config(
            state="disabled" if sending else "normal",
            text="Sending..." if sending else "Send",
        )


class OutputLogPane:
    """Read-only monospace view of the output log."""

    PLACEHOLDER = "No logs yet."

    def __init__(self, parent: tk.Widget, clear_command: Callable):
        self.frame = tk.LabelFrame(parent, text="Output Logs")
        self.frame.pack(fill="both", expand=True, padx=10, pady=10)

        self.text = scrolledtext.ScrolledText(
            self.frame, height=10, wrap="word", font=("TkFixedFont", 9), state="disabled"
        )
        self.text.pack(fill="both", expand=True, padx=5, pady=5)

        self.clear_btn = tk.Button(self.frame, text="Clear Output", command=clear_command)
        self.clear_btn.pack(anchor="e", padx=5, pady=(0, 5))

    def set_lines(self, lines: Sequence[str]) -> None:
        self.text.config(state="normal")
        self.text.delete("1.0", tk.END)
        self.text.insert(tk.END, "\n".join(lines) if lines else self.PLACEHOLDER)
        self.text.see(tk.END)
        self.text.config(state="disabled")
