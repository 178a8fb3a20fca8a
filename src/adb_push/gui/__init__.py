"""
GUI Package for ADB Push
Provides the Tkinter drop-target window.
"""

from .main_window import AdbPushGUI, main

__all__ = [
    "AdbPushGUI",
    "main",
]
