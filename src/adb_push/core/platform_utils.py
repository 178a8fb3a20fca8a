"""
Platform-specific utilities for ADB Push.
Handles platform detection and per-user directory resolution.
"""

import os
import sys

from platformdirs import user_data_dir

from ..config import APP_NAME


def get_platform_type() -> str:
    """Get the current platform type."""
    return sys.platform


def get_adb_binary_name() -> str:
    """Get the ADB binary name for current platform."""
    if is_windows():
        return "adb.exe"
    return "adb"


def get_platform_tools_directory() -> str:
    """Get the per-user directory that holds a downloaded platform-tools copy."""
    return os.path.join(user_data_dir(APP_NAME), "platform-tools")


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform.startswith("win")


def is_linux() -> bool:
    """Check if running on Linux."""
    return sys.platform.startswith("linux")


def is_macos() -> bool:
    """Check if running on macOS."""
    return sys.platform.startswith("darwin")
