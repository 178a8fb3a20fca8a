"""
Application Configuration
In-code settings for ADB Push. Nothing here is read from disk or the environment.
"""

from dataclasses import dataclass
from typing import Optional

APP_NAME = "adb-push"
WINDOW_TITLE = "ADB Push"

# All push destinations are rooted here; the user's target fragment is appended verbatim.
DEFAULT_REMOTE_ROOT = "/storage/emulated/0/"

# `adb devices` should answer quickly; a hung daemon must not block refresh forever.
DEVICES_TIMEOUT_SECONDS = 15


@dataclass
class AppConfig:
    """Settings shared by the controller and the GUI."""

    remote_root: str = DEFAULT_REMOTE_ROOT
    devices_timeout: Optional[float] = DEVICES_TIMEOUT_SECONDS
    # None keeps the literal behaviour: a push runs until adb exits.
    push_timeout: Optional[float] = None
    window_title: str = WINDOW_TITLE
    window_size: str = "600x800"
    poll_interval_ms: int = 100
