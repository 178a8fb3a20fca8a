"""
Device registry.
Resolves the single active device identifier from ``adb devices`` output.
"""

import logging
from typing import Optional

from .adb_command import ADBCommandRunner, ADBLaunchError

logger = logging.getLogger(__name__)

# Sentinel identifiers. They are shown to the user verbatim in place of a serial.
NO_DEVICES_FOUND = "No devices found"
NO_VALID_DEVICE = "No valid device"
BRIDGE_UNAVAILABLE = "Device bridge unavailable"

SENTINELS = frozenset({NO_DEVICES_FOUND, NO_VALID_DEVICE, BRIDGE_UNAVAILABLE})


def is_sentinel(device: Optional[str]) -> bool:
    """Return True if ``device`` denotes absence rather than a real device."""
    return not device or device in SENTINELS


def parse_device_list(output: str) -> str:
    """Pick the first device identifier out of ``adb devices`` output.

    The first line is always the "List of devices attached" header. Only
    the first device line is looked at; any further devices are ignored.
    """
    lines = output.splitlines()
    if len(lines) < 2:
        return NO_DEVICES_FOUND
    fields = lines[1].split()
    if not fields:
        return NO_VALID_DEVICE
    return fields[0]


class DeviceRegistry:
    """Queries adb for attached devices."""

    def __init__(self, runner: Optional[ADBCommandRunner] = None,
                 timeout: Optional[float] = None):
        self.runner = runner or ADBCommandRunner()
        self.timeout = timeout

    def refresh_device(self) -> str:
        """Return the active device identifier, or a sentinel.

        Blocks until ``adb devices`` exits. A launch failure yields
        BRIDGE_UNAVAILABLE instead of raising.
        """
        try:
            output = self.runner.devices(timeout=self.timeout)
        except ADBLaunchError as e:
            logger.warning("Could not run adb devices: %s", e)
            return BRIDGE_UNAVAILABLE

        device = parse_device_list(output)
        logger.info("Device refresh resolved to %r", device)
        return device
