"""Application state and the managers that mutate it."""

from .app_state import AppState, StateSnapshot
from .controller import PushController
from .device_manager import DeviceManager
from .transfer_manager import TransferManager

__all__ = [
    "AppState",
    "DeviceManager",
    "PushController",
    "StateSnapshot",
    "TransferManager",
]
