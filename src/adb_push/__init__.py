"""
ADB Push - Package Initialization
Exposes the main components of the ADB Push drop-target application.
"""

from .config import AppConfig
from .core.device_registry import DeviceRegistry
from .core.transfer import REMOTE_ROOT, TransferOrchestrator, TransferOutcome
from .managers.controller import PushController

__all__ = [
    "AppConfig",
    "DeviceRegistry",
    "PushController",
    "REMOTE_ROOT",
    "TransferOrchestrator",
    "TransferOutcome",
]
