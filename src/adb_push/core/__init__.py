"""Core adb process handling, device discovery and transfer orchestration."""
