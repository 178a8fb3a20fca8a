"""Tests for device manager functionality."""

from unittest.mock import MagicMock, patch

import threading
import zipfile

import pytest
import requests

from adb_push.core.device_registry import (
    BRIDGE_UNAVAILABLE,
    NO_DEVICES_FOUND,
    DeviceRegistry,
)
from adb_push.managers.app_state import AppState
from adb_push.managers.device_manager import DeviceManager


class TestDeviceManager:
    """Test DeviceManager class functionality."""

    @pytest.fixture
    def registry(self):
        registry = MagicMock(spec=DeviceRegistry)
        registry.refresh_device.return_value = "ABC123"
        return registry

    @pytest.fixture
    def notify(self):
        return MagicMock()

    @pytest.fixture
    def device_manager(self, registry, notify):
        return DeviceManager(AppState(), registry, notify)

    def test_refresh_stores_device(self, device_manager, notify):
        assert device_manager.refresh() == "ABC123"
        assert device_manager.state.device == "ABC123"
        notify.assert_called_with("device", "ABC123")

    def test_last_refresh_wins(self, device_manager, registry):
        registry.refresh_device.side_effect = ["ABC123", NO_DEVICES_FOUND]

        device_manager.refresh()
        device_manager.refresh()

        assert device_manager.state.device == NO_DEVICES_FOUND
        assert device_manager.state.output == []

    def test_bridge_unavailable_is_logged(self, device_manager, registry):
        registry.refresh_device.return_value = BRIDGE_UNAVAILABLE

        device_manager.refresh()

        assert device_manager.state.device == BRIDGE_UNAVAILABLE
        assert len(device_manager.state.output) == 1
        assert "adb could not be started" in device_manager.state.output[0]

    def test_without_notify_callback(self, registry):
        manager = DeviceManager(AppState(), registry)
        assert manager.refresh() == "ABC123"

    def test_start_refresh_runs_in_background(self, device_manager):
        thread = device_manager.start_refresh()
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert device_manager.state.device == "ABC123"

    @patch('adb_push.managers.device_manager.install_platform_tools',
           return_value='/data/platform-tools/adb')
    def test_install_success_refreshes(self, mock_install, device_manager, registry):
        assert device_manager.install_platform_tools() is True

        registry.refresh_device.assert_called_once()
        assert device_manager.state.device == "ABC123"
        assert device_manager.state.output == [
            "Downloading Android platform-tools...",
            "Installed adb at /data/platform-tools/adb",
        ]

    @pytest.mark.parametrize("error", [
        requests.ConnectionError("offline"),
        RuntimeError("Downloaded file is not a valid zip archive"),
        OSError("disk full"),
        zipfile.BadZipFile("Bad CRC-32 for file 'platform-tools/adb'"),
    ])
    def test_install_failure_is_logged(self, device_manager, registry, error):
        with patch('adb_push.managers.device_manager.install_platform_tools', side_effect=error):
            assert device_manager.install_platform_tools() is False

        registry.refresh_device.assert_not_called()
        assert device_manager.state.output[-1] == f"Failed to install platform-tools: {error}"


class TestExclusiveJobs:
    """A second Refresh or Install click is ignored while the first one runs."""

    @pytest.fixture
    def blocked_registry(self):
        release = threading.Event()
        started = threading.Event()

        def slow_refresh():
            started.set()
            release.wait(timeout=5)
            return "ABC123"

        registry = MagicMock(spec=DeviceRegistry)
        registry.refresh_device.side_effect = slow_refresh
        return registry, started, release

    def test_second_refresh_is_refused(self, blocked_registry):
        registry, started, release = blocked_registry
        manager = DeviceManager(AppState(), registry)

        thread = manager.start_refresh()
        assert started.wait(timeout=5)
        assert manager.state.refreshing is True
        assert manager.start_refresh() is None
        release.set()
        thread.join(timeout=5)

        assert registry.refresh_device.call_count == 1
        assert manager.state.refreshing is False
        assert manager.start_refresh() is not None

    def test_second_install_is_refused(self):
        release = threading.Event()
        started = threading.Event()

        def slow_install():
            started.set()
            release.wait(timeout=5)
            return '/data/platform-tools/adb'

        notify = MagicMock()
        registry = MagicMock(spec=DeviceRegistry)
        registry.refresh_device.return_value = "ABC123"
        manager = DeviceManager(AppState(), registry, notify)

        with patch('adb_push.managers.device_manager.install_platform_tools',
                   side_effect=slow_install) as mock_install:
            thread = manager.start_install()
            assert started.wait(timeout=5)
            assert manager.state.installing is True
            assert manager.start_install() is None
            release.set()
            thread.join(timeout=5)

        mock_install.assert_called_once()
        assert manager.state.installing is False
        assert notify.call_args_list[0].args == ("installing", True)
        assert notify.call_args_list[-1].args == ("installing", False)

    def test_flag_reset_when_job_raises(self):
        registry = MagicMock(spec=DeviceRegistry)
        registry.refresh_device.side_effect = ValueError("boom")
        manager = DeviceManager(AppState(), registry)

        with patch('threading.excepthook'):
            manager.start_refresh().join(timeout=5)

        assert manager.state.refreshing is False
