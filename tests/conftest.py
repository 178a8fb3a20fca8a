"""Pytest configuration and fixtures."""

import os
import subprocess
import sys
from unittest.mock import MagicMock

import pytest

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


def make_completed(stdout="", stderr="", returncode=0, args=None):
    """Build a finished process like the one subprocess.run returns."""
    return subprocess.CompletedProcess(args or ['adb'], returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def completed():
    """Factory for fake subprocess.CompletedProcess results."""
    return make_completed


@pytest.fixture
def mock_runner():
    """An ADBCommandRunner stand-in that never spawns adb."""
    from adb_push.core.adb_command import ADBCommandRunner

    runner = MagicMock(spec=ADBCommandRunner)
    runner.push.return_value = make_completed(stdout="1 file pushed.")
    runner.devices.return_value = "List of devices attached\nABC123\tdevice\n"
    return runner


@pytest.fixture
def temp_directory(tmp_path):
    """Create a temporary directory for testing."""
    directory = tmp_path / "folder"
    directory.mkdir()
    return str(directory)


@pytest.fixture
def temp_file(tmp_path):
    """Create a temporary file for testing."""
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff")
    return str(path)
