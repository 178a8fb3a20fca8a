"""
ADB platform tools management.
Locates the adb binary and installs Google's platform-tools when it is missing.
"""

import logging
import os
import shutil
import tempfile
import zipfile
from typing import Optional

import requests

from .platform_utils import (
    get_adb_binary_name,
    get_platform_tools_directory,
    is_linux,
    is_macos,
    is_windows,
)

logger = logging.getLogger(__name__)

# Archive locations, one per supported platform
ADB_WIN_ZIP_URL = (
    "https://dl.google.com/android/repository/platform-tools-latest-windows.zip"
)
ADB_LINUX_ZIP_URL = (
    "https://dl.google.com/android/repository/platform-tools-latest-linux.zip"
)
ADB_DARWIN_ZIP_URL = (
    "https://dl.google.com/android/repository/platform-tools-latest-darwin.zip"
)
TRUSTED_DOWNLOAD_PREFIX = "https://dl.google.com/android/"

MAX_DOWNLOAD_BYTES = 200 * 1024 * 1024
MAX_EXTRACTED_BYTES = 500 * 1024 * 1024


def get_download_url() -> str:
    """Return the platform-tools archive URL for the running platform."""
    if is_linux():
        return ADB_LINUX_ZIP_URL
    if is_windows():
        return ADB_WIN_ZIP_URL
    if is_macos():
        return ADB_DARWIN_ZIP_URL
    raise RuntimeError("Unsupported platform for platform-tools download")


def get_installed_adb_path() -> str:
    """Path the adb binary has when installed by install_platform_tools()."""
    return os.path.join(get_platform_tools_directory(), get_adb_binary_name())


def find_adb_binary() -> Optional[str]:
    """Find an adb binary, preferring one on PATH over our own install."""
    on_path = shutil.which(get_adb_binary_name())
    if on_path:
        return on_path
    installed = get_installed_adb_path()
    if os.path.isfile(installed):
        return installed
    return None


def get_adb_binary_path() -> str:
    """Return the adb binary to execute.

    Falls back to the bare binary name so that a missing adb shows up as a
    launch failure at call time rather than here.
    """
    return find_adb_binary() or get_adb_binary_name()


def is_adb_available() -> bool:
    """Check if an ADB binary can be found."""
    return find_adb_binary() is not None


def _download_archive(url: str, zip_path: str) -> None:
    resp = requests.get(url, stream=True, timeout=30, allow_redirects=True)
    resp.raise_for_status()

    # A redirect must still land on dl.google.com.
    if not resp.url.startswith(TRUSTED_DOWNLOAD_PREFIX):
        raise RuntimeError(f"Redirect to untrusted domain: {resp.url}")

    content_type = resp.headers.get("Content-Type", "")
    if content_type and "zip" not in content_type.lower() and "octet-stream" not in content_type.lower():
        raise RuntimeError(f"Unexpected content type: {content_type}")

    downloaded_size = 0
    with open(zip_path, "wb") as fh:
        for chunk in resp.iter_content(chunk_size=8192):
            if chunk:
                downloaded_size += len(chunk)
                if downloaded_size > MAX_DOWNLOAD_BYTES:
                    raise RuntimeError("Downloaded file exceeds maximum size limit")
                fh.write(chunk)


def _extract_archive(zip_path: str, dest_dir: str) -> None:
    if not zipfile.is_zipfile(zip_path):
        raise RuntimeError("Downloaded file is not a valid zip archive")

    try:
        with zipfile.ZipFile(zip_path, "r") as zf:
            total_size = sum(info.file_size for info in zf.infolist())
            if total_size > MAX_EXTRACTED_BYTES:
                raise RuntimeError("Zip archive uncompressed size exceeds safety limit")

            dest_with_sep = dest_dir if dest_dir.endswith(os.sep) else dest_dir + os.sep
            for info in zf.infolist():
                normalized = os.path.normpath(os.path.join(dest_dir, info.filename))
                if not (normalized.startswith(dest_with_sep) or normalized == dest_dir):
                    raise RuntimeError(f"Zip contains path traversal: {info.filename}")

            zf.extractall(dest_dir)
    except zipfile.BadZipFile as e:
        raise RuntimeError(f"Corrupt platform-tools archive: {e}") from e


def install_platform_tools() -> str:
    """Download platform-tools into the per-user data directory.

    Returns the absolute path of the installed adb binary. Raises
    ``requests.RequestException`` or ``RuntimeError`` when the download or
    the archive is unusable.
    """
    target_dir = get_platform_tools_directory()
    url = get_download_url()
    logger.info("Downloading platform-tools from %s", url)

    tmp_dir = tempfile.mkdtemp(prefix="platform-tools-")
    try:
        zip_path = os.path.join(tmp_dir, "platform-tools.zip")
        _download_archive(url, zip_path)

        extract_dir = os.path.join(tmp_dir, "extracted")
        os.makedirs(extract_dir)
        _extract_archive(zip_path, extract_dir)

        # Google ships everything under a single platform-tools/ folder.
        extracted = os.path.join(extract_dir, "platform-tools")
        if not os.path.isdir(extracted):
            raise RuntimeError("Platform-tools not found in archive")

        os.makedirs(os.path.dirname(target_dir), exist_ok=True)
        if os.path.isdir(target_dir):
            shutil.rmtree(target_dir)
        shutil.move(extracted, target_dir)

        adb_path = get_installed_adb_path()
        if not os.path.isfile(adb_path):
            raise RuntimeError("adb binary missing from platform-tools archive")
        if os.name == "posix":
            os.chmod(adb_path, 0o755)

        logger.info("Installed adb at %s", adb_path)
        return adb_path
    finally:
        shutil.rmtree(tmp_dir, ignore_errors=True)
