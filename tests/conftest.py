"""
Pytest configuration and shared fixtures for installer-options tests.

This module provides common fixtures and utilities used across all test modules.
"""

from pathlib import Path
from typing import Any, Dict, List

import pytest

from installer_options.config import settings
from installer_options.domain import Disk, InstallerOptions


MIB = 1024 * 1024


# ==============================================================================
# Disk Fixtures
# ==============================================================================


@pytest.fixture
def small_disk() -> Disk:
    """Fixture providing a 64 MiB disk, below the fixed-reservation threshold."""
    return Disk(path="/dev/sda", size=64 * MIB)


@pytest.fixture
def large_disk() -> Disk:
    """Fixture providing a 256 MiB disk, above the fixed-reservation threshold."""
    return Disk(path="/dev/sdb", size=256 * MIB)


@pytest.fixture
def disk_pool(large_disk, small_disk) -> List[Disk]:
    """Fixture providing a discovered pool of two disks, large one first."""
    return [large_disk, small_disk]


@pytest.fixture
def mock_lsblk_device() -> Dict[str, Any]:
    """
    Fixture providing a disk record as returned by ``lsblk --bytes --json``.

    Returns:
        Dict with the keys Disk.from_lsblk_dict reads.
    """
    return {
        "name": "nvme0n1",
        "path": "/dev/nvme0n1",
        "size": "512110190592",
        "type": "disk",
        "model": "Samsung SSD 970 EVO Plus 500GB",
    }


@pytest.fixture
def default_options(disk_pool) -> InstallerOptions:
    """Fixture providing a fully defaulted configuration."""
    return InstallerOptions.defaults_from(disk_pool)


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def temp_settings_file(tmp_path) -> Path:
    """
    Fixture providing a temporary settings file path.

    Args:
        tmp_path: pytest's built-in temporary directory fixture.

    Returns:
        Path to a temporary settings file.
    """
    settings_dir = tmp_path / ".config" / "installer-options"
    settings_dir.mkdir(parents=True, exist_ok=True)
    return settings_dir / "settings.json"


@pytest.fixture(autouse=True)
def reset_settings():
    """
    Auto-use fixture that restores built-in settings around each test.

    Option group defaults read from the settings store, so a user settings
    file on the test machine must not leak into the tests.
    """
    settings.settings_store.values = dict(settings.DEFAULT_SETTINGS)
    yield
    settings.settings_store.values = dict(settings.DEFAULT_SETTINGS)
