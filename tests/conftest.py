"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile
from pathlib import Path

import pytest

from ezsymlink.core.config import get_runtime_config
from ezsymlink.core.engine import LinkProvisioningEngine


def _symlinks_supported() -> bool:
    with tempfile.TemporaryDirectory() as scratch:
        target = Path(scratch) / "target"
        target.mkdir()
        try:
            os.symlink(target, Path(scratch) / "link", target_is_directory=True)
        except (OSError, NotImplementedError):
            return False
    return True


SYMLINKS_SUPPORTED = _symlinks_supported()

requires_symlinks = pytest.mark.skipif(
    not SYMLINKS_SUPPORTED,
    reason="creating symlinks is not permitted for this user/platform",
)


def pytest_collection_modifyitems(config, items):
    """Mark every test without an explicit marker as a unit test."""
    for item in items:
        if not any(item.iter_markers(name="integration")):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _fresh_runtime_config():
    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()


@pytest.fixture
def engine():
    return LinkProvisioningEngine()


@pytest.fixture
def source_dir(tmp_path):
    """A source directory holding x.txt."""
    source = tmp_path / "a"
    source.mkdir()
    (source / "x.txt").write_text("from source")
    return source


@pytest.fixture
def existing_destination(tmp_path):
    """A destination directory holding y.txt and a nested file."""
    destination = tmp_path / "b"
    (destination / "nested").mkdir(parents=True)
    (destination / "y.txt").write_text("from destination")
    (destination / "nested" / "z.txt").write_text("deep")
    return destination
