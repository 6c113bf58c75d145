"""Tests for opening a location in the platform file manager."""

import subprocess
import sys

import pytest

from ezsymlink.core import system_open
from ezsymlink.core.outcomes import Error, Success


class TestFileManagerCommand:
    @pytest.mark.parametrize(
        ("platform", "command", "label"),
        [
            ("win32", "explorer", "file explorer"),
            ("darwin", "open", "Finder"),
            ("linux", "xdg-open", "file manager"),
        ],
    )
    def test_platform_command(self, monkeypatch, platform, command, label):
        monkeypatch.setattr(sys, "platform", platform)

        argv, name = system_open.file_manager_command("/data")

        assert argv == [command, "/data"]
        assert name == label


class TestOpenLocation:
    def test_missing_path(self, tmp_path):
        outcome = system_open.open_location(tmp_path / "ghost")

        assert outcome == Error("Path does not exist", "path_not_found")

    def test_empty_path(self):
        assert isinstance(system_open.open_location(""), Error)

    def test_spawns_without_waiting(self, tmp_path, monkeypatch):
        spawned = []

        def fake_popen(command, **kwargs):
            spawned.append(command)

        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(subprocess, "Popen", fake_popen)

        outcome = system_open.open_location(tmp_path)

        assert spawned == [["xdg-open", str(tmp_path)]]
        assert outcome == Success(f"Opened {tmp_path}")

    def test_spawn_failure_becomes_error(self, tmp_path, monkeypatch):
        def fail(*_args, **_kwargs):
            raise FileNotFoundError("xdg-open not found")

        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(subprocess, "Popen", fail)

        outcome = system_open.open_location(tmp_path)

        assert isinstance(outcome, Error)
        assert outcome.message == "Failed to open file manager (xdg-open not found)"
