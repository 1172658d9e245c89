"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from fakes import MemoryRegistry
from recents.models.entry import RecentEntry
from recents.registry.store import FileRegistry


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and data directories into the test's tmp_path."""
    home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / "data"))
    return home


@pytest.fixture
def memory_registry() -> MemoryRegistry:
    """Empty in-memory registry."""
    return MemoryRegistry()


@pytest.fixture
def file_registry(tmp_path: Path) -> FileRegistry:
    """File registry stored under tmp_path."""
    return FileRegistry(path=tmp_path / "store" / "recent-files.jsonl")


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Directory holding a few files to register."""
    directory = tmp_path / "files"
    directory.mkdir()
    (directory / "notes.txt").write_text("notes")
    (directory / "report.pdf").write_bytes(b"%PDF-1.4")
    (directory / "archive.unknownext").write_bytes(b"\x00\x01")
    return directory


@pytest.fixture
def sample_entry() -> RecentEntry:
    """Entry for a plain text file."""
    return RecentEntry(
        uri="file:///home/user/notes.txt",
        display_name="/home/user/notes.txt",
        mime_type="text/plain",
        app_name="recents",
        app_exec="recents",
    )
