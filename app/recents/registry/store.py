"""File-backed recent files registry.

This module provides the FileRegistry class, which keeps the registry in
a JSON Lines file and rewrites it atomically on every change.
"""

import logging
import os
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path
from tempfile import NamedTemporaryFile

from recents.core.paths import ensure_data_dir, get_registry_path
from recents.models.entry import RecentEntry
from recents.registry.base import RegistryGateway

logger = logging.getLogger(__name__)


class FileRegistry(RegistryGateway):
    """Registry stored in a JSONL file.

    Storage location: ~/.local/share/recents/recent-files.jsonl

    Each line is a complete JSON object representing a RecentEntry. The
    file is never edited in place: every change writes a temporary file
    next to it and renames it over the original. There is no locking
    between processes; concurrent writers can lose each other's changes.

    Attributes:
        path: Registry file location.
    """

    def __init__(self, path: Path | None = None) -> None:
        """Initialize FileRegistry.

        Args:
            path: Optional override for the registry file.
                  Default: ~/.local/share/recents/recent-files.jsonl
        """
        self._path = path if path is not None else get_registry_path()

    @property
    def path(self) -> Path:
        """Path to the registry file."""
        return self._path

    def entries(self) -> list[RecentEntry]:
        """Read all entries in file order.

        Lines that are not UTF-8, not JSON or not a valid entry are skipped
        with a warning.

        Returns:
            List of RecentEntry. Empty list if the file doesn't exist.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        if not self._path.exists():
            return []

        entries: list[RecentEntry] = []

        with self._path.open("rb") as f:
            for line_num, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").strip()
                    if line:
                        entries.append(RecentEntry.from_json_line(line))
                except (UnicodeDecodeError, KeyError, TypeError, ValueError) as e:
                    logger.warning(
                        "Skipping corrupt registry line %d: %s",
                        line_num,
                        str(e),
                    )

        return entries

    def get(self, uri: str) -> RecentEntry | None:
        """Find an entry by URI.

        Args:
            uri: Entry key.

        Returns:
            RecentEntry if found, None otherwise.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        for entry in self.entries():
            if entry.uri == uri:
                return entry
        return None

    def exists(self, uri: str) -> bool:
        """Check whether an entry with this URI is registered.

        An unreadable registry holds nothing, so this returns False.
        """
        try:
            return self.get(uri) is not None
        except OSError as e:
            logger.error("Failed to read registry %s: %s", self._path, e)
            return False

    def upsert(self, entry: RecentEntry) -> bool:
        """Store an entry, replacing any entry with the same URI.

        A replaced entry keeps its position and its ``added`` timestamp;
        ``modified`` is always refreshed. New entries are appended.

        Args:
            entry: Entry to store.

        Returns:
            True if the entry is stored, False if the file could not be written.
        """
        now = datetime.now(UTC).isoformat()

        try:
            current = self.entries()
        except OSError as e:
            logger.error("Failed to read registry %s: %s", self._path, e)
            return False

        updated: list[RecentEntry] = []
        found = False
        for existing in current:
            if existing.uri == entry.uri and not found:
                updated.append(replace(entry, added=existing.added or now, modified=now))
                found = True
            elif existing.uri != entry.uri:
                updated.append(existing)

        if not found:
            updated.append(replace(entry, added=now, modified=now))

        try:
            self._write(updated)
        except (OSError, RuntimeError) as e:
            logger.error("Failed to write registry %s: %s", self._path, e)
            return False

        logger.debug("%s %s", "Updated" if found else "Added", entry.uri)
        return True

    def purge_all(self) -> bool:
        """Remove every entry.

        Returns:
            True if the registry is empty afterwards, False on write failure.
        """
        if not self._path.exists():
            return True

        try:
            self._write([])
        except (OSError, RuntimeError) as e:
            logger.error("Failed to purge registry %s: %s", self._path, e)
            return False

        logger.info("Purged registry %s", self._path)
        return True

    def _write(self, entries: list[RecentEntry]) -> None:
        """Atomically replace the registry file with the given entries.

        Raises:
            RuntimeError: If the registry directory cannot be created.
            OSError: If the file cannot be written.
        """
        ensure_data_dir(self._path.parent)

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self._path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                for entry in entries:
                    f.write(entry.to_json_line() + "\n")
            # os.replace() is atomic on POSIX
            os.replace(str(tmp_path), str(self._path))
        except OSError:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise
