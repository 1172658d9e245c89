"""Test doubles shared across test modules."""

from recents.models.entry import RecentEntry
from recents.registry.base import RegistryGateway


class MemoryRegistry(RegistryGateway):
    """In-memory registry that records every call it receives."""

    def __init__(self, fail_upserts: bool = False, fail_purge: bool = False) -> None:
        self.stored: dict[str, RecentEntry] = {}
        self.upsert_calls: list[RecentEntry] = []
        self.purge_calls = 0
        self.fail_upserts = fail_upserts
        self.fail_purge = fail_purge

    def upsert(self, entry: RecentEntry) -> bool:
        self.upsert_calls.append(entry)
        if self.fail_upserts:
            return False
        self.stored[entry.uri] = entry
        return True

    def purge_all(self) -> bool:
        self.purge_calls += 1
        if self.fail_purge:
            return False
        self.stored.clear()
        return True

    def exists(self, uri: str) -> bool:
        return uri in self.stored

    def entries(self) -> list[RecentEntry]:
        return list(self.stored.values())


class ScriptedConfirm:
    """Confirm function answering from a fixed sequence."""

    def __init__(self, *answers: bool | None) -> None:
        self._answers = list(answers)
        self.calls = 0

    def __call__(self) -> bool | None:
        self.calls += 1
        return self._answers.pop(0)
