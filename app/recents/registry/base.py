"""Abstract base class for the recent files registry.

This module defines the RegistryGateway interface that every registry
backend must implement. Operations only talk to the registry through it.
"""

from abc import ABC, abstractmethod

from recents.models.entry import RecentEntry


class RegistryGateway(ABC):
    """Boundary to the persisted recent files registry.

    Implementations own the storage format, its location and whatever
    locking it needs. Entries are keyed by ``uri``.

    Example:
        >>> registry = FileRegistry()
        >>> registry.upsert(entry)
        True
        >>> registry.exists(entry.uri)
        True
    """

    @abstractmethod
    def upsert(self, entry: RecentEntry) -> bool:
        """Insert an entry or update the entry with the same URI in place.

        Args:
            entry: Entry to store.

        Returns:
            True if the entry is now present, whether it was added or
            already there. False only if the store could not be written.
        """

    @abstractmethod
    def purge_all(self) -> bool:
        """Remove every entry.

        Returns:
            True if the registry is now empty, False if it could not be written.
        """

    @abstractmethod
    def exists(self, uri: str) -> bool:
        """Check whether an entry with this URI is registered.

        Args:
            uri: Entry key.

        Returns:
            True if the registry holds the URI.
        """

    @abstractmethod
    def entries(self) -> list[RecentEntry]:
        """Return all entries in registry order.

        Returns:
            List of stored entries. Empty if the registry is empty or missing.
        """
