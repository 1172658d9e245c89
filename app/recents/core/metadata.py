"""Entry metadata for resolved files.

Builds the complete RecentEntry for a canonical path: URI, display name,
MIME type and the identity of the registering application.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from recents.core.config import (
    DEFAULT_APP_EXEC,
    DEFAULT_APP_NAME,
    DEFAULT_MIME_TYPE,
    RecentsConfig,
)
from recents.core.files import guess_mime_type
from recents.models.entry import RecentEntry

logger = logging.getLogger(__name__)

# Results that carry no more information than the default
_INCONCLUSIVE_MIME_TYPES = frozenset({"", "application/octet-stream", "application/x-unknown"})


def path_to_uri(path: Path) -> str:
    """Convert a canonical path into a percent-encoded file URI.

    Args:
        path: Absolute path.

    Returns:
        ``file://`` URI for the path.

    Raises:
        ValueError: If the path is not absolute.
    """
    return path.as_uri()


class MetadataBuilder:
    """Builds registry entries for canonical paths.

    Attributes:
        app_name: Name recorded as the registering application.
        app_exec: Command recorded as the registering application.
        default_mime_type: Type used when guessing is inconclusive.
    """

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        app_exec: str = DEFAULT_APP_EXEC,
        default_mime_type: str = DEFAULT_MIME_TYPE,
        mime_guesser: Callable[[str], str] = guess_mime_type,
    ) -> None:
        self.app_name = app_name
        self.app_exec = app_exec
        self.default_mime_type = default_mime_type
        self._mime_guesser = mime_guesser

    @classmethod
    def from_config(cls, config: RecentsConfig) -> "MetadataBuilder":
        """Create a builder from the loaded configuration."""
        return cls(
            app_name=config.app_name,
            app_exec=config.app_exec,
            default_mime_type=config.default_mime_type,
        )

    def build(self, path: Path) -> RecentEntry:
        """Build the entry describing a canonical path.

        Args:
            path: Absolute, symlink-resolved path.

        Returns:
            RecentEntry ready to be stored.
        """
        return RecentEntry(
            uri=path_to_uri(path),
            display_name=str(path),
            mime_type=self._mime_type(str(path)),
            app_name=self.app_name,
            app_exec=self.app_exec,
            groups=(),
            is_private=False,
        )

    def _mime_type(self, path: str) -> str:
        """Guess a MIME type, falling back to the default.

        An unknown type is acceptable metadata, so guessing problems are
        logged and never raised.
        """
        try:
            guessed = self._mime_guesser(path)
        except (OSError, ValueError) as e:
            logger.debug("MIME type guess failed for %s: %s", path, e)
            guessed = ""

        guessed = (guessed or "").strip()
        if guessed in _INCONCLUSIVE_MIME_TYPES:
            return self.default_mime_type
        return guessed
