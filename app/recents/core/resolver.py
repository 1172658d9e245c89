"""Resolution of requested paths to canonical paths."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from recents.core.files import canonicalize

logger = logging.getLogger(__name__)


class PathResolutionError(Exception):
    """Raised when a path exists but cannot be canonicalized."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve '{path}': {reason}")


class PathNotFoundError(PathResolutionError):
    """Raised when nothing exists at the requested path."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "does not exist")


class PathResolver:
    """Turns a user-supplied path into the canonical path of an existing file.

    Existence is checked on every call and never cached. A file removed
    between the check and its later use is not guarded against.

    Example:
        >>> resolver = PathResolver()
        >>> resolver.resolve("./notes.txt")
        PosixPath('/home/user/notes.txt')
    """

    def __init__(
        self,
        canonicalize: Callable[[str], Path] = canonicalize,
        exists: Callable[[str], bool] = os.path.lexists,
    ) -> None:
        """Initialize the resolver.

        Args:
            canonicalize: Returns the canonical form of a path or raises.
            exists: Reports whether any filesystem entry exists at a path.
                Dangling symlinks exist and then fail to canonicalize.
        """
        self._canonicalize = canonicalize
        self._exists = exists

    def resolve(self, raw_path: str) -> Path:
        """Resolve a path.

        Args:
            raw_path: Path as given on input.

        Returns:
            Absolute, symlink-resolved path.

        Raises:
            PathNotFoundError: If nothing exists at ``raw_path``.
            PathResolutionError: If the path cannot be canonicalized.
        """
        if not raw_path or not self._exists(raw_path):
            raise PathNotFoundError(raw_path)

        try:
            resolved = self._canonicalize(raw_path)
        except (OSError, RuntimeError) as e:
            raise PathResolutionError(raw_path, str(e)) from e

        logger.debug("Resolved %s -> %s", raw_path, resolved)
        return resolved
