"""Filesystem helpers used while registering files.

Thin wrappers around the operating system: canonicalizing a path,
guessing a MIME type from a file name and refreshing a file's
modification time.
"""

import logging
import mimetypes
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def canonicalize(path: str) -> Path:
    """Return the absolute, symlink-resolved form of a path.

    Args:
        path: Path as given by the user.

    Returns:
        Canonical absolute path.

    Raises:
        OSError: If the path or a link in its chain cannot be followed.
        RuntimeError: If a symlink loop is found.
    """
    return Path(path).resolve(strict=True)


def guess_mime_type(path: str) -> str:
    """Guess the MIME type of a file from its name.

    Args:
        path: File path.

    Returns:
        MIME type, or an empty string when the type is unknown.
    """
    mime_type, _ = mimetypes.guess_type(path, strict=False)
    return mime_type or ""


def touch_mtime(path: str) -> bool:
    """Set the access and modification time of a file to now.

    Args:
        path: File to touch.

    Returns:
        True if the times were updated, False otherwise.
    """
    try:
        os.utime(path, None)
    except OSError as e:
        logger.warning("Could not touch %s: %s", path, e)
        return False
    return True
