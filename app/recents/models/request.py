"""Request models for registry operations.

Requests are built once from command-line input, handed to exactly one
operation and discarded afterwards. Process-wide flags such as ``quiet``
and ``force`` travel on the request instead of living in shared state.
"""

from dataclasses import dataclass
from enum import Enum


class ConfigurationError(ValueError):
    """Raised when the requested work cannot start.

    Covers missing files for an include request, conflicting actions and
    an invalid configuration file. Always fatal, and always raised before
    the registry is touched.
    """


class MainAction(str, Enum):
    """Action selected on the command line.

    Attributes:
        INCLUDE: Register files as recently used.
        CLEAR: Purge the whole registry.
        LIST: Show the registered entries.
    """

    INCLUDE = "include"
    CLEAR = "clear"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class IncludeRequest:
    """Request to register files as recently used.

    Attributes:
        paths: Paths exactly as given on input. Duplicates are allowed and
            the order is kept for per-file reporting.
        touch: Also set the modification time of each file to now.
        quiet: Suppress informational output.
    """

    paths: tuple[str, ...]
    touch: bool = False
    quiet: bool = False

    def __post_init__(self) -> None:
        """Reject requests without files."""
        if not self.paths:
            msg = "No files specified"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class ClearRequest:
    """Request to purge every entry from the registry.

    Attributes:
        force: Skip the confirmation prompt.
        quiet: Suppress informational output.
    """

    force: bool = False
    quiet: bool = False
