"""Result models for registry operations.

This module defines the per-file outcomes of an include operation, the
states of the clear protocol and the aggregate result handed back to the
command-line layer.
"""

from dataclasses import dataclass
from enum import Enum


class FileOutcome(str, Enum):
    """Outcome of processing one requested path.

    Attributes:
        ADDED: The file is now present in the registry.
        NOT_FOUND: Nothing exists at the requested path.
        RESOLUTION_FAILED: The path exists but could not be canonicalized.
        REGISTRY_WRITE_FAILED: The registry rejected the entry.
        TOUCH_FAILED: The modification time could not be updated. Reported
            alongside ADDED and never counted as a failure.
    """

    ADDED = "added"
    NOT_FOUND = "not_found"
    RESOLUTION_FAILED = "resolution_failed"
    REGISTRY_WRITE_FAILED = "registry_write_failed"
    TOUCH_FAILED = "touch_failed"


class ClearState(str, Enum):
    """States of the clear protocol.

    ``AWAITING_CONFIRMATION`` leads to ``CONFIRMED`` then ``PURGING``, and
    ends in ``DONE`` (or ``FAILED`` when the store refuses), or to
    ``DECLINED`` which ends in ``ABORTED`` without touching the registry.
    """

    AWAITING_CONFIRMATION = "awaiting_confirmation"
    CONFIRMED = "confirmed"
    DECLINED = "declined"
    PURGING = "purging"
    DONE = "done"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class FileStatus:
    """Status line for one requested path.

    Attributes:
        path: Path as given on input.
        outcome: What happened to it.
        canonical_path: Resolved absolute path, when resolution succeeded.
        detail: Error detail for failed outcomes.
        already_present: For ADDED, whether the registry already held the file.
    """

    path: str
    outcome: FileOutcome
    canonical_path: str | None = None
    detail: str | None = None
    already_present: bool = False

    @property
    def is_failure(self) -> bool:
        """Check if this status counts against the batch."""
        return self.outcome in (
            FileOutcome.NOT_FOUND,
            FileOutcome.RESOLUTION_FAILED,
            FileOutcome.REGISTRY_WRITE_FAILED,
        )


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Aggregate result of one operation.

    Attributes:
        attempted: Number of paths the operation was asked to process.
        succeeded: Number of paths that ended up registered.
        exit_code: Process exit code for the command-line layer.
        statuses: Per-file statuses in input order.
        clear_state: Terminal state of a clear operation, None otherwise.
    """

    attempted: int
    succeeded: int
    exit_code: int
    statuses: tuple[FileStatus, ...] = ()
    clear_state: ClearState | None = None

    @property
    def failed(self) -> int:
        """Number of paths that were not registered."""
        return self.attempted - self.succeeded

    @property
    def all_succeeded(self) -> bool:
        """Check if every requested path was registered."""
        return self.succeeded == self.attempted
