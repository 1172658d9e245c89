"""Data models for recents.

This module exports the core data structures used throughout the application.
"""

from recents.models.entry import RecentEntry
from recents.models.request import (
    ClearRequest,
    ConfigurationError,
    IncludeRequest,
    MainAction,
)
from recents.models.result import (
    ClearState,
    FileOutcome,
    FileStatus,
    OperationResult,
)

__all__ = [
    "ClearRequest",
    "ClearState",
    "ConfigurationError",
    "FileOutcome",
    "FileStatus",
    "IncludeRequest",
    "MainAction",
    "OperationResult",
    "RecentEntry",
]
