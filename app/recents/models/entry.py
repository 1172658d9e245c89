"""Recent entry model.

This module defines the record stored in the recent files registry for
every file registered through recents.
"""

import json
from dataclasses import dataclass
from typing import Any

URI_SCHEME = "file://"
_REQUIRED_TEXT_FIELDS = ("uri", "display_name", "mime_type", "app_name", "app_exec")


@dataclass(frozen=True, slots=True)
class RecentEntry:
    """One file in the recent files registry.

    The ``uri`` is the unique key of an entry. It is derived from the
    canonical absolute path, so registering the same file through
    different relative paths always yields the same entry.

    Attributes:
        uri: Percent-encoded ``file://`` URI of the canonical path.
        display_name: Human-readable absolute path.
        mime_type: Best-effort content type of the file.
        app_name: Name of the application that registered the file.
        app_exec: Command line of the registering application.
        groups: Category tags of the entry.
        is_private: Whether the entry is only visible to the registering app.
        added: When the entry was first stored (ISO 8601, UTC).
        modified: When the entry was last stored (ISO 8601, UTC).
    """

    uri: str
    display_name: str
    mime_type: str
    app_name: str
    app_exec: str
    groups: tuple[str, ...] = ()
    is_private: bool = False
    added: str | None = None
    modified: str | None = None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.uri.startswith(URI_SCHEME):
            msg = f"Entry URI must use the file scheme, got '{self.uri}'"
            raise ValueError(msg)
        if not self.mime_type:
            msg = "MIME type cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage.

        Returns:
            Dictionary representation of the entry.
        """
        result: dict[str, Any] = {
            "uri": self.uri,
            "display_name": self.display_name,
            "mime_type": self.mime_type,
            "app_name": self.app_name,
            "app_exec": self.app_exec,
            "groups": list(self.groups),
            "is_private": self.is_private,
        }
        if self.added is not None:
            result["added"] = self.added
        if self.modified is not None:
            result["modified"] = self.modified
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecentEntry":
        """Deserialize from dictionary.

        Args:
            data: Dictionary containing entry data.

        Returns:
            RecentEntry instance.

        Raises:
            KeyError: If required fields are missing.
            TypeError: If a field has the wrong JSON type.
            ValueError: If the URI or MIME type is invalid.
        """
        if not isinstance(data, dict):
            msg = f"Entry must be a JSON object, got {type(data).__name__}"
            raise TypeError(msg)

        for key in _REQUIRED_TEXT_FIELDS:
            _require_type(key, data[key], str)
        for key in ("added", "modified"):
            if data.get(key) is not None:
                _require_type(key, data[key], str)
        groups = data.get("groups", [])
        _require_type("groups", groups, list)
        for group in groups:
            _require_type("groups", group, str)
        is_private = data.get("is_private", False)
        _require_type("is_private", is_private, bool)

        return cls(
            uri=data["uri"],
            display_name=data["display_name"],
            mime_type=data["mime_type"],
            app_name=data["app_name"],
            app_exec=data["app_exec"],
            groups=tuple(groups),
            is_private=is_private,
            added=data.get("added"),
            modified=data.get("modified"),
        )

    def to_json_line(self) -> str:
        """Serialize to JSON line for JSONL storage.

        Returns:
            Single JSON line (no trailing newline).
        """
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json_line(cls, line: str) -> "RecentEntry":
        """Deserialize from JSON line.

        Args:
            line: Single JSON line (with or without trailing whitespace).

        Returns:
            RecentEntry instance.

        Raises:
            json.JSONDecodeError: If line is not valid JSON.
            KeyError: If required fields are missing.
            TypeError: If a field has the wrong type.
            ValueError: If data is invalid.
        """
        data = json.loads(line.strip())
        return cls.from_dict(data)


def _require_type(key: str, value: object, expected: type) -> None:
    """Raise TypeError unless a stored field has the expected JSON type."""
    if not isinstance(value, expected):
        msg = f"Entry field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        raise TypeError(msg)
