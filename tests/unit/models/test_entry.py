"""Unit tests for the RecentEntry model."""

import json

import pytest
from recents.models.entry import RecentEntry


def _make_entry(**overrides: object) -> RecentEntry:
    """Create a test RecentEntry."""
    data: dict[str, object] = {
        "uri": "file:///tmp/a%20b.txt",
        "display_name": "/tmp/a b.txt",
        "mime_type": "text/plain",
        "app_name": "recents",
        "app_exec": "recents",
    }
    data.update(overrides)
    return RecentEntry(**data)  # type: ignore[arg-type]


class TestRecentEntryValidation:
    """Tests for RecentEntry creation and validation."""

    def test_defaults(self) -> None:
        """Groups are empty, entries are public and untimestamped."""
        entry = _make_entry()

        assert entry.groups == ()
        assert entry.is_private is False
        assert entry.added is None
        assert entry.modified is None

    def test_rejects_non_file_uri(self) -> None:
        """Only file URIs are accepted."""
        with pytest.raises(ValueError, match="file scheme"):
            _make_entry(uri="https://example.com/a.txt")

    def test_rejects_empty_mime_type(self) -> None:
        """An entry always carries a MIME type."""
        with pytest.raises(ValueError, match="MIME type cannot be empty"):
            _make_entry(mime_type="")

    def test_is_immutable(self) -> None:
        """RecentEntry is frozen."""
        entry = _make_entry()
        with pytest.raises(AttributeError):
            entry.uri = "file:///other"  # type: ignore[misc]


class TestRecentEntrySerialization:
    """Tests for dictionary and JSON line conversion."""

    def test_to_dict_omits_missing_timestamps(self) -> None:
        """Timestamps only appear once set."""
        data = _make_entry().to_dict()

        assert "added" not in data
        assert "modified" not in data
        assert data["groups"] == []
        assert data["is_private"] is False

    def test_to_json_line_is_compact(self) -> None:
        """JSON line has no spaces after separators and no newline."""
        line = _make_entry(added="2026-01-01T00:00:00+00:00").to_json_line()

        assert "\n" not in line
        assert ", " not in line
        assert json.loads(line)["added"] == "2026-01-01T00:00:00+00:00"

    def test_from_json_line_restores_entry(self) -> None:
        """Stored lines load back into equal entries."""
        entry = _make_entry(
            groups=("work",),
            added="2026-01-01T00:00:00+00:00",
            modified="2026-01-02T00:00:00+00:00",
        )

        assert RecentEntry.from_json_line(entry.to_json_line() + "\n") == entry

    def test_from_dict_missing_field(self) -> None:
        """Missing required fields raise KeyError."""
        with pytest.raises(KeyError):
            RecentEntry.from_dict({"uri": "file:///a"})

    def test_from_dict_defaults_optional_fields(self) -> None:
        """Optional fields fall back to their defaults."""
        entry = RecentEntry.from_dict(
            {
                "uri": "file:///a",
                "display_name": "/a",
                "mime_type": "text/plain",
                "app_name": "recents",
                "app_exec": "recents",
            }
        )

        assert entry.groups == ()
        assert entry.is_private is False

    @pytest.mark.parametrize(
        ("key", "value"),
        [("uri", 5), ("display_name", None), ("groups", "docs"), ("is_private", 1)],
    )
    def test_from_dict_wrong_type(self, key: str, value: object) -> None:
        """Mistyped fields raise TypeError instead of failing later."""
        data = {**_make_entry().to_dict(), key: value}

        with pytest.raises(TypeError, match=key):
            RecentEntry.from_dict(data)

    def test_from_dict_not_an_object(self) -> None:
        """Only JSON objects describe an entry."""
        with pytest.raises(TypeError, match="JSON object"):
            RecentEntry.from_dict(["file:///a"])  # type: ignore[arg-type]
