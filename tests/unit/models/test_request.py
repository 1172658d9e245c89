"""Unit tests for request and result models."""

import pytest
from recents.models.request import ClearRequest, ConfigurationError, IncludeRequest
from recents.models.result import FileOutcome, FileStatus, OperationResult


class TestIncludeRequest:
    """Tests for IncludeRequest."""

    def test_empty_paths_rejected(self) -> None:
        """An include request without files is a configuration error."""
        with pytest.raises(ConfigurationError, match="No files specified"):
            IncludeRequest(paths=())

    def test_configuration_error_is_value_error(self) -> None:
        """ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            IncludeRequest(paths=())

    def test_keeps_order_and_duplicates(self) -> None:
        """Paths are kept exactly as given."""
        request = IncludeRequest(paths=("b", "a", "b"))

        assert request.paths == ("b", "a", "b")
        assert request.touch is False
        assert request.quiet is False


class TestClearRequest:
    """Tests for ClearRequest."""

    def test_defaults(self) -> None:
        """Clear asks for confirmation by default."""
        request = ClearRequest()

        assert request.force is False
        assert request.quiet is False


class TestFileStatus:
    """Tests for FileStatus.is_failure."""

    @pytest.mark.parametrize(
        ("outcome", "expected"),
        [
            (FileOutcome.ADDED, False),
            (FileOutcome.TOUCH_FAILED, False),
            (FileOutcome.NOT_FOUND, True),
            (FileOutcome.RESOLUTION_FAILED, True),
            (FileOutcome.REGISTRY_WRITE_FAILED, True),
        ],
    )
    def test_is_failure(self, outcome: FileOutcome, expected: bool) -> None:
        """Touch failures never count against the batch."""
        assert FileStatus(path="x", outcome=outcome).is_failure is expected


class TestOperationResult:
    """Tests for OperationResult helpers."""

    def test_failed_count(self) -> None:
        """failed is attempted minus succeeded."""
        result = OperationResult(attempted=3, succeeded=2, exit_code=100)

        assert result.failed == 1
        assert result.all_succeeded is False

    def test_all_succeeded(self) -> None:
        """all_succeeded when every path was registered."""
        result = OperationResult(attempted=2, succeeded=2, exit_code=0)

        assert result.all_succeeded is True
