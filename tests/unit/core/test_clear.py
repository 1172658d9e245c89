"""Unit tests for ClearOperation."""

from unittest.mock import MagicMock

from fakes import MemoryRegistry, ScriptedConfirm
from recents.core.clear import ClearOperation
from recents.core.exit_codes import ExitCode
from recents.models.entry import RecentEntry
from recents.models.request import ClearRequest
from recents.models.result import ClearState


class TestClearOperation:
    """Tests for ClearOperation.run."""

    def test_force_skips_confirmation(
        self, memory_registry: MemoryRegistry, sample_entry: RecentEntry
    ) -> None:
        """With force, confirm is never called and the registry is purged."""
        memory_registry.upsert(sample_entry)
        confirm = MagicMock()

        result = ClearOperation().run(ClearRequest(force=True), memory_registry, confirm)

        confirm.assert_not_called()
        assert memory_registry.purge_calls == 1
        assert memory_registry.entries() == []
        assert result.clear_state == ClearState.DONE
        assert result.exit_code == ExitCode.PURGED

    def test_confirmed(self, memory_registry: MemoryRegistry) -> None:
        """An affirmative answer purges exactly once."""
        confirm = ScriptedConfirm(True)

        result = ClearOperation().run(ClearRequest(), memory_registry, confirm)

        assert confirm.calls == 1
        assert memory_registry.purge_calls == 1
        assert result.exit_code == 34

    def test_declined(self, memory_registry: MemoryRegistry, sample_entry: RecentEntry) -> None:
        """A negative answer aborts with exit code 2 and no purge."""
        memory_registry.upsert(sample_entry)

        result = ClearOperation().run(ClearRequest(), memory_registry, ScriptedConfirm(False))

        assert memory_registry.purge_calls == 0
        assert memory_registry.entries() == [sample_entry]
        assert result.clear_state == ClearState.ABORTED
        assert result.exit_code == ExitCode.DECLINED

    def test_no_then_yes_stays_declined(self, memory_registry: MemoryRegistry) -> None:
        """A no is decisive: the confirm function is not asked again."""
        confirm = ScriptedConfirm(False, True)

        result = ClearOperation().run(ClearRequest(), memory_registry, confirm)

        assert confirm.calls == 1
        assert memory_registry.purge_calls == 0
        assert result.exit_code == ExitCode.DECLINED

    def test_reprompts_until_decisive(self, memory_registry: MemoryRegistry) -> None:
        """An undecided answer asks again, then the yes proceeds to purge."""
        confirm = ScriptedConfirm(None, True)

        result = ClearOperation().run(ClearRequest(), memory_registry, confirm)

        assert confirm.calls == 2
        assert memory_registry.purge_calls == 1
        assert result.exit_code == ExitCode.PURGED

    def test_many_undecided_answers(self, memory_registry: MemoryRegistry) -> None:
        """There is no retry limit."""
        confirm = ScriptedConfirm(*([None] * 20), False)

        result = ClearOperation().run(ClearRequest(), memory_registry, confirm)

        assert confirm.calls == 21
        assert result.exit_code == ExitCode.DECLINED

    def test_purge_failure(self) -> None:
        """A store that cannot be purged ends in FAILED."""
        registry = MemoryRegistry(fail_purge=True)

        result = ClearOperation().run(ClearRequest(force=True), registry, MagicMock())

        assert registry.purge_calls == 1
        assert result.clear_state == ClearState.FAILED
        assert result.exit_code == ExitCode.FATAL

    def test_no_files_attempted(self, memory_registry: MemoryRegistry) -> None:
        """Clear results carry no per-file statuses."""
        result = ClearOperation().run(ClearRequest(force=True), memory_registry, MagicMock())

        assert result.attempted == 0
        assert result.statuses == ()
