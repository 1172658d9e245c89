"""Process exit codes.

All numeric exit codes of recents are defined here; operations ask this
module for their code instead of hardcoding numbers.

| Code | Meaning                                          |
|------|--------------------------------------------------|
| 0    | Include: every requested file was registered     |
| 1    | Fatal configuration error                        |
| 2    | Clear: confirmation declined, registry untouched |
| 34   | Clear: registry purged                           |
| 100  | Include: one or more files were not registered   |
"""

from enum import IntEnum

from recents.models.result import ClearState


class ExitCode(IntEnum):
    """Exit codes returned by the recents command."""

    SUCCESS = 0
    FATAL = 1
    DECLINED = 2
    PURGED = 34
    PARTIAL_FAILURE = 100


def include_exit_code(attempted: int, succeeded: int) -> ExitCode:
    """Exit code of an include operation.

    Args:
        attempted: Number of paths requested.
        succeeded: Number of paths registered.

    Returns:
        SUCCESS if every path was registered, PARTIAL_FAILURE otherwise.
    """
    if succeeded == attempted:
        return ExitCode.SUCCESS
    return ExitCode.PARTIAL_FAILURE


def clear_exit_code(state: ClearState) -> ExitCode:
    """Exit code of a clear operation.

    Args:
        state: Terminal state reached by the clear protocol.

    Returns:
        PURGED for DONE, DECLINED for ABORTED, FATAL otherwise.
    """
    if state == ClearState.DONE:
        return ExitCode.PURGED
    if state == ClearState.ABORTED:
        return ExitCode.DECLINED
    return ExitCode.FATAL
