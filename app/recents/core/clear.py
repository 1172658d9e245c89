"""Purging the whole registry.

The purge is destructive and irreversible, so unless forced it only runs
after an explicit affirmative answer.
"""

import logging
from collections.abc import Callable

from recents.core.exit_codes import clear_exit_code
from recents.models.request import ClearRequest
from recents.models.result import ClearState, OperationResult
from recents.registry.base import RegistryGateway

logger = logging.getLogger(__name__)

# Returns True to purge, False to decline, None to ask again
ConfirmFunc = Callable[[], bool | None]


class ClearOperation:
    """Runs the clear protocol against a registry.

    ``force`` goes straight to purging. Otherwise ``confirm`` is asked
    until it gives a decisive answer; there is no retry limit, so a
    confirm function must eventually answer (see ConfirmPrompt, which
    declines at end of input).
    """

    def run(
        self,
        request: ClearRequest,
        gateway: RegistryGateway,
        confirm: ConfirmFunc,
    ) -> OperationResult:
        """Purge the registry if confirmed.

        Args:
            request: Clear flags.
            gateway: Registry to purge.
            confirm: Interactive yes/no question.

        Returns:
            OperationResult carrying the terminal ClearState.
        """
        state = ClearState.AWAITING_CONFIRMATION

        if request.force:
            logger.debug("Force flag set, skipping confirmation")
            state = ClearState.CONFIRMED
        else:
            answer = confirm()
            while answer is None:
                answer = confirm()
            state = ClearState.CONFIRMED if answer else ClearState.DECLINED

        if state == ClearState.DECLINED:
            logger.info("Clear declined, registry left untouched")
            state = ClearState.ABORTED
        else:
            state = ClearState.PURGING
            logger.debug("Clear state: %s", state.value)
            purged = gateway.purge_all()
            state = ClearState.DONE if purged else ClearState.FAILED

        return OperationResult(
            attempted=0,
            succeeded=0,
            exit_code=clear_exit_code(state),
            clear_state=state,
        )
