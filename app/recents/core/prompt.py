"""Interactive confirmation for destructive actions."""

import logging
import sys
from typing import TextIO

from recents.utils.formatting import console

logger = logging.getLogger(__name__)

YES = "y"
NO = "n"


class ConfirmPrompt:
    """Asks whether the recent files should be cleared.

    Each call reads one line and looks at its first character only:
    ``y`` confirms, ``n`` declines and anything else returns None so the
    caller asks again. End of input counts as a decline.

    Attributes:
        quiet: Read the answer without printing the question.
    """

    def __init__(self, quiet: bool = False, stream: TextIO | None = None) -> None:
        """Initialize the prompt.

        Args:
            quiet: Suppress the question text.
            stream: Input to read answers from. Defaults to sys.stdin at
                call time.
        """
        self.quiet = quiet
        self._stream = stream
        self._asked = 0

    def __call__(self) -> bool | None:
        """Ask once.

        Returns:
            True for yes, False for no or end of input, None otherwise.
        """
        if not self.quiet:
            if self._asked == 0:
                console.print(
                    f"Are you sure you want to clear recent files ({YES}/{NO}) ",
                    end="",
                    markup=False,
                )
            else:
                console.print(f"Please press {YES} or {NO}", markup=False)
        self._asked += 1

        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            logger.info("No answer on input, treating as decline")
            if not self.quiet:
                console.print()
            return False

        answer = line.strip()[:1].lower()
        if answer == YES:
            return True
        if answer == NO:
            return False
        return None
