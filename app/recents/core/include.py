"""Registration of files as recently used.

Resolves every requested path, builds its entry and upserts it into the
registry, optionally touching the file afterwards. Failures are isolated
per file: one bad path never stops the rest of the batch.
"""

import logging
from collections.abc import Callable

from recents.core.exit_codes import include_exit_code
from recents.core.files import touch_mtime
from recents.core.metadata import MetadataBuilder
from recents.core.resolver import PathNotFoundError, PathResolutionError, PathResolver
from recents.models.request import IncludeRequest
from recents.models.result import FileOutcome, FileStatus, OperationResult
from recents.registry.base import RegistryGateway

logger = logging.getLogger(__name__)


class IncludeOperation:
    """Registers a batch of files in the registry.

    Files are processed one at a time in input order. Repeating a file,
    directly or through another relative path, upserts the same entry
    again and counts as a success every time.

    Example:
        >>> operation = IncludeOperation()
        >>> result = operation.run(IncludeRequest(paths=("a.txt",)), FileRegistry())
        >>> result.exit_code
        0
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        builder: MetadataBuilder | None = None,
        touch: Callable[[str], bool] = touch_mtime,
    ) -> None:
        """Initialize the operation.

        Args:
            resolver: Path resolver. Defaults to the filesystem resolver.
            builder: Entry builder. Defaults to the built-in identity.
            touch: Updates the modification time of a file.
        """
        self._resolver = resolver or PathResolver()
        self._builder = builder or MetadataBuilder()
        self._touch = touch

    def run(self, request: IncludeRequest, gateway: RegistryGateway) -> OperationResult:
        """Register every path of the request.

        Args:
            request: Paths to register and flags.
            gateway: Registry to write to.

        Returns:
            OperationResult with one ADDED or failure status per path, plus
            a TOUCH_FAILED status after any file whose touch failed.
        """
        statuses: list[FileStatus] = []
        succeeded = 0

        for raw_path in request.paths:
            try:
                path = self._resolver.resolve(raw_path)
            except PathNotFoundError as e:
                statuses.append(
                    FileStatus(path=raw_path, outcome=FileOutcome.NOT_FOUND, detail=e.reason)
                )
                continue
            except PathResolutionError as e:
                statuses.append(
                    FileStatus(
                        path=raw_path,
                        outcome=FileOutcome.RESOLUTION_FAILED,
                        detail=e.reason,
                    )
                )
                continue

            entry = self._builder.build(path)
            already_present = gateway.exists(entry.uri)

            if gateway.upsert(entry):
                succeeded += 1
                statuses.append(
                    FileStatus(
                        path=raw_path,
                        outcome=FileOutcome.ADDED,
                        canonical_path=str(path),
                        already_present=already_present,
                    )
                )
            else:
                statuses.append(
                    FileStatus(
                        path=raw_path,
                        outcome=FileOutcome.REGISTRY_WRITE_FAILED,
                        canonical_path=str(path),
                        detail="registry rejected the entry",
                    )
                )

            if request.touch and not self._touch(str(path)):
                statuses.append(
                    FileStatus(
                        path=raw_path,
                        outcome=FileOutcome.TOUCH_FAILED,
                        canonical_path=str(path),
                        detail="could not update modification time",
                    )
                )

        attempted = len(request.paths)
        logger.info("Registered %d of %d file(s)", succeeded, attempted)

        return OperationResult(
            attempted=attempted,
            succeeded=succeeded,
            exit_code=include_exit_code(attempted, succeeded),
            statuses=tuple(statuses),
        )
