from __future__ import annotations

from enum import Enum, auto

from ezsymlink.core.errors import LinkError, wrap_error
from ezsymlink.core.fs_controller import LinkCreator, MergeExecutor
from ezsymlink.core.history import DEFAULT_HISTORY_SIZE, HistoryLog
from ezsymlink.core.logging import get_logger, log_event
from ezsymlink.core.outcomes import ConfirmationRequired, Error, Outcome, Success
from ezsymlink.core.validation import ConflictResolver, ConflictState, PathValidator
from ezsymlink.domain.links import (
    HistoryEntry,
    LinkRequest,
    PathInput,
    SymlinkType,
    normalize_link_type,
    normalize_path_text,
)

MERGE_PROMPT = (
    "Destination already exists. Do you want to merge its contents into the source?"
)

logger = get_logger(__name__)


class EngineState(Enum):
    IDLE = auto()
    VALIDATING = auto()
    CONFIRMATION_PENDING = auto()
    LINKING = auto()
    DONE = auto()


class LinkProvisioningEngine:
    """Validates, merges and links a source/destination pair.

    Every public call returns exactly one outcome. When the destination
    already exists the request is parked until ``confirm_merge`` is called.
    """

    def __init__(
        self,
        *,
        history_size: int = DEFAULT_HISTORY_SIZE,
        validator: PathValidator | None = None,
        conflicts: ConflictResolver | None = None,
        merger: MergeExecutor | None = None,
        linker: LinkCreator | None = None,
    ) -> None:
        self._validator = validator or PathValidator()
        self._conflicts = conflicts or ConflictResolver()
        self._merger = merger or MergeExecutor()
        self._linker = linker or LinkCreator()
        self._history = HistoryLog(history_size)
        self._state = EngineState.IDLE
        self._pending: LinkRequest | None = None

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def pending_request(self) -> LinkRequest | None:
        return self._pending

    def recent_links(self) -> tuple[HistoryEntry, ...]:
        return self._history.items()

    def request_link(
        self,
        source: PathInput | None,
        destination: PathInput | None,
        requested_type: SymlinkType | str = SymlinkType.AUTO,
    ) -> Outcome:
        request = LinkRequest(
            source=normalize_path_text(source),
            destination=normalize_path_text(destination),
            requested_type=normalize_link_type(requested_type),
        )
        if self._pending is not None:
            log_event(
                logger,
                "request_superseded",
                source=self._pending.source,
                destination=self._pending.destination,
            )
            self._pending = None

        log_event(
            logger,
            "link_requested",
            source=request.source,
            destination=request.destination,
            type=request.requested_type.value,
        )
        self._state = EngineState.VALIDATING
        try:
            source_kind = self._validator.validate(request)
        except LinkError as exc:
            log_event(logger, "request_rejected", code=exc.code, error=str(exc))
            return self._finish(Error.from_exception(exc))
        log_event(
            logger,
            "request_validated",
            source=request.source,
            source_kind=source_kind.value,
        )

        conflict = self._conflicts.resolve(request.destination_path)
        if conflict is ConflictState.DESTINATION_EXISTS:
            self._pending = request
            self._state = EngineState.CONFIRMATION_PENDING
            log_event(
                logger,
                "confirmation_required",
                source=request.source,
                destination=request.destination,
            )
            return ConfirmationRequired(request=request, prompt=MERGE_PROMPT)

        self._state = EngineState.LINKING
        return self._finish(
            self._link(
                request,
                success_message="Symlink created successfully!",
                failure_message="Error creating symlink",
            )
        )

    def confirm_merge(self, confirmed: bool) -> Outcome:
        request = self._pending
        if request is None or self._state is not EngineState.CONFIRMATION_PENDING:
            return Error(
                message="No link request is awaiting confirmation.",
                code="no_pending_request",
                severity="warning",
            )
        self._pending = None

        if not confirmed:
            log_event(
                logger,
                "request_cancelled",
                source=request.source,
                destination=request.destination,
            )
            return self._finish(
                Error(
                    message="Operation cancelled.",
                    code="operation_cancelled",
                    severity="information",
                )
            )

        self._state = EngineState.LINKING
        log_event(
            logger,
            "merge_started",
            source=request.source,
            destination=request.destination,
        )
        try:
            self._merger.merge(request.destination_path, request.source_path)
        except LinkError as exc:
            return self._finish(self._error(request, exc, exc.message))
        log_event(
            logger,
            "merge_completed",
            source=request.source,
            destination=request.destination,
        )
        return self._finish(
            self._link(
                request,
                success_message="Folders merged and symlink created successfully!",
                failure_message="Error creating symlink after merge",
            )
        )

    def _link(
        self,
        request: LinkRequest,
        *,
        success_message: str,
        failure_message: str,
    ) -> Outcome:
        try:
            resolved = self._linker.create_link(
                request.source_path,
                request.destination_path,
                request.requested_type,
            )
        except OSError as exc:
            return self._error(request, exc, failure_message)

        self._history.record(request.source, request.destination)
        log_event(
            logger,
            "link_created",
            source=request.source,
            destination=request.destination,
            type=resolved.value,
        )
        return Success(success_message)

    def _error(
        self, request: LinkRequest, exc: BaseException, message: str
    ) -> Error:
        error = wrap_error(exc, code="io_error", message=message)
        log_event(
            logger,
            "link_failed",
            source=request.source,
            destination=request.destination,
            error=str(error),
        )
        return Error.from_exception(error)

    def _finish(self, outcome: Outcome) -> Outcome:
        self._state = EngineState.DONE
        return outcome
