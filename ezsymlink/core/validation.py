from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from ezsymlink.core.errors import LinkError
from ezsymlink.domain.links import LinkRequest, SymlinkType


class ConflictState(Enum):
    NO_CONFLICT = auto()
    DESTINATION_EXISTS = auto()


class PathValidator:
    """Read-only checks run before any link request touches the filesystem."""

    def validate(self, request: LinkRequest) -> SymlinkType:
        """Return the kind of link the source calls for, FILE or DIRECTORY."""
        if not request.source or not request.destination:
            raise LinkError(
                code="missing_input",
                message="Please select both source and destination.",
                severity="warning",
            )
        if not request.source_path.exists():
            raise LinkError(
                code="source_not_found",
                message="Source does not exist.",
                detail=str(request.source_path),
            )
        if request.source_path.is_dir():
            return SymlinkType.DIRECTORY
        return SymlinkType.FILE


class ConflictResolver:
    def resolve(self, destination: Path) -> ConflictState:
        # Path.exists() follows links, so a dangling link is not a conflict and
        # surfaces later as a link creation failure.
        if destination.exists():
            return ConflictState.DESTINATION_EXISTS
        return ConflictState.NO_CONFLICT
