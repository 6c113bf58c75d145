from __future__ import annotations

import os
import shutil
from contextlib import suppress
from pathlib import Path

from ezsymlink.core.errors import LinkError, wrap_error
from ezsymlink.domain.links import SymlinkType


def overlap_reason(destination: Path, source: Path) -> str | None:
    """Describe how the two trees overlap once links are resolved, or None."""
    resolved_destination = destination.resolve()
    resolved_source = source.resolve()
    if resolved_destination == resolved_source:
        if destination.is_symlink():
            return "destination already links to the source"
        return "source and destination are the same folder"
    if resolved_source.is_relative_to(resolved_destination):
        return "source is inside the destination"
    if resolved_destination.is_relative_to(resolved_source):
        return "destination is inside the source"
    return None


class MergeExecutor:
    """Folds an existing destination tree back into the source tree.

    Entries from the destination overwrite same-named files in the source
    without any conflict check. A failure part way through leaves whatever
    was already copied in place and the destination untouched. Trees that
    overlap are refused before anything is touched.
    """

    def merge(self, destination: Path, source: Path) -> None:
        reason = overlap_reason(destination, source)
        if reason is not None:
            raise LinkError(
                code="io_error",
                message="Error merging folders",
                detail=reason,
            )
        try:
            self.copy_tree(destination, source)
        except OSError as exc:
            raise wrap_error(
                exc, code="io_error", message="Error merging folders"
            ) from exc
        try:
            self.remove_tree(destination)
        except OSError as exc:
            raise wrap_error(
                exc,
                code="io_error",
                message="Error removing original destination folder",
            ) from exc

    def copy_tree(self, src: Path, dst: Path) -> None:
        with os.scandir(src) as entries:
            for entry in entries:
                target = dst / entry.name
                if entry.is_dir(follow_symlinks=False):
                    target.mkdir(parents=True, exist_ok=True)
                    self.copy_tree(Path(entry.path), target)
                else:
                    shutil.copy(entry.path, target)

    def remove_tree(self, target: Path) -> None:
        if target.is_symlink() or not target.is_dir():
            target.unlink()
            return
        shutil.rmtree(target)


class LinkCreator:
    """Creates the final symlink at the destination.

    Missing parent folders are created first and removed again if the
    platform refuses the link.
    """

    def create_link(
        self,
        source: Path,
        destination: Path,
        requested_type: SymlinkType = SymlinkType.AUTO,
    ) -> SymlinkType:
        created = self._missing_parents(destination)
        if created:
            destination.parent.mkdir(parents=True, exist_ok=True)

        resolved = self.resolve_type(source, requested_type)
        try:
            os.symlink(
                source,
                destination,
                target_is_directory=resolved is SymlinkType.DIRECTORY,
            )
        except OSError:
            for folder in created:
                with suppress(OSError):
                    folder.rmdir()
            raise
        return resolved

    def resolve_type(self, source: Path, requested_type: SymlinkType) -> SymlinkType:
        if requested_type is not SymlinkType.AUTO:
            return requested_type
        return SymlinkType.DIRECTORY if source.is_dir() else SymlinkType.FILE

    def _missing_parents(self, destination: Path) -> list[Path]:
        # Deepest first, so they can be removed in order.
        missing: list[Path] = []
        for parent in destination.parents:
            if parent.exists():
                break
            missing.append(parent)
        return missing
