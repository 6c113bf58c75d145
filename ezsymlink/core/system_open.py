from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from ezsymlink.core.logging import get_logger, log_event
from ezsymlink.core.outcomes import Error, Outcome, Success
from ezsymlink.domain.links import PathInput, normalize_path_text

logger = get_logger(__name__)


def file_manager_command(target: str) -> tuple[list[str], str]:
    """Return the spawn command and a display name for the platform file manager."""
    if sys.platform == "win32":
        return ["explorer", target], "file explorer"
    if sys.platform == "darwin":
        return ["open", target], "Finder"
    return ["xdg-open", target], "file manager"


def open_location(path: PathInput | None) -> Outcome:
    text = normalize_path_text(path)
    target = Path(text).expanduser()
    if not text or not target.exists():
        return Error(message="Path does not exist", code="path_not_found")

    command, label = file_manager_command(str(target))
    try:
        subprocess.Popen(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        log_event(logger, "open_location_failed", path=str(target), error=str(exc))
        return Error(message=f"Failed to open {label} ({exc})", code="io_error")

    log_event(logger, "open_location", path=str(target))
    return Success(f"Opened {target}")
