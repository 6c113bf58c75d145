from __future__ import annotations

from typing import Callable

from ezsymlink.core.engine import LinkProvisioningEngine
from ezsymlink.core.outcomes import ConfirmationRequired, Outcome
from ezsymlink.core.system_open import open_location
from ezsymlink.domain.links import SymlinkType


class LinkActionController:
    """Routes UI actions into the engine and hands outcomes back for display."""

    def __init__(
        self,
        *,
        engine: LinkProvisioningEngine,
        present_confirm: Callable[[str, Callable[[bool | None], None]], None],
        show_outcome: Callable[[Outcome], None],
        refresh_history: Callable[[], None],
        opener: Callable[[str], Outcome] = open_location,
    ) -> None:
        self._engine = engine
        self._present_confirm = present_confirm
        self._show_outcome = show_outcome
        self._refresh_history = refresh_history
        self._open = opener

    def create_link(
        self,
        source: str,
        destination: str,
        requested_type: SymlinkType | str,
    ) -> None:
        outcome = self._engine.request_link(source, destination, requested_type)
        if isinstance(outcome, ConfirmationRequired):
            self._present_confirm(outcome.prompt, self._after_confirm)
            return
        self._publish(outcome)

    def open_location(self, path: str) -> None:
        self._show_outcome(self._open(path))

    def _after_confirm(self, confirmed: bool | None) -> None:
        self._publish(self._engine.confirm_merge(bool(confirmed)))

    def _publish(self, outcome: Outcome) -> None:
        self._show_outcome(outcome)
        self._refresh_history()
