from typing import Sequence

from rich.markup import escape
from textual.widgets import Collapsible, Static

from ezsymlink.domain.links import HistoryEntry

EMPTY_TEXT = "[dim]No symlinks created yet.[/dim]"


class RecentLinksPanel(Collapsible):
    def __init__(self, **kwargs) -> None:
        self._body = Static(EMPTY_TEXT, id="recent_links_body")
        super().__init__(self._body, title="Recent Symlinks", collapsed=False, **kwargs)

    def show_entries(self, entries: Sequence[HistoryEntry]) -> None:
        if not entries:
            self._body.update(EMPTY_TEXT)
            return
        self._body.update("\n".join(escape(str(entry)) for entry in entries))
