from __future__ import annotations

from pathlib import Path
from typing import Callable

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ezsymlink import __version__
from ezsymlink.core.config import RuntimeConfig, get_runtime_config
from ezsymlink.core.engine import LinkProvisioningEngine
from ezsymlink.core.messages import BrowseRequest, CreateLinkRequest, OpenLocationRequest
from ezsymlink.core.outcomes import Error, Outcome
from ezsymlink.core.path_actions import LinkActionController
from ezsymlink.domain.links import SymlinkType
from ezsymlink.widgets.dialogs import ConfirmDialog, ErrorDialog, PathPickerScreen
from ezsymlink.widgets.link_form import LinkForm
from ezsymlink.widgets.recent_links import RecentLinksPanel


class EzSymlink(App):
    TITLE = "EZSymlink"
    SUB_TITLE = f"v{__version__}"
    CSS_PATH = Path(__file__).parent / "styles" / "index.tcss"

    BINDINGS = [
        Binding("ctrl+l", "create_link", "Create symlink", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        start_path: Path | None = None,
        config: RuntimeConfig | None = None,
    ) -> None:
        super().__init__()
        self.config = config or get_runtime_config()
        self.start_path = start_path
        self.engine = LinkProvisioningEngine(history_size=self.config.history_size)
        self.link_actions = LinkActionController(
            engine=self.engine,
            present_confirm=self._present_confirm_dialog,
            show_outcome=self.show_outcome,
            refresh_history=self.refresh_history,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="app_main_container"):
            yield LinkForm(
                default_type=SymlinkType(self.config.default_link_type),
                id="link_form",
            )
            yield RecentLinksPanel(id="recent_links")
        yield Footer()

    def startup_message(self) -> str | None:
        # Acknowledged only; the form is not pre-filled.
        if self.start_path is None:
            return None
        return f"Startup path: {self.start_path}"

    def on_mount(self) -> None:
        message = self.startup_message()
        if message is not None:
            self.notify(message, severity="information")

    def _present_confirm_dialog(
        self,
        message: str,
        callback: Callable[[bool | None], None],
    ) -> None:
        self.push_screen(ConfirmDialog(message), callback)

    def show_outcome(self, outcome: Outcome) -> None:
        form = self.query_one(LinkForm)
        if isinstance(outcome, Error):
            form.show_status(outcome.message, success=False)
            if outcome.severity == "error":
                self.push_screen(ErrorDialog(outcome.message))
            return
        form.show_status(outcome.message, success=True)

    def refresh_history(self) -> None:
        self.query_one(RecentLinksPanel).show_entries(self.engine.recent_links())

    def action_create_link(self) -> None:
        form = self.query_one(LinkForm)
        self.link_actions.create_link(
            form.source, form.destination, form.selected_type()
        )

    @on(CreateLinkRequest)
    def handle_create_link(self, event: CreateLinkRequest) -> None:
        self.link_actions.create_link(
            event.source, event.destination, event.requested_type
        )

    @on(OpenLocationRequest)
    def handle_open_location(self, event: OpenLocationRequest) -> None:
        self.link_actions.open_location(event.path)

    @on(BrowseRequest)
    def handle_browse(self, event: BrowseRequest) -> None:
        start = Path(event.start).expanduser() if event.start else Path.home()
        if not start.is_dir():
            start = start.parent if start.parent.is_dir() else Path.home()

        def after(selected: str | None) -> None:
            if selected:
                self.query_one(LinkForm).set_path(event.field_id, selected)

        self.push_screen(PathPickerScreen(start), after)


def main(start_path: Path | None = None, config: RuntimeConfig | None = None) -> None:
    EzSymlink(start_path=start_path, config=config).run()
