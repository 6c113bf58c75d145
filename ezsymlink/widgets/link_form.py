from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, RadioButton, RadioSet

from ezsymlink.core.messages import (
    BrowseRequest,
    CreateLinkRequest,
    OpenLocationRequest,
)
from ezsymlink.domain.links import SymlinkType

FIELD_IDS = {
    "browse_source": "source_input",
    "browse_destination": "destination_input",
}


class LinkForm(Vertical):
    """Source/destination inputs, link type selector and action buttons."""

    def __init__(self, *, default_type: SymlinkType = SymlinkType.AUTO, **kwargs) -> None:
        super().__init__(**kwargs)
        self._default_type = default_type

    def compose(self) -> ComposeResult:
        yield self._path_row("Source:", "source_input", "browse_source")
        yield self._path_row("Destination:", "destination_input", "browse_destination")
        yield Horizontal(
            Label("Symlink Type:", classes="form_label"),
            RadioSet(
                *(
                    RadioButton(
                        kind.value.title(),
                        value=kind is self._default_type,
                        id=f"type_{kind.value}",
                    )
                    for kind in SymlinkType
                ),
                id="type_selector",
            ),
            classes="form_row",
        )
        yield Horizontal(
            Button("Create Symlink", id="create_link", variant="primary"),
            Button("Open Source Location", id="open_source"),
            Button("Open Destination Location", id="open_destination"),
            classes="form_buttons",
        )
        yield Label("", id="status_line")

    def _path_row(self, label: str, input_id: str, browse_id: str) -> Horizontal:
        return Horizontal(
            Label(label, classes="form_label"),
            Input(placeholder="Select a folder or file", id=input_id),
            Button("Browse", id=browse_id),
            classes="form_row",
        )

    @property
    def source(self) -> str:
        return self.query_one("#source_input", Input).value

    @property
    def destination(self) -> str:
        return self.query_one("#destination_input", Input).value

    def selected_type(self) -> SymlinkType:
        pressed = self.query_one(RadioSet).pressed_button
        if pressed is None or pressed.id is None:
            return self._default_type
        return SymlinkType(pressed.id.removeprefix("type_"))

    def set_path(self, input_id: str, value: str) -> None:
        self.query_one(f"#{input_id}", Input).value = value
        self.clear_status()

    def show_status(self, message: str, *, success: bool) -> None:
        status = self.query_one("#status_line", Label)
        status.update(message)
        status.set_class(success, "status_success")
        status.set_class(not success, "status_error")

    def clear_status(self) -> None:
        status = self.query_one("#status_line", Label)
        status.update("")
        status.remove_class("status_success", "status_error")

    @on(Input.Changed)
    def _handle_input_changed(self, _: Input.Changed) -> None:
        self.clear_status()

    @on(Button.Pressed)
    def _handle_button(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        event.stop()
        if button_id == "create_link":
            self.post_message(
                CreateLinkRequest(self.source, self.destination, self.selected_type())
            )
        elif button_id == "open_source":
            self.post_message(OpenLocationRequest(self.source))
        elif button_id == "open_destination":
            self.post_message(OpenLocationRequest(self.destination))
        elif button_id in FIELD_IDS:
            input_id = FIELD_IDS[button_id]
            current = self.query_one(f"#{input_id}", Input).value
            self.post_message(BrowseRequest(input_id, current))
