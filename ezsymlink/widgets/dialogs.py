from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Label


class ConfirmDialog(ModalScreen[bool | None]):
    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self):
        yield Container(
            Label(self.message, id="dialog_message"),
            Horizontal(
                Button("Yes", id="yes", variant="primary"),
                Button("No", id="no"),
                Button("Cancel", id="cancel"),
                classes="dialog_buttons",
            ),
            id="dialog_container",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(None)
        else:
            self.dismiss(event.button.id == "yes")


class ErrorDialog(ModalScreen[None]):
    def __init__(self, message: str) -> None:
        super().__init__()
        self._message = message

    def compose(self) -> ComposeResult:
        yield Container(
            Label("Error", id="dialog_title"),
            Label(self._message, id="dialog_message"),
            Horizontal(
                Button("OK", id="ok", variant="error"),
                classes="dialog_buttons",
            ),
            id="dialog_container",
        )

    def on_button_pressed(self, _: Button.Pressed) -> None:
        self.dismiss(None)


class PathPickerScreen(ModalScreen[str | None]):
    """Pick a file or folder; returns the absolute path or None."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, start: Path) -> None:
        super().__init__()
        self._start = start
        self._selected: Path | None = None

    def compose(self) -> ComposeResult:
        yield Vertical(
            Label(f"Select a folder or file under {self._start}", id="dialog_message"),
            DirectoryTree(self._start, id="picker_tree"),
            Horizontal(
                Button("Select", id="select", variant="primary"),
                Button("Cancel", id="cancel"),
                classes="dialog_buttons",
            ),
            id="picker_container",
        )

    def on_mount(self) -> None:
        self.query_one(DirectoryTree).focus()

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.dismiss(str(event.path.resolve()))

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self._selected = event.path

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "select":
            chosen = self._selected or self._start
            self.dismiss(str(chosen.resolve()))
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
