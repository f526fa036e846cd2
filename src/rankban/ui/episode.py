"""Modal for saving the current order as an episode."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from rankban.model.snapshot import default_label


class SaveEpisodeModal(ModalScreen[tuple[str, str] | None]):
    """Ask for an episode label and notes.

    Dismisses with (label, notes), or None when cancelled. A blank label
    falls back to "Episode N".
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    SaveEpisodeModal {
        align: center middle;
    }
    #episode-dialog {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #episode-title {
        text-style: bold;
        margin-bottom: 1;
    }
    #episode-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }
    Button {
        margin: 0 2;
    }
    """

    def __init__(self, episode_number: int):
        super().__init__()
        self.episode_number = episode_number

    def compose(self) -> ComposeResult:
        with Vertical(id="episode-dialog"):
            yield Static(f"Save episode {self.episode_number}", id="episode-title")
            yield Input(placeholder=default_label(self.episode_number), id="episode-label")
            yield Input(placeholder="Notes", id="episode-notes")
            with Horizontal(id="episode-buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#episode-label", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self._save()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _save(self) -> None:
        label = self.query_one("#episode-label", Input).value.strip()
        notes = self.query_one("#episode-notes", Input).value.strip()
        self.dismiss((label or default_label(self.episode_number), notes))
