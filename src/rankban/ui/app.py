"""Main Textual application for rankban."""

from pathlib import Path

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from rankban.git import has_branch, init_repo, is_git_repo, read_config
from rankban.model.board import create_board
from rankban.store import GitStore
from rankban.ui.rank_list import RankListScreen


class ConfirmInitScreen(ModalScreen[bool]):
    """Modal screen asking to initialize a git repo."""

    CSS = """
    ConfirmInitScreen {
        align: center middle;
    }
    #dialog {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #message {
        text-align: center;
        margin-bottom: 1;
    }
    #buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }
    Button {
        margin: 0 2;
    }
    """

    def __init__(self, path: Path):
        super().__init__()
        self.path = path

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Static(f"{self.path} is not a git repository. Initialize one for rankban?", id="message")
            with Horizontal(id="buttons"):
                yield Button("Yes", id="yes", variant="primary")
                yield Button("No", id="no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")


class RankbanApp(App):
    """Ranked-list TUI over a git repository."""

    TITLE = "rankban"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, repo_path: Path, board_id: str | None = None):
        super().__init__()
        self.repo_path = repo_path
        self.board_id = board_id
        self.store: GitStore | None = None

    async def on_mount(self) -> None:
        if not is_git_repo(self.repo_path):
            self.push_screen(ConfirmInitScreen(self.repo_path), self._on_init_response)
        else:
            await self._load_library()

    async def _on_init_response(self, result: bool) -> None:
        if result:
            init_repo(self.repo_path)
            await self._load_library()
        else:
            self.exit()

    async def _load_library(self) -> None:
        """Load or create the library and show the first board."""
        if not await has_branch(self.repo_path):
            self.store = GitStore.create(str(self.repo_path))
        else:
            self.store = GitStore.open(str(self.repo_path))

        board_id = self.board_id or next(iter(self.store.library.boards), None)
        if board_id is None:
            board_id = create_board(self.store.library, "Rankings").id
            self.store.commit("Add board Rankings")

        config = read_config(self.repo_path)
        self.push_screen(RankListScreen(self.store, board_id, config))

    def action_quit(self) -> None:
        """Cancel any gesture in progress and quit.

        Every reorder is committed as it happens, so there is nothing to save.
        """
        screen = self.screen
        if isinstance(screen, RankListScreen):
            screen.action_cancel_drag()
        self.exit()
