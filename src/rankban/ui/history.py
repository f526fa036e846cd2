"""Episode history: every saved episode and each card's path through them."""

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Static

from rankban.model.compare import agreement
from rankban.model.trajectory import rank_history
from rankban.models import Snapshot
from rankban.store import GitStore


def _pairs(snapshot: Snapshot) -> list[tuple[str, int]]:
    return [(e.card_id, e.rank) for e in snapshot.rankings]


def build_episode_table(snapshots: list[Snapshot]) -> Table:
    """One row per episode, with agreement against the one before."""
    table = Table(expand=True, box=None)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Episode")
    table.add_column("Saved", style="dim")
    table.add_column("Cards", justify="right")
    table.add_column("Agreement", justify="right")

    previous = None
    for snapshot in snapshots:
        score = f"{agreement(_pairs(previous), _pairs(snapshot))}%" if previous else ""
        table.add_row(
            str(snapshot.episode_number),
            snapshot.label,
            snapshot.created_at.strftime("%Y-%m-%d %H:%M"),
            str(len(snapshot.rankings)),
            score,
        )
        previous = snapshot
    return table


def build_trajectory_table(snapshots: list[Snapshot], separator: str) -> Table:
    table = Table(expand=True, box=None)
    table.add_column("Card")
    table.add_column("Ranks")
    for trajectory in rank_history(snapshots, separator):
        table.add_row(trajectory.card_name, Text(trajectory.summary, style="dim"))
    return table


class HistoryScreen(Screen):
    """Read-only view of a board's episodes."""

    BINDINGS = [("escape", "close", "Back"), ("h", "close", "Back")]

    DEFAULT_CSS = """
    HistoryScreen .heading {
        text-style: bold;
        padding: 1 1 0 1;
    }
    HistoryScreen .empty {
        padding: 1 2;
        color: $text-muted;
    }
    """

    def __init__(self, store: GitStore, board_id: str, separator: str = "→"):
        super().__init__()
        self.store = store
        self.board_id = board_id
        self.separator = separator

    def compose(self) -> ComposeResult:
        snapshots = self.store.get_snapshots_by_board(self.board_id)
        with VerticalScroll():
            if not snapshots:
                yield Static("No episodes saved yet. Press ctrl+s to save one.", classes="empty")
            else:
                yield Static("Episodes", classes="heading")
                yield Static(build_episode_table(snapshots), id="episodes")
                yield Static("Rank history", classes="heading")
                yield Static(build_trajectory_table(snapshots, self.separator), id="trajectories")
        yield Footer()

    def action_close(self) -> None:
        self.app.pop_screen()
