"""Ranked list screen: one board's cards in rank order."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Static

from rankban.model.compare import compute_movement
from rankban.model.rank import InvalidIndexError, RankStore
from rankban.model.snapshot import capture_episode
from rankban.model.trajectory import all_trajectories
from rankban.store import GitStore
from rankban.ui.episode import SaveEpisodeModal
from rankban.ui.history import HistoryScreen
from rankban.ui.rank_card import RankCardWidget

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No items yet. Add your first ranking with `rankban card add`."


class RankListScreen(Screen):
    """Shows a board's live order with movement since the last episode."""

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("ctrl+s", "save_episode", "Save episode"),
        ("h", "history", "History"),
    ]

    DEFAULT_CSS = """
    #list-header {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $primary-darken-2;
        text-style: bold;
    }
    #rank-list {
        width: 100%;
        height: 1fr;
    }
    #empty {
        padding: 1 2;
        color: $text-muted;
    }
    """

    def __init__(self, store: GitStore, board_id: str, config: dict | None = None):
        super().__init__()
        self.store = store
        self.board_id = board_id
        self.config = config or {}
        self.ranks = RankStore(board_id, store)

    @property
    def separator(self) -> str:
        return self.config.get("trajectory_separator") or "→"

    def compose(self) -> ComposeResult:
        yield Static(id="list-header")
        yield VerticalScroll(id="rank-list")
        yield Footer()

    async def on_mount(self) -> None:
        await self.rebuild()

    def _header_text(self) -> str:
        board = self.store.library.board(self.board_id)
        latest = self.store.latest_snapshot(self.board_id)
        since = f" · since {latest.label}" if latest else ""
        return f"{board.name}{since}"

    def _make_cards(self) -> list[RankCardWidget]:
        cards = self.ranks.cards
        snapshots = self.store.get_snapshots_by_board(self.board_id)
        baseline = snapshots[-1] if snapshots else None
        movements = {r.card_id: r for r in compute_movement(baseline, cards) if not r.is_removed}
        trajectories = {t.card_id: t for t in all_trajectories(cards, snapshots, self.separator)}
        long_press = self.config.get("long_press_ms", 500) / 1000
        threshold = self.config.get("drag_threshold", 10)
        return [
            RankCardWidget(
                card,
                index,
                movements.get(card.id),
                trajectories.get(card.id),
                long_press=long_press,
                threshold=threshold,
            )
            for index, card in enumerate(cards)
        ]

    async def rebuild(self, focus_index: int | None = None) -> None:
        """Re-render every card from the rank store."""
        self.query_one("#list-header", Static).update(self._header_text())
        container = self.query_one("#rank-list", VerticalScroll)
        await container.remove_children()
        if not self.ranks.cards:
            await container.mount(Static(EMPTY_MESSAGE, id="empty"))
            return
        widgets = self._make_cards()
        await container.mount_all(widgets)
        if focus_index is not None and 0 <= focus_index < len(widgets):
            widgets[focus_index].focus()
        elif focus_index is None:
            widgets[0].focus()

    async def on_rank_card_widget_reorder_requested(self, event: RankCardWidget.ReorderRequested) -> None:
        event.stop()
        try:
            changed = self.ranks.reorder(event.from_index, event.to_index)
        except InvalidIndexError as exc:
            logger.warning("ignored reorder: %s", exc)
            return
        if changed:
            await self.rebuild(focus_index=event.to_index)

    def action_cancel_drag(self) -> None:
        for card in self.query(RankCardWidget):
            if card.gesture.is_armed or card.gesture.is_dragging:
                card.cancel_gesture()

    def action_save_episode(self) -> None:
        number = self.store.next_episode_number(self.board_id)
        self.app.push_screen(SaveEpisodeModal(number), self._on_episode_details)

    async def _on_episode_details(self, result: tuple[str, str] | None) -> None:
        if result is None:
            return
        label, notes = result
        snapshot = capture_episode(self.store, self.board_id, self.ranks.cards, label=label, notes=notes)
        self.notify(f"Saved {snapshot.label}")
        await self.rebuild()

    def action_history(self) -> None:
        self.app.push_screen(HistoryScreen(self.store, self.board_id, self.separator))
