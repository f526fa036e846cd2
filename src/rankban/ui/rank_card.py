"""A single ranked card in the list."""

from textual.message import Message
from textual.widgets import Static

from rankban.model.compare import MovementResult
from rankban.models import Card, CardTrajectory
from rankban.ui.gesture import DRAG_THRESHOLD, LONG_PRESS_SECONDS, GestureRecognizer
from rankban.ui.indicators import build_card_line

# Columns at the left edge that count as the drag handle (padding + glyph).
HANDLE_WIDTH = 3


def _siblings(widget) -> list["RankCardWidget"]:
    return [w for w in widget.parent.children if isinstance(w, RankCardWidget)]


class RankCardWidget(Static, can_focus=True):
    """One row of the ranking.

    Pressing the handle starts a drag immediately; pressing the body arms a
    long press. Either way the release point picks the new position.
    """

    BINDINGS = [
        ("ctrl+up", "move_up", "Move up"),
        ("ctrl+down", "move_down", "Move down"),
        ("enter", "show_history"),
    ]

    DEFAULT_CSS = """
    RankCardWidget {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $surface;
    }
    RankCardWidget:focus {
        background: $primary;
    }
    RankCardWidget.armed {
        background: $primary-darken-2;
    }
    RankCardWidget.dragging {
        background: $accent;
    }
    """

    class ReorderRequested(Message):
        """Posted when the card should move to another position."""

        def __init__(self, card: "RankCardWidget", from_index: int, to_index: int):
            super().__init__()
            self.card = card
            self.from_index = from_index
            self.to_index = to_index

    def __init__(
        self,
        card: Card,
        index: int,
        movement: MovementResult | None = None,
        trajectory: CardTrajectory | None = None,
        long_press: float = LONG_PRESS_SECONDS,
        threshold: int = DRAG_THRESHOLD,
    ):
        super().__init__(build_card_line(card.rank, card.name, movement, trajectory))
        self.card = card
        self.index = index
        self.movement = movement
        self.trajectory = trajectory
        self.gesture = GestureRecognizer(
            index,
            on_commit=self._commit,
            schedule=self.set_timer,
            locate=self._locate,
            on_tap=self._on_tap,
            on_drag_start=self._on_drag_start,
            on_drag_move=self._on_drag_move,
            on_drag_end=self._on_drag_end,
            long_press=long_press,
            threshold=threshold,
        )

    def on_unmount(self) -> None:
        self.gesture.teardown()

    # -- Pointer input --

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        self.capture_mouse()
        self.gesture.pointer_down(event.screen_x, event.screen_y, on_handle=event.x < HANDLE_WIDTH)
        self.set_class(self.gesture.is_armed, "armed")

    def on_mouse_move(self, event) -> None:
        if not (self.gesture.is_armed or self.gesture.is_dragging):
            return
        event.stop()
        self.gesture.pointer_move(event.screen_x, event.screen_y)
        self.set_class(self.gesture.is_armed, "armed")
        if not self.gesture.is_armed and not self.gesture.is_dragging:
            # Long press abandoned; hand the pointer back for scrolling.
            self.release_mouse()

    def on_mouse_up(self, event) -> None:
        event.stop()
        self.release_mouse()
        self.remove_class("armed")
        self.gesture.pointer_up(event.screen_x, event.screen_y)

    def cancel_gesture(self) -> None:
        self.release_mouse()
        self.remove_class("armed")
        self.gesture.pointer_cancel()

    # -- Gesture callbacks --

    def _on_drag_start(self) -> None:
        self.remove_class("armed")
        self.add_class("dragging")
        self.screen.set_focus(None)

    def _on_drag_move(self, dx: int, dy: int) -> None:
        self.styles.offset = (0, dy)

    def _on_drag_end(self) -> None:
        self.styles.offset = (0, 0)
        self.remove_class("dragging")

    def _on_tap(self) -> None:
        self.focus()

    def _locate(self, x: int, y: int) -> int:
        """Target index for a release at screen row y.

        Releasing on another card's row takes that card's place, whichever
        way the drag went. Between rows, count the cards above the pointer.
        """
        if self.parent is None:
            return self.index
        target = 0
        for i, sibling in enumerate(_siblings(self)):
            if sibling is self:
                continue
            region = sibling.region
            if region.y <= y < region.bottom:
                return i
            if y >= region.y + region.height // 2:
                target += 1
        return target

    def _commit(self, from_index: int, to_index: int) -> None:
        self.post_message(self.ReorderRequested(self, from_index, to_index))

    # -- Keyboard --

    def action_move_up(self) -> None:
        if self.index > 0:
            self.post_message(self.ReorderRequested(self, self.index, self.index - 1))

    def action_move_down(self) -> None:
        if self.parent is None:
            return
        count = len(_siblings(self))
        if self.index < count - 1:
            self.post_message(self.ReorderRequested(self, self.index, self.index + 1))

    def action_show_history(self) -> None:
        summary = self.trajectory.summary if self.trajectory else ""
        self.notify(f"{self.card.name}: {summary}" if summary else self.card.name)
