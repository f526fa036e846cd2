"""Press-and-drag recognition for one ranked item.

Each rendered item owns a GestureRecognizer. It turns raw pointer events
into at most one reorder commit per press:

    IDLE --down on handle------------------> DRAGGING
    IDLE --down on body--------------------> ARMED (long-press timer running)
    ARMED --moved past threshold-----------> IDLE (the list is scrolling)
    ARMED --timer fires--------------------> DRAGGING
    ARMED --up / cancel--------------------> IDLE (a tap, on up)
    DRAGGING --move------------------------> DRAGGING (visual offset only)
    DRAGGING --up--------------------------> IDLE, commit(from, to) once
    DRAGGING --cancel----------------------> IDLE, nothing committed

The recognizer knows nothing about widgets or event loops. Time comes from
an injected schedule(delay_seconds, callback) returning a handle with
stop(), which is exactly what Textual's Widget.set_timer provides.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

LONG_PRESS_SECONDS = 0.5
DRAG_THRESHOLD = 10


class TimerHandle(Protocol):
    def stop(self) -> None: ...


Schedule = Callable[[float, Callable[[], None]], TimerHandle]


class GestureState(Enum):
    IDLE = "idle"
    ARMED = "armed"
    DRAGGING = "dragging"


class GestureRecognizer:
    """Finite-state machine for one item's press, long-press and drag.

    Args:
        index: the item's current position in the list.
        on_commit: called with (from_index, to_index) when a drag is
            released. Never more than once per press.
        schedule: starts the long-press timer.
        locate: maps the release point (x, y) to a target index. Defaults
            to the item's own index.
        on_tap: called when a press ends without becoming a drag.
        on_drag_start / on_drag_move / on_drag_end: presentation hooks.
            on_drag_move gets the (dx, dy) offset from where the drag began.
    """

    def __init__(
        self,
        index: int,
        on_commit: Callable[[int, int], None],
        schedule: Schedule,
        locate: Callable[[int, int], int] | None = None,
        on_tap: Callable[[], None] | None = None,
        on_drag_start: Callable[[], None] | None = None,
        on_drag_move: Callable[[int, int], None] | None = None,
        on_drag_end: Callable[[], None] | None = None,
        long_press: float = LONG_PRESS_SECONDS,
        threshold: int = DRAG_THRESHOLD,
    ):
        self.index = index
        self.on_commit = on_commit
        self.schedule = schedule
        self.locate = locate
        self.on_tap = on_tap
        self.on_drag_start = on_drag_start
        self.on_drag_move = on_drag_move
        self.on_drag_end = on_drag_end
        self.long_press = long_press
        self.threshold = threshold

        self.state = GestureState.IDLE
        self.offset: tuple[int, int] = (0, 0)
        self._start: tuple[int, int] | None = None
        self._timer: TimerHandle | None = None
        self._disposed = False

    @property
    def is_dragging(self) -> bool:
        return self.state is GestureState.DRAGGING

    @property
    def is_armed(self) -> bool:
        return self.state is GestureState.ARMED

    # -- Input events --

    def pointer_down(self, x: int, y: int, on_handle: bool = False) -> None:
        if self._disposed or self.state is not GestureState.IDLE:
            return
        self._start = (x, y)
        if on_handle:
            self._begin_drag()
            return
        self.state = GestureState.ARMED
        self._timer = self.schedule(self.long_press, self._long_press_elapsed)

    def pointer_move(self, x: int, y: int) -> None:
        if self._start is None:
            return
        dx = x - self._start[0]
        dy = y - self._start[1]
        if self.state is GestureState.ARMED:
            if abs(dx) > self.threshold or abs(dy) > self.threshold:
                logger.debug("item %d: long press abandoned after moving (%d, %d)", self.index, dx, dy)
                self._reset()
        elif self.state is GestureState.DRAGGING:
            self.offset = (dx, dy)
            if self.on_drag_move is not None:
                self.on_drag_move(dx, dy)

    def pointer_up(self, x: int, y: int) -> None:
        if self.state is GestureState.ARMED:
            self._reset()
            if self.on_tap is not None:
                self.on_tap()
        elif self.state is GestureState.DRAGGING:
            from_index = self.index
            to_index = self.locate(x, y) if self.locate is not None else from_index
            self._end_drag()
            logger.debug("item %d: drag released at %d", from_index, to_index)
            self.on_commit(from_index, to_index)

    def pointer_cancel(self) -> None:
        if self.state is GestureState.DRAGGING:
            self._end_drag()
        else:
            self._reset()

    def teardown(self) -> None:
        """Cancel any pending timer. Further events are ignored."""
        self._disposed = True
        if self.state is GestureState.DRAGGING:
            self._end_drag()
        else:
            self._reset()

    # -- Internals --

    def _long_press_elapsed(self) -> None:
        self._timer = None
        if self._disposed or self.state is not GestureState.ARMED:
            return
        self._begin_drag()

    def _begin_drag(self) -> None:
        self._cancel_timer()
        self.state = GestureState.DRAGGING
        self.offset = (0, 0)
        if self.on_drag_start is not None:
            self.on_drag_start()

    def _end_drag(self) -> None:
        self._reset()
        if self.on_drag_end is not None:
            self.on_drag_end()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _reset(self) -> None:
        self._cancel_timer()
        self.state = GestureState.IDLE
        self._start = None
        self.offset = (0, 0)
