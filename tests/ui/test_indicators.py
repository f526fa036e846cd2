"""Tests for movement and trajectory indicator text."""

from rankban.model.compare import Entered, Moved, NoHistory, Removed
from rankban.models import CardTrajectory, TrajectoryPoint
from rankban.ui.indicators import ICON_HANDLE, build_card_line, movement_text, trajectory_text


def _styles(text):
    """All style strings applied to a Rich Text."""
    return [str(text.style)] + [str(span.style) for span in text.spans]


def test_climbed():
    text = movement_text(Moved("1", "A", current_rank=1, baseline_rank=3))
    assert text.plain == "▲2"
    assert any("green" in s for s in _styles(text))


def test_fell():
    text = movement_text(Moved("1", "A", current_rank=4, baseline_rank=3))
    assert text.plain == "▼1"
    assert any("red" in s for s in _styles(text))


def test_held():
    assert movement_text(Moved("1", "A", current_rank=2, baseline_rank=2)).plain == "—"


def test_new_and_removed():
    assert movement_text(Entered("1", "A", current_rank=1)).plain == "NEW"
    assert movement_text(Removed("1", "A", baseline_rank=1)).plain == "OUT"


def test_no_history_is_blank():
    assert movement_text(NoHistory("1", "A", current_rank=1)).plain == ""
    assert movement_text(None).plain == ""


def test_trajectory_text():
    trajectory = CardTrajectory("1", "A", (TrajectoryPoint(1, 3), TrajectoryPoint(2, 1)), "3→1")
    assert trajectory_text(trajectory).plain == "3→1"
    assert trajectory_text(CardTrajectory("1", "A", (), "New")).plain == ""


def test_card_line():
    trajectory = CardTrajectory("1", "Alien", (TrajectoryPoint(1, 2),), "2")
    line = build_card_line(1, "Alien", Moved("1", "Alien", 1, 2), trajectory)
    assert line.plain == f"{ICON_HANDLE}  1. Alien  ▲1  2"


def test_card_line_without_history():
    assert build_card_line(3, "Brazil").plain == f"{ICON_HANDLE}  3. Brazil"
