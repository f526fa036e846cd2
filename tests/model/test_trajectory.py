"""Tests for rank trajectories."""

from dataclasses import replace

from rankban.model.rank import move_item
from rankban.model.snapshot import create_snapshot
from rankban.model.trajectory import NEVER_RANKED, all_trajectories, get_card_trajectory, rank_history, summarize
from rankban.models import TrajectoryPoint


def _episodes(*orders):
    """One snapshot per list of cards, numbered from 1."""
    return [create_snapshot("1", cards, n) for n, cards in enumerate(orders, start=1)]


def test_summary_joins_ranks(make_cards):
    cards = make_cards("A", "B", "C")
    snapshots = _episodes(cards, move_item(cards, 0, 2)[0])

    trajectory = get_card_trajectory("1", "A", snapshots)

    assert trajectory.summary == "1→3"
    assert [p.rank for p in trajectory.trajectory] == [1, 3]
    assert [p.episode_number for p in trajectory.trajectory] == [1, 2]


def test_never_ranked_is_new(make_cards):
    snapshots = _episodes(make_cards("A", "B"))
    trajectory = get_card_trajectory("99", "Later", snapshots)
    assert trajectory.summary == NEVER_RANKED == "New"
    assert trajectory.trajectory == (TrajectoryPoint(1, None),)


def test_no_snapshots():
    trajectory = get_card_trajectory("1", "A", [])
    assert trajectory.trajectory == ()
    assert trajectory.summary == "New"


def test_gaps_are_skipped_in_summary(make_cards):
    a, b = make_cards("A", "B")
    snapshots = _episodes([a, b], [replace(b, rank=1)], [replace(b, rank=1), replace(a, rank=2)])

    trajectory = get_card_trajectory("1", "A", snapshots)

    assert [p.rank for p in trajectory.trajectory] == [1, None, 2]
    assert trajectory.summary == "1→2"


def test_custom_separator():
    points = [TrajectoryPoint(1, 4), TrajectoryPoint(2, 2)]
    assert summarize(points, " > ") == "4 > 2"


def test_ranks_match_each_snapshot(make_cards):
    cards = make_cards("A", "B", "C", "D")
    orders = [cards]
    for from_index, to_index in [(3, 0), (1, 2), (0, 3)]:
        orders.append(move_item(orders[-1], from_index, to_index)[0])
    snapshots = _episodes(*orders)

    for card in cards:
        trajectory = get_card_trajectory(card.id, card.name, snapshots)
        assert [p.rank for p in trajectory.trajectory] == [s.rank_of(card.id) for s in snapshots]


def test_all_trajectories_follows_card_order(make_cards):
    cards = make_cards("A", "B")
    snapshots = _episodes(cards)
    trajectories = all_trajectories(list(reversed(cards)), snapshots)
    assert [t.card_name for t in trajectories] == ["B", "A"]


def test_rank_history_includes_removed_cards(make_cards):
    a, b, c = make_cards("A", "B", "C")
    snapshots = _episodes([a, b, c], [replace(c, rank=1), replace(a, rank=2)])

    history = rank_history(snapshots)

    assert [t.card_name for t in history] == ["C", "A", "B"]
    assert history[2].summary == "2"


def test_rank_history_keeps_first_name(make_cards):
    a, b = make_cards("A", "B")
    snapshots = _episodes([a, b], [replace(a, name="Renamed"), b])
    assert rank_history(snapshots)[0].card_name == "A"
