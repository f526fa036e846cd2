"""Tests for episode snapshots."""

from dataclasses import FrozenInstanceError, replace

import pytest

from rankban.model.ports import SnapshotRepository
from rankban.model.snapshot import capture_episode, create_snapshot, default_label, next_episode_number, update_snapshot


class MemorySnapshots(SnapshotRepository):
    def __init__(self):
        self.snapshots = []

    def get_snapshots_by_board(self, board_id):
        return [s for s in self.snapshots if s.board_id == board_id]

    def save_snapshot(self, snapshot):
        self.snapshots.append(snapshot)

    def delete_snapshot(self, snapshot_id):
        self.snapshots = [s for s in self.snapshots if s.id != snapshot_id]

    def next_episode_number(self, board_id):
        return next_episode_number(self.get_snapshots_by_board(board_id))


def test_create_snapshot_copies_ranks(make_cards, fixed_time):
    cards = make_cards("Alien", "Brazil")
    snapshot = create_snapshot("1", cards, 1, created_at=fixed_time)

    assert snapshot.board_id == "1"
    assert snapshot.episode_number == 1
    assert snapshot.created_at == fixed_time
    assert [(e.card_id, e.card_name, e.rank) for e in snapshot.rankings] == [("1", "Alien", 1), ("2", "Brazil", 2)]


def test_create_snapshot_sorts_by_rank(make_cards):
    a, b, c = make_cards("A", "B", "C")
    snapshot = create_snapshot("1", [c, a, b], 1)
    assert [e.card_name for e in snapshot.rankings] == ["A", "B", "C"]


def test_default_label():
    snapshot = create_snapshot("1", [], 4)
    assert snapshot.label == "Episode 4" == default_label(4)


def test_empty_board_gives_empty_snapshot():
    snapshot = create_snapshot("1", [], 1)
    assert snapshot.rankings == ()


def test_episode_number_follows_existing(make_cards):
    first = create_snapshot("1", make_cards("A"), 1)
    third = create_snapshot("1", make_cards("A"), 3)
    snapshot = create_snapshot("1", make_cards("A"), existing=[first, third])
    assert snapshot.episode_number == 4


def test_snapshot_is_frozen(make_cards):
    snapshot = create_snapshot("1", make_cards("A"), 1)
    with pytest.raises(FrozenInstanceError):
        snapshot.label = "changed"


def test_later_card_changes_leave_snapshot_alone(make_cards):
    cards = make_cards("A", "B")
    snapshot = create_snapshot("1", cards, 1)
    cards[0] = replace(cards[0], name="Renamed", rank=2)
    assert snapshot.rankings[0].card_name == "A"
    assert snapshot.rank_of("1") == 1


def test_update_snapshot_only_touches_label_and_notes(make_cards):
    snapshot = create_snapshot("1", make_cards("A", "B"), 1)
    updated = update_snapshot(snapshot, label="Pilot", notes="First watch")

    assert updated.label == "Pilot"
    assert updated.notes == "First watch"
    assert updated.rankings == snapshot.rankings
    assert updated.id == snapshot.id
    assert updated.created_at == snapshot.created_at


def test_update_snapshot_without_changes(make_cards):
    snapshot = create_snapshot("1", make_cards("A"), 1)
    assert update_snapshot(snapshot) is snapshot


def test_rank_of_missing_card(make_cards):
    snapshot = create_snapshot("1", make_cards("A"), 1)
    assert snapshot.rank_of("42") is None


def test_capture_episode_numbers_and_saves(make_cards):
    repo = MemorySnapshots()
    first = capture_episode(repo, "1", make_cards("A", "B"))
    second = capture_episode(repo, "1", make_cards("A", "B"), label="Finale")

    assert (first.episode_number, second.episode_number) == (1, 2)
    assert second.label == "Finale"
    assert repo.snapshots == [first, second]


def test_snapshot_ids_are_unique(make_cards):
    ids = {create_snapshot("1", make_cards("A"), n).id for n in range(1, 20)}
    assert len(ids) == 19
