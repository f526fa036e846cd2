"""Tests for rank ordering and the rank store."""

import random
from dataclasses import replace

import pytest

from rankban.model.ports import CardRepository
from rankban.model.rank import InvalidIndexError, RankStore, find_move, is_dense, move_item, renumber, sort_by_rank


class MemoryCards(CardRepository):
    """Records every save so tests can count them."""

    def __init__(self, cards):
        self.cards = list(cards)
        self.saves = []

    def get_cards_by_board(self, board_id):
        return list(self.cards)

    def save_cards_for_board(self, board_id, cards):
        self.saves.append(list(cards))
        self.cards = list(cards)


def _names(cards):
    return [c.name for c in cards]


def test_move_last_to_first(make_cards):
    cards, changed = move_item(make_cards("A", "B", "C"), 2, 0)
    assert changed
    assert _names(cards) == ["C", "A", "B"]
    assert [c.rank for c in cards] == [1, 2, 3]


def test_move_first_to_last(make_cards):
    cards, changed = move_item(make_cards("A", "B", "C", "D"), 0, 3)
    assert changed
    assert _names(cards) == ["B", "C", "D", "A"]
    assert [c.rank for c in cards] == [1, 2, 3, 4]


def test_move_same_index_is_noop(make_cards):
    original = make_cards("A", "B", "C")
    cards, changed = move_item(original, 1, 1)
    assert not changed
    assert cards is original


def test_move_same_index_out_of_range_is_still_noop(make_cards):
    cards, changed = move_item(make_cards("A"), 5, 5)
    assert not changed


@pytest.mark.parametrize("from_index,to_index", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_move_out_of_range_raises(make_cards, from_index, to_index):
    with pytest.raises(InvalidIndexError) as exc:
        move_item(make_cards("A", "B", "C"), from_index, to_index)
    assert exc.value.length == 3


def test_invalid_index_is_an_index_error(make_cards):
    with pytest.raises(IndexError):
        move_item([], 0, 1)


def test_single_card_move_to_self(make_cards):
    cards, changed = move_item(make_cards("Solo"), 0, 0)
    assert not changed
    assert cards[0].rank == 1


def test_density_holds_over_random_moves(make_cards):
    rng = random.Random(1234)
    cards = make_cards(*"ABCDEFGHIJ")
    for _ in range(200):
        from_index = rng.randrange(len(cards))
        to_index = rng.randrange(len(cards))
        cards, _ = move_item(cards, from_index, to_index)
        assert is_dense(cards)
        assert sorted(_names(cards)) == list("ABCDEFGHIJ")


def test_move_does_not_touch_input(make_cards):
    original = make_cards("A", "B", "C")
    move_item(original, 0, 2)
    assert _names(original) == ["A", "B", "C"]
    assert [c.rank for c in original] == [1, 2, 3]


def test_is_dense(make_cards):
    cards = make_cards("A", "B", "C")
    assert is_dense(cards)
    assert is_dense([])
    gap = [cards[0], replace(cards[1], rank=3)]
    assert not is_dense(gap)


def test_renumber_and_sort(make_cards):
    a, b, c = make_cards("A", "B", "C")
    shuffled = sort_by_rank([c, a, b])
    assert _names(shuffled) == ["A", "B", "C"]
    assert [card.rank for card in renumber([c, a])] == [1, 2]


class TestFindMove:
    def test_moved_up(self):
        assert find_move(["A", "B", "C", "D"], ["A", "D", "B", "C"]) == (3, 1)

    def test_moved_down(self):
        assert find_move(["A", "B", "C", "D"], ["B", "C", "D", "A"]) == (0, 3)

    def test_adjacent_swap(self):
        assert find_move(["A", "B", "C"], ["B", "A", "C"]) in {(0, 1), (1, 0)}

    def test_pair_reproduces_new_order(self, make_cards):
        old = make_cards("A", "B", "C", "D", "E")
        new_ids = ["1", "2", "5", "3", "4"]
        from_index, to_index = find_move([c.id for c in old], new_ids)
        moved, _ = move_item(old, from_index, to_index)
        assert [c.id for c in moved] == new_ids

    def test_unchanged(self):
        assert find_move(["A", "B"], ["A", "B"]) is None

    def test_length_mismatch(self):
        assert find_move(["A", "B"], ["A"]) is None


class TestRankStore:
    def test_reorder_saves_once(self, make_cards):
        repo = MemoryCards(make_cards("A", "B", "C"))
        store = RankStore("1", repo)

        assert store.reorder(2, 0)

        assert len(repo.saves) == 1
        assert _names(repo.saves[0]) == ["C", "A", "B"]
        assert _names(store.cards) == ["C", "A", "B"]

    def test_identity_reorder_never_saves(self, make_cards):
        repo = MemoryCards(make_cards("A", "B", "C"))
        store = RankStore("1", repo)

        assert not store.reorder(1, 1)

        assert repo.saves == []

    def test_out_of_range_never_saves(self, make_cards):
        repo = MemoryCards(make_cards("A", "B"))
        store = RankStore("1", repo)

        with pytest.raises(InvalidIndexError):
            store.reorder(0, 2)

        assert repo.saves == []
        assert _names(store.cards) == ["A", "B"]

    def test_loads_in_rank_order(self, make_cards):
        a, b, c = make_cards("A", "B", "C")
        store = RankStore("1", MemoryCards([c, a, b]))
        assert _names(store) == ["A", "B", "C"]
        assert len(store) == 3
        assert store.index_of("3") == 2

    def test_index_of_unknown(self, make_cards):
        store = RankStore("1", MemoryCards(make_cards("A")))
        with pytest.raises(KeyError):
            store.index_of("99")
