"""Tests for board and card mutations."""

import pytest

from rankban.model.board import create_board, create_card, delete_card, find_card, rename_card
from rankban.model.rank import is_dense
from rankban.model.snapshot import create_snapshot
from rankban.models import Library


@pytest.fixture
def library():
    library = Library(title="test")
    board = create_board(library, "Films")
    for name in ("Alien", "Brazil", "Casablanca"):
        create_card(library, board.id, name)
    return library


def test_create_board_assigns_next_id(library):
    board = create_board(library, "Books")
    assert board.id == "2"
    assert library.cards["2"] == []
    assert library.snapshots["2"] == []


def test_create_card_appends_at_bottom(library):
    card = create_card(library, "1", "Dune", thumbnail="posters/dune.jpg")
    assert card.rank == 4
    assert card.thumbnail == "posters/dune.jpg"
    assert is_dense(library.cards["1"])


def test_card_ids_are_unique_across_boards(library):
    create_board(library, "Books")
    card = create_card(library, "2", "Emma")
    assert card.id == "4"
    assert card.rank == 1


def test_create_card_unknown_board(library):
    with pytest.raises(KeyError):
        create_card(library, "9", "Nope")


def test_find_card(library):
    assert find_card(library, "1", "2").name == "Brazil"
    with pytest.raises(KeyError):
        find_card(library, "1", "99")


def test_rename_card_keeps_snapshot_names(library):
    snapshot = create_snapshot("1", library.cards["1"], 1)
    renamed = rename_card(library, "1", "1", "Aliens")

    assert renamed.name == "Aliens"
    assert renamed.rank == 1
    assert find_card(library, "1", "1").name == "Aliens"
    assert snapshot.rankings[0].card_name == "Alien"


def test_delete_card_closes_gap(library):
    delete_card(library, "1", "2")

    cards = library.cards["1"]
    assert [c.name for c in cards] == ["Alien", "Casablanca"]
    assert [c.rank for c in cards] == [1, 2]


def test_delete_unknown_card(library):
    with pytest.raises(KeyError):
        delete_card(library, "1", "99")
