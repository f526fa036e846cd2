"""Tests for saving a library to the rankban branch."""

from git import Repo

from rankban.model.board import create_board, create_card
from rankban.model.loader import load_library
from rankban.model.snapshot import create_snapshot
from rankban.model.writer import board_dir_name, card_to_text, save_library, slugify, snapshot_to_text
from rankban.models import Board, Library


def _library(repo_path):
    library = Library(repo_path=str(repo_path), title="My rankings")
    board = create_board(library, "Best Films")
    create_card(library, board.id, "Alien", thumbnail="posters/alien.jpg")
    create_card(library, board.id, "Brazil", notes="Gilliam.")
    return library


def test_slugify():
    assert slugify("Best Films of 2024!") == "best-films-of-2024"
    assert slugify("!!!") == "untitled"


def test_board_dir_name():
    assert board_dir_name(Board(id="7", name="Top Games")) == "007.top-games"


def test_card_to_text(make_cards):
    card = make_cards("Alien")[0]
    text = card_to_text(card)
    assert text.startswith("---\nrank: 1\n---\n")
    assert "# Alien" in text


def test_snapshot_to_text(make_cards, fixed_time):
    snapshot = create_snapshot("1", make_cards("Alien", "Brazil"), 1, label="Pilot", created_at=fixed_time)
    text = snapshot_to_text(snapshot)
    assert "# Pilot" in text
    assert "created: '2024-03-01T20:30:00+00:00'" in text
    assert "card: '1'" in text


def test_save_new_library_creates_branch(empty_repo):
    library = _library(empty_repo)

    commit = save_library(library, message="Create library")

    assert len(commit) == 40
    repo = Repo(empty_repo)
    assert "rankban" in [h.name for h in repo.heads]
    tree = repo.commit("rankban").tree
    assert "index.md" in tree
    assert "001.best-films/cards/001.md" in [b.path for b in tree.traverse()]


def test_save_leaves_working_tree_alone(empty_repo):
    save_library(_library(empty_repo))
    repo = Repo(empty_repo)
    assert repo.active_branch.name != "rankban"
    assert not repo.is_dirty(untracked_files=True)


def test_save_chains_commits(empty_repo):
    library = _library(empty_repo)
    first = save_library(library)
    library.commit = first

    create_card(library, "1", "Casablanca")
    second = save_library(library, message="Add card")

    assert second != first
    assert Repo(empty_repo).commit(second).parents[0].hexsha == first


def test_save_unchanged_is_noop(empty_repo):
    library = _library(empty_repo)
    library.commit = save_library(library)
    assert save_library(library) == library.commit


def test_round_trip(empty_repo, fixed_time):
    library = _library(empty_repo)
    snapshot = create_snapshot("1", library.cards["1"], 1, label="Pilot", notes="Night one.", created_at=fixed_time)
    library.snapshots["1"].append(snapshot)
    save_library(library)

    loaded = load_library(str(empty_repo))

    assert loaded.title == "My rankings"
    assert loaded.board("1").name == "Best Films"
    assert loaded.cards["1"] == library.cards["1"]
    assert loaded.snapshots["1"] == [snapshot]
