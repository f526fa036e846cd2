"""Shared fixtures: temporary git repos and a small ranked library."""

from datetime import datetime, timezone

import pytest
from git import Repo

from rankban.model.board import create_board, create_card
from rankban.models import Card, Library
from rankban.store import GitStore


@pytest.fixture(autouse=True)
def git_identity(monkeypatch):
    """Commits need an author even on machines with no git config."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")


@pytest.fixture
def empty_repo(tmp_path):
    """Create a git repo with one commit on its default branch."""
    repo = Repo.init(tmp_path)
    (tmp_path / ".gitkeep").write_text("")
    repo.index.add([".gitkeep"])
    repo.index.commit("Initial commit")
    return tmp_path


@pytest.fixture
def library_repo(empty_repo):
    """A repo whose rankban branch holds board "1" (Films) ranking Alien, Brazil, Casablanca."""
    library = Library(repo_path=str(empty_repo), title="rankban")
    board = create_board(library, "Films")
    for name in ("Alien", "Brazil", "Casablanca"):
        create_card(library, board.id, name)
    GitStore(library).commit("Initialize test library")
    return empty_repo


@pytest.fixture
def store(library_repo):
    return GitStore.open(str(library_repo))


@pytest.fixture
def make_cards():
    """Build a dense list of cards named after the given strings."""

    def _make(*names, board_id="1"):
        return [Card(id=str(i + 1), board_id=board_id, name=name, rank=i + 1) for i, name in enumerate(names)]

    return _make


@pytest.fixture
def fixed_time():
    return datetime(2024, 3, 1, 20, 30, tzinfo=timezone.utc)
