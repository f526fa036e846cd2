"""Git-backed implementation of the card and snapshot repositories."""

import logging
from typing import Sequence

from rankban.constants import BRANCH_NAME, LIBRARY_TITLE
from rankban.model.board import create_board
from rankban.model.loader import load_library
from rankban.model.ports import CardRepository, SnapshotRepository
from rankban.model.rank import is_dense, sort_by_rank
from rankban.model.snapshot import next_episode_number
from rankban.model.writer import save_library
from rankban.models import Card, Library, Snapshot

logger = logging.getLogger(__name__)


class GitStore(CardRepository, SnapshotRepository):
    """Keeps a Library in memory and commits it after every change."""

    def __init__(self, library: Library, branch: str = BRANCH_NAME):
        self.library = library
        self.branch = branch

    @classmethod
    def open(cls, repo_path: str, branch: str = BRANCH_NAME) -> "GitStore":
        """Load the library from repo_path's branch."""
        return cls(load_library(repo_path, branch), branch)

    @classmethod
    def create(cls, repo_path: str, board_name: str | None = "Rankings", branch: str = BRANCH_NAME) -> "GitStore":
        """Start a new library on branch, optionally with one empty board."""
        store = cls(Library(repo_path=str(repo_path), title=LIBRARY_TITLE), branch)
        if board_name:
            create_board(store.library, board_name)
        store.commit("Initialize rankban")
        return store

    def commit(self, message: str) -> str:
        """Save the library and return the new commit hash."""
        self.library.commit = save_library(self.library, message=message, branch=self.branch)
        logger.debug("%s (%s)", message, self.library.commit[:7])
        return self.library.commit

    def _board_name(self, board_id: str) -> str:
        return self.library.board(board_id).name

    # --- CardRepository ---

    def get_cards_by_board(self, board_id: str) -> list[Card]:
        self.library.board(board_id)
        return list(self.library.cards.get(board_id, []))

    def save_cards_for_board(self, board_id: str, cards: Sequence[Card]) -> None:
        name = self._board_name(board_id)
        if not is_dense(cards):
            raise ValueError(f"Board '{board_id}' ranks must be 1..{len(cards)}")
        self.library.cards[board_id] = sort_by_rank(cards)
        self.commit(f"Reorder {name}")

    # --- SnapshotRepository ---

    def get_snapshots_by_board(self, board_id: str) -> list[Snapshot]:
        self.library.board(board_id)
        return list(self.library.snapshots.get(board_id, []))

    def get_snapshot(self, board_id: str, episode_number: int) -> Snapshot:
        for snapshot in self.get_snapshots_by_board(board_id):
            if snapshot.episode_number == episode_number:
                return snapshot
        raise KeyError(f"Episode {episode_number} not found on board '{board_id}'")

    def latest_snapshot(self, board_id: str) -> Snapshot | None:
        snapshots = self.get_snapshots_by_board(board_id)
        return snapshots[-1] if snapshots else None

    def save_snapshot(self, snapshot: Snapshot) -> None:
        name = self._board_name(snapshot.board_id)
        snapshots = self.library.snapshots.setdefault(snapshot.board_id, [])
        existing = next((s for s in snapshots if s.id == snapshot.id), None)
        if existing is not None:
            if existing.rankings != snapshot.rankings or existing.episode_number != snapshot.episode_number:
                raise ValueError("Only an episode's label and notes can change")
            snapshots[snapshots.index(existing)] = snapshot
            self.commit(f"Update {name} episode {snapshot.episode_number}")
            return

        if any(s.episode_number == snapshot.episode_number for s in snapshots):
            raise ValueError(f"Episode {snapshot.episode_number} already exists on {name}")
        snapshots.append(snapshot)
        snapshots.sort(key=lambda s: s.episode_number)
        self.commit(f"Save {name} episode {snapshot.episode_number}: {snapshot.label}")

    def delete_snapshot(self, snapshot_id: str) -> None:
        for board_id, snapshots in self.library.snapshots.items():
            for snapshot in snapshots:
                if snapshot.id == snapshot_id:
                    snapshots.remove(snapshot)
                    self.commit(f"Delete {self._board_name(board_id)} episode {snapshot.episode_number}")
                    return
        raise KeyError(f"Snapshot '{snapshot_id}' not found")

    def next_episode_number(self, board_id: str) -> int:
        return next_episode_number(self.get_snapshots_by_board(board_id))
