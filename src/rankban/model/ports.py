"""
Ports for persisting boards and episodes.

The ranking engine never stores anything itself. It reads and writes
through these interfaces.

Implementations:
    - rankban.store.GitStore: records on the rankban branch of a git repo.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from rankban.models import Card, Snapshot


class CardRepository(ABC):
    """Port for a board's ranked cards."""

    @abstractmethod
    def get_cards_by_board(self, board_id: str) -> list[Card]:
        """
        Fetch a board's cards.

        Returns:
            Cards sorted by rank ascending.
        """

    @abstractmethod
    def save_cards_for_board(self, board_id: str, cards: Sequence[Card]) -> None:
        """
        Replace the stored order of a board's cards.

        Called once per committed reorder with the full post-move list.
        """


class SnapshotRepository(ABC):
    """Port for episode snapshots."""

    @abstractmethod
    def get_snapshots_by_board(self, board_id: str) -> list[Snapshot]:
        """
        Fetch a board's snapshots.

        Returns:
            Snapshots sorted by episode number ascending. Deleted
            snapshots are never returned.
        """

    @abstractmethod
    def save_snapshot(self, snapshot: Snapshot) -> None:
        """Store a new snapshot or a label/notes edit of an existing one."""

    @abstractmethod
    def delete_snapshot(self, snapshot_id: str) -> None:
        """Remove a snapshot permanently."""

    @abstractmethod
    def next_episode_number(self, board_id: str) -> int:
        """Episode number the board's next snapshot should get."""
