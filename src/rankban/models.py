"""Data models for rankban boards."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Card:
    """A ranked item on a board.

    rank is 1-indexed and only meaningful against cards sharing board_id.
    """

    id: str
    board_id: str
    name: str
    rank: int
    thumbnail: str | None = None
    notes: str = ""


@dataclass(frozen=True)
class RankingEntry:
    """One card's identity and rank, copied at capture time."""

    card_id: str
    card_name: str
    rank: int
    thumbnail: str | None = None


@dataclass(frozen=True)
class Snapshot:
    """An episode: a frozen capture of a board's order."""

    id: str
    board_id: str
    episode_number: int
    label: str
    notes: str
    rankings: tuple[RankingEntry, ...]
    created_at: datetime

    def rank_of(self, card_id: str) -> int | None:
        """Rank of card_id in this episode, or None if it wasn't ranked."""
        for entry in self.rankings:
            if entry.card_id == card_id:
                return entry.rank
        return None


@dataclass(frozen=True)
class TrajectoryPoint:
    episode_number: int
    rank: int | None


@dataclass(frozen=True)
class CardTrajectory:
    """A card's rank across a sequence of episodes."""

    card_id: str
    card_name: str
    trajectory: tuple[TrajectoryPoint, ...]
    summary: str


@dataclass
class Board:
    """A named ranking list."""

    id: str
    name: str
    notes: str = ""


@dataclass
class Library:
    """Everything stored on a repository's rankban branch."""

    repo_path: str = ""
    commit: str | None = None
    title: str = ""
    boards: dict[str, Board] = field(default_factory=dict)
    cards: dict[str, list[Card]] = field(default_factory=dict)
    snapshots: dict[str, list[Snapshot]] = field(default_factory=dict)

    def board(self, board_id: str) -> Board:
        """Look up a board, raising KeyError if it doesn't exist."""
        try:
            return self.boards[board_id]
        except KeyError:
            raise KeyError(f"Board '{board_id}' not found") from None
