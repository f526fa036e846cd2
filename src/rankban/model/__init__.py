"""Ranking engine: rank order, episodes, movement and trajectories."""

from rankban.model.board import create_board, create_card, delete_card, find_card, rename_card
from rankban.model.compare import (
    Entered,
    Moved,
    MovementResult,
    NoHistory,
    Removed,
    agreement,
    compare_snapshots,
    compute_movement,
)
from rankban.model.loader import load_library
from rankban.model.rank import InvalidIndexError, RankStore, find_move, move_item
from rankban.model.snapshot import capture_episode, create_snapshot, next_episode_number, update_snapshot
from rankban.model.trajectory import all_trajectories, get_card_trajectory, rank_history
from rankban.model.writer import save_library

__all__ = [
    "Entered",
    "InvalidIndexError",
    "Moved",
    "MovementResult",
    "NoHistory",
    "RankStore",
    "Removed",
    "agreement",
    "all_trajectories",
    "capture_episode",
    "compare_snapshots",
    "compute_movement",
    "create_board",
    "create_card",
    "create_snapshot",
    "delete_card",
    "find_card",
    "find_move",
    "get_card_trajectory",
    "load_library",
    "move_item",
    "next_episode_number",
    "rank_history",
    "rename_card",
    "save_library",
    "update_snapshot",
]
