"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from rankban.ids import normalize_id
from rankban.model.board import find_card
from rankban.models import Board, Card, Snapshot
from rankban.store import GitStore


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with --verbose, else WARNING."""
    logging.basicConfig(
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def load_store_or_die(repo: str, json_mode: bool) -> GitStore:
    """Open the library in repo. Exit 1 with message if there isn't one."""
    repo_path = Path(repo).resolve()
    try:
        return GitStore.open(str(repo_path))
    except Exception as e:
        error(f"{e}. Run 'rankban init' first.", json_mode)


def find_board(store: GitStore, board_id: str, json_mode: bool) -> Board:
    """Lookup board by ID. Exit 1 listing available boards if not found."""
    board = store.library.boards.get(normalize_id(board_id))
    if board is not None:
        return board
    available = [f"  {b.id}  {b.name}" for b in store.library.boards.values()]
    msg = f"Board '{board_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card_or_die(store: GitStore, board: Board, card_id: str, json_mode: bool) -> Card:
    """Lookup card by ID. Exit 1 if not found."""
    try:
        return find_card(store.library, board.id, normalize_id(card_id))
    except KeyError:
        error(f"Card '{card_id}' not found on {board.name}.", json_mode)


def find_episode(store: GitStore, board: Board, number: int, json_mode: bool) -> Snapshot:
    """Lookup an episode by number. Exit 1 if not found."""
    try:
        return store.get_snapshot(board.id, number)
    except KeyError:
        error(f"Episode {number} not found on {board.name}.", json_mode)


def card_dict(card: Card) -> dict:
    data = {"id": card.id, "name": card.name, "rank": card.rank}
    if card.thumbnail:
        data["thumbnail"] = card.thumbnail
    return data


def snapshot_dict(snapshot: Snapshot) -> dict:
    return {
        "id": snapshot.id,
        "episode": snapshot.episode_number,
        "label": snapshot.label,
        "notes": snapshot.notes,
        "created": snapshot.created_at.isoformat(),
        "rankings": [{"card": e.card_id, "name": e.card_name, "rank": e.rank} for e in snapshot.rankings],
    }


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
