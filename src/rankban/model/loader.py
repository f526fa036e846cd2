"""Load a rankban library from git."""

import logging
import re
from datetime import datetime, timezone

from git import Repo
from git.objects import Blob, Tree

from rankban.constants import BRANCH_NAME, LIBRARY_TITLE
from rankban.ids import normalize_id
from rankban.model.rank import is_dense, renumber, sort_by_rank
from rankban.models import Board, Card, Library, RankingEntry, Snapshot
from rankban.parser import parse_document

logger = logging.getLogger(__name__)


def _tree_get(tree: Tree, name: str) -> Blob | Tree | None:
    """Get an item from a tree by name, returning None if not found."""
    try:
        return tree[name]
    except KeyError:
        return None


def _read(blob: Blob) -> str:
    return blob.data_stream.read().decode("utf-8")


def _split_prefixed_name(name: str) -> tuple[str, str] | None:
    """Split 'prefix.rest' into (prefix, rest) or None if no dot."""
    match = re.match(r"^([^.]+)\.(.+)$", name)
    return (match.group(1), match.group(2)) if match else None


def _md_stem(item) -> str | None:
    """Filename without .md for markdown blobs, else None."""
    if not isinstance(item, Blob) or not item.name.endswith(".md"):
        return None
    return item.name[:-3]


def _parse_timestamp(value) -> datetime:
    """Front-matter timestamps may come back from YAML as str or datetime."""
    if isinstance(value, datetime):
        stamp = value
    else:
        try:
            stamp = datetime.fromisoformat(str(value))
        except ValueError:
            stamp = datetime.fromtimestamp(0, timezone.utc)
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp


def _load_cards(board_id: str, tree: Tree | None) -> list[Card]:
    cards: list[Card] = []
    if not isinstance(tree, Tree):
        return cards

    for item in tree:
        stem = _md_stem(item)
        if stem is None:
            continue
        card_id = normalize_id(stem)
        name, notes, meta = parse_document(_read(item), fallback_title=card_id)
        try:
            rank = int(meta.get("rank", 0))
        except (TypeError, ValueError):
            rank = 0
        cards.append(
            Card(
                id=card_id,
                board_id=board_id,
                name=name,
                rank=rank if rank > 0 else len(tree.blobs) + 1,
                thumbnail=meta.get("thumbnail"),
                notes=notes,
            )
        )

    cards = sorted(cards, key=lambda c: (c.rank, int(c.id) if c.id.isdigit() else 0))
    if not is_dense(cards):
        logger.warning("board %s: ranks were not 1..%d, renumbering", board_id, len(cards))
        cards = renumber(sort_by_rank(cards))
    return cards


def _parse_ranking(raw: dict) -> RankingEntry:
    return RankingEntry(
        card_id=normalize_id(str(raw["card"])),
        card_name=str(raw.get("name", raw["card"])),
        rank=int(raw["rank"]),
        thumbnail=raw.get("thumbnail"),
    )


def _load_snapshots(board_id: str, tree: Tree | None) -> list[Snapshot]:
    snapshots: list[Snapshot] = []
    if not isinstance(tree, Tree):
        return snapshots

    for item in tree:
        stem = _md_stem(item)
        if stem is None or not stem.isdigit():
            continue
        episode_number = int(stem)
        label, notes, meta = parse_document(_read(item), fallback_title=f"Episode {episode_number}")
        rankings = tuple(
            sorted(
                (_parse_ranking(raw) for raw in meta.get("rankings") or []),
                key=lambda e: e.rank,
            )
        )
        snapshots.append(
            Snapshot(
                id=str(meta.get("id") or f"{board_id}-{episode_number}"),
                board_id=board_id,
                episode_number=episode_number,
                label=label,
                notes=notes,
                rankings=rankings,
                created_at=_parse_timestamp(meta.get("created")),
            )
        )

    return sorted(snapshots, key=lambda s: s.episode_number)


def _load_tree(tree: Tree) -> Library:
    """Deserialize a rankban branch tree into a Library."""
    library = Library()

    index_blob = _tree_get(tree, "index.md")
    if isinstance(index_blob, Blob):
        library.title, _, _ = parse_document(_read(index_blob), fallback_title=LIBRARY_TITLE)
    else:
        library.title = LIBRARY_TITLE

    for item in tree:
        if not isinstance(item, Tree):
            continue
        parts = _split_prefixed_name(item.name)
        board_id = normalize_id(parts[0] if parts else item.name)
        if not board_id.isdigit():
            continue

        board_index = _tree_get(item, "index.md")
        if isinstance(board_index, Blob):
            name, notes, _ = parse_document(_read(board_index), fallback_title=board_id)
        else:
            name, notes = (parts[1] if parts else board_id), ""

        library.boards[board_id] = Board(id=board_id, name=name, notes=notes)
        library.cards[board_id] = _load_cards(board_id, _tree_get(item, "cards"))
        library.snapshots[board_id] = _load_snapshots(board_id, _tree_get(item, "episodes"))

    return library


def load_library(repo_path: str, branch: str = BRANCH_NAME) -> Library:
    """Load everything on the rankban branch."""
    repo = Repo(repo_path)

    try:
        commit = repo.commit(branch)
    except Exception:
        raise ValueError(f"Branch '{branch}' not found in repository")

    library = _load_tree(commit.tree)
    library.repo_path = str(repo_path)
    library.commit = commit.hexsha
    return library
