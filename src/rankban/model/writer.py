"""Save a rankban library to git without touching the working tree."""

import re
import subprocess
from pathlib import Path

from rankban.constants import BRANCH_NAME
from rankban.ids import pad_id
from rankban.models import Board, Card, Library, Snapshot
from rankban.parser import serialize_document


def slugify(text: str) -> str:
    """Convert text to a filename-friendly slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "untitled"


def board_dir_name(board: Board) -> str:
    """Directory name for a board: "001.my-board"."""
    return f"{pad_id(board.id)}.{slugify(board.name)}"


# --- Record serialization ---


def card_to_text(card: Card) -> str:
    meta = {"rank": card.rank}
    if card.thumbnail:
        meta["thumbnail"] = card.thumbnail
    return serialize_document(card.name, card.notes, meta)


def snapshot_to_text(snapshot: Snapshot) -> str:
    rankings = []
    for entry in snapshot.rankings:
        raw = {"card": entry.card_id, "name": entry.card_name, "rank": entry.rank}
        if entry.thumbnail:
            raw["thumbnail"] = entry.thumbnail
        rankings.append(raw)
    meta = {
        "id": snapshot.id,
        "created": snapshot.created_at.isoformat(),
        "rankings": rankings,
    }
    return serialize_document(snapshot.label, snapshot.notes, meta)


# --- Git plumbing ---


def _git(repo_path: Path, args: list[str]) -> str:
    """Run a git command and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _hash_object(repo_path: Path, content: str) -> str:
    """Write content to the object store and return the blob hash."""
    result = subprocess.run(
        ["git", "hash-object", "-w", "--stdin"],
        cwd=repo_path,
        input=content.encode("utf-8"),
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _mktree(repo_path: Path, entries: list[tuple[str, str, str, str]]) -> str:
    """Create a tree object from (mode, type, sha, name) entries."""
    lines = [f"{mode} {typ} {sha}\t{name}" for mode, typ, sha, name in entries]
    content = "\n".join(lines) + "\n" if lines else ""

    result = subprocess.run(
        ["git", "mktree"],
        cwd=repo_path,
        input=content.encode("utf-8"),
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _get_branch_tip(repo_path: Path, branch: str) -> str | None:
    """Commit hash of a branch, or None if it doesn't exist."""
    result = subprocess.run(
        ["git", "rev-parse", "--verify", f"refs/heads/{branch}"],
        cwd=repo_path,
        capture_output=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8").strip()


def _blob_entry(repo_path: Path, name: str, text: str) -> tuple[str, str, str, str]:
    return ("100644", "blob", _hash_object(repo_path, text), name)


def _tree_entry(repo_path: Path, name: str, entries: list) -> tuple[str, str, str, str]:
    return ("040000", "tree", _mktree(repo_path, entries), name)


# --- Tree building ---


def _build_board_tree(repo_path: Path, library: Library, board: Board) -> str:
    entries = [_blob_entry(repo_path, "index.md", serialize_document(board.name, board.notes))]

    cards = library.cards.get(board.id, [])
    if cards:
        card_entries = [_blob_entry(repo_path, f"{pad_id(c.id)}.md", card_to_text(c)) for c in cards]
        entries.append(_tree_entry(repo_path, "cards", card_entries))

    snapshots = library.snapshots.get(board.id, [])
    if snapshots:
        episode_entries = [
            _blob_entry(repo_path, f"{pad_id(str(s.episode_number))}.md", snapshot_to_text(s)) for s in snapshots
        ]
        entries.append(_tree_entry(repo_path, "episodes", episode_entries))

    return _mktree(repo_path, entries)


def _build_library_tree(repo_path: Path, library: Library) -> str:
    """Build the complete git tree for a library and return its hash."""
    root_entries = [_blob_entry(repo_path, "index.md", serialize_document(library.title))]
    for board in library.boards.values():
        tree = _build_board_tree(repo_path, library, board)
        root_entries.append(("040000", "tree", tree, board_dir_name(board)))
    return _mktree(repo_path, root_entries)


def save_library(
    library: Library,
    message: str = "Update rankings",
    branch: str = BRANCH_NAME,
) -> str:
    """Commit the library to the branch and return the commit hash.

    No commit is made when nothing changed since library.commit.
    """
    repo_path = Path(library.repo_path)

    tree = _build_library_tree(repo_path, library)

    parent = library.commit or _get_branch_tip(repo_path, branch)

    if parent:
        parent_tree = _git(repo_path, ["rev-parse", f"{parent}^{{tree}}"])
        if parent_tree == tree:
            return parent

    parent_args = ["-p", parent] if parent else []
    new_commit = _git(repo_path, ["commit-tree", tree, *parent_args, "-m", message])
    _git(repo_path, ["update-ref", f"refs/heads/{branch}", new_commit])

    return new_commit
