"""Episode snapshots: frozen captures of a board's rank order."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, Sequence

from rankban.ids import next_episode_number as _next_number
from rankban.ids import snapshot_id
from rankban.models import Card, RankingEntry, Snapshot

if TYPE_CHECKING:
    from rankban.model.ports import SnapshotRepository


def next_episode_number(snapshots: Iterable[Snapshot]) -> int:
    """max(episode_number) + 1, or 1 for a board with no episodes."""
    return _next_number(s.episode_number for s in snapshots)


def default_label(episode_number: int) -> str:
    return f"Episode {episode_number}"


def create_snapshot(
    board_id: str,
    cards: Sequence[Card],
    episode_number: int | None = None,
    label: str | None = None,
    notes: str = "",
    *,
    existing: Iterable[Snapshot] = (),
    created_at: datetime | None = None,
) -> Snapshot:
    """Freeze cards into a new Snapshot.

    Cards are sorted by rank before capture, so callers may pass them in
    any order. Names and thumbnails are copied, so later renames or
    deletions of the live cards leave the snapshot alone.

    episode_number defaults to the next number after the existing
    snapshots; label defaults to "Episode {n}". An empty card list gives a
    snapshot with no rankings.
    """
    if episode_number is None:
        episode_number = next_episode_number(existing)

    rankings = tuple(
        RankingEntry(
            card_id=card.id,
            card_name=card.name,
            rank=card.rank,
            thumbnail=card.thumbnail,
        )
        for card in sorted(cards, key=lambda c: c.rank)
    )

    return Snapshot(
        id=snapshot_id(),
        board_id=board_id,
        episode_number=episode_number,
        label=label or default_label(episode_number),
        notes=notes,
        rankings=rankings,
        created_at=created_at or datetime.now(timezone.utc),
    )


def update_snapshot(snapshot: Snapshot, label: str | None = None, notes: str | None = None) -> Snapshot:
    """Return a copy with a new label and/or notes. Rankings never change."""
    changes = {}
    if label is not None:
        changes["label"] = label
    if notes is not None:
        changes["notes"] = notes
    return replace(snapshot, **changes) if changes else snapshot


def capture_episode(
    repository: SnapshotRepository,
    board_id: str,
    cards: Sequence[Card],
    episode_number: int | None = None,
    label: str | None = None,
    notes: str = "",
) -> Snapshot:
    """Create a snapshot numbered by the repository and save it."""
    if episode_number is None:
        episode_number = repository.next_episode_number(board_id)
    snapshot = create_snapshot(board_id, cards, episode_number, label, notes)
    repository.save_snapshot(snapshot)
    return snapshot
