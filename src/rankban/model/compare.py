"""Rank movement between a baseline episode and a later order.

Rank 1 is best, so movement = baseline_rank - current_rank: positive means
the card climbed, negative means it fell.

Each result is one of four classes. With a baseline, a card has either
Moved, Entered (new since the baseline) or been Removed. Without one,
every card is NoHistory. The flat attributes (movement, is_new,
is_removed, current_rank, baseline_rank) are available on all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from rankban.models import Card, Snapshot


@dataclass(frozen=True)
class NoHistory:
    """No baseline to compare against."""

    card_id: str
    card_name: str
    current_rank: int

    baseline_rank = None
    movement = None
    is_new = False
    is_removed = False


@dataclass(frozen=True)
class Moved:
    """Ranked in both the baseline and the current order."""

    card_id: str
    card_name: str
    current_rank: int
    baseline_rank: int

    is_new = False
    is_removed = False

    @property
    def movement(self) -> int:
        return self.baseline_rank - self.current_rank


@dataclass(frozen=True)
class Entered:
    """Ranked now but missing from the baseline."""

    card_id: str
    card_name: str
    current_rank: int

    baseline_rank = None
    movement = None
    is_new = True
    is_removed = False


@dataclass(frozen=True)
class Removed:
    """Ranked in the baseline but no longer ranked."""

    card_id: str
    card_name: str
    baseline_rank: int

    current_rank = None
    movement = None
    is_new = False
    is_removed = True


MovementResult = Union[NoHistory, Moved, Entered, Removed]


def _ranked(current: Snapshot | Sequence[Card]) -> Iterable[tuple[str, str, int]]:
    """(card_id, name, rank) for a live card list or a snapshot."""
    if isinstance(current, Snapshot):
        return [(e.card_id, e.card_name, e.rank) for e in current.rankings]
    return [(c.id, c.name, c.rank) for c in current]


def _order(result: MovementResult) -> tuple[int, int]:
    if result.is_removed:
        return (1, result.baseline_rank)
    return (0, result.current_rank)


def compute_movement(baseline: Snapshot | None, current: Snapshot | Sequence[Card]) -> list[MovementResult]:
    """Compare current against baseline, card by card.

    current is either the live card list or a later snapshot. Results are
    sorted by current rank, with removed cards last.
    """
    ranked = _ranked(current)

    if baseline is None:
        results: list[MovementResult] = [NoHistory(card_id, name, rank) for card_id, name, rank in ranked]
        return sorted(results, key=_order)

    remaining = {entry.card_id: entry for entry in baseline.rankings}
    results = []
    for card_id, name, rank in ranked:
        entry = remaining.pop(card_id, None)
        if entry is None:
            results.append(Entered(card_id, name, rank))
        else:
            results.append(Moved(card_id, name, rank, entry.rank))

    for entry in remaining.values():
        results.append(Removed(entry.card_id, entry.card_name, entry.rank))

    return sorted(results, key=_order)


def compare_snapshots(left: Snapshot, right: Snapshot) -> list[MovementResult]:
    """Movement from the left (earlier) episode to the right one."""
    return compute_movement(left, right)


def agreement(left: Iterable[tuple[str, int]], right: Iterable[tuple[str, int]]) -> int:
    """How closely two ranked lists agree, as a percentage.

    Each input is (id, rank) pairs. Every id ranked in both lists scores
    1 - |difference| / longest list length (floored at 0). The result is
    the mean score as a rounded percentage, or 0 when no id is shared.
    """
    left_ranks = dict(left)
    right_ranks = dict(right)
    if not left_ranks or not right_ranks:
        return 0

    common = [card_id for card_id in left_ranks if card_id in right_ranks]
    if not common:
        return 0

    longest = max(len(left_ranks), len(right_ranks))
    total = sum(max(0.0, 1 - abs(left_ranks[i] - right_ranks[i]) / longest) for i in common)
    return round(total / len(common) * 100)


def movement_counts(results: Iterable[MovementResult]) -> dict[str, int]:
    """Tally results into up/down/same/new/removed counts."""
    counts = {"up": 0, "down": 0, "same": 0, "new": 0, "removed": 0}
    for result in results:
        if result.is_new:
            counts["new"] += 1
        elif result.is_removed:
            counts["removed"] += 1
        elif result.movement is None or result.movement == 0:
            counts["same"] += 1
        elif result.movement > 0:
            counts["up"] += 1
        else:
            counts["down"] += 1
    return counts
