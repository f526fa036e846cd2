"""Per-card rank history across episodes."""

from typing import Sequence

from rankban.constants import TRAJECTORY_SEPARATOR
from rankban.models import Card, CardTrajectory, Snapshot, TrajectoryPoint

NEVER_RANKED = "New"


def summarize(points: Sequence[TrajectoryPoint], separator: str = TRAJECTORY_SEPARATOR) -> str:
    """Join the known ranks, e.g. "3→1→2". "New" if there are none."""
    ranks = [str(p.rank) for p in points if p.rank is not None]
    return separator.join(ranks) if ranks else NEVER_RANKED


def get_card_trajectory(
    card_id: str,
    card_name: str,
    snapshots: Sequence[Snapshot],
    separator: str = TRAJECTORY_SEPARATOR,
) -> CardTrajectory:
    """Trace card_id through snapshots, one point per snapshot.

    snapshots should be in episode order. A point's rank is None for
    episodes the card wasn't ranked in.
    """
    points = tuple(TrajectoryPoint(s.episode_number, s.rank_of(card_id)) for s in snapshots)
    return CardTrajectory(
        card_id=card_id,
        card_name=card_name,
        trajectory=points,
        summary=summarize(points, separator),
    )


def all_trajectories(
    cards: Sequence[Card],
    snapshots: Sequence[Snapshot],
    separator: str = TRAJECTORY_SEPARATOR,
) -> list[CardTrajectory]:
    """Trajectories for the live cards, in the order given.

    Cards removed from the board since an episode get no entry.
    """
    return [get_card_trajectory(card.id, card.name, snapshots, separator) for card in cards]


def _latest_rank(trajectory: CardTrajectory) -> int:
    return next(p.rank for p in reversed(trajectory.trajectory) if p.rank is not None)


def rank_history(snapshots: Sequence[Snapshot], separator: str = TRAJECTORY_SEPARATOR) -> list[CardTrajectory]:
    """Trajectories for every card ever ranked in snapshots.

    Names come from each card's first appearance. Sorted by the most
    recent rank each card held.
    """
    names: dict[str, str] = {}
    for snapshot in snapshots:
        for entry in snapshot.rankings:
            names.setdefault(entry.card_id, entry.card_name)

    trajectories = [get_card_trajectory(card_id, name, snapshots, separator) for card_id, name in names.items()]

    return sorted(trajectories, key=_latest_rank)
