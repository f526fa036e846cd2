"""Handler for 'rankban trajectory'."""

from pathlib import Path

from rankban.cli._common import error, find_board, load_store_or_die, output_json
from rankban.git import read_config
from rankban.ids import normalize_id
from rankban.model.trajectory import all_trajectories, get_card_trajectory, rank_history
from rankban.models import CardTrajectory


def _trajectory_dict(t: CardTrajectory) -> dict:
    return {
        "id": t.card_id,
        "name": t.card_name,
        "summary": t.summary,
        "ranks": [{"episode": p.episode_number, "rank": p.rank} for p in t.trajectory],
    }


def trajectory(args) -> int:
    """Show how cards' ranks changed across episodes."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    separator = read_config(Path(args.repo).resolve())["trajectory_separator"]

    snapshots = store.get_snapshots_by_board(board.id)
    cards = store.get_cards_by_board(board.id)

    if args.card:
        card_id = normalize_id(args.card)
        names = {c.id: c.name for c in cards}
        for t in rank_history(snapshots, separator):
            names.setdefault(t.card_id, t.card_name)
        if card_id not in names:
            error(f"Card '{args.card}' not found on {board.name}.", args.json)
        trajectories = [get_card_trajectory(card_id, names[card_id], snapshots, separator)]
    elif args.all:
        trajectories = rank_history(snapshots, separator)
    else:
        trajectories = all_trajectories(cards, snapshots, separator)

    if args.json:
        output_json([_trajectory_dict(t) for t in trajectories])
    else:
        for t in trajectories:
            print(f"  {t.card_id}  {t.card_name:<30} {t.summary}")
    return 0
