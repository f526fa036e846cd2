"""Handler for 'rankban compare'."""

from rankban.cli._common import find_board, find_episode, load_store_or_die, output_json
from rankban.model.compare import agreement, compute_movement, movement_counts
from rankban.models import Snapshot
from rankban.ui.indicators import movement_text


def _pairs(ranked) -> list[tuple[str, int]]:
    if isinstance(ranked, Snapshot):
        return [(e.card_id, e.rank) for e in ranked.rankings]
    return [(c.id, c.rank) for c in ranked]


def compare(args) -> int:
    """Show rank movement between two episodes, or an episode and now.

    --to defaults to the live order. --from defaults to the latest episode
    before --to.
    """
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)

    if args.to is not None:
        current = find_episode(store, board, args.to, args.json)
        current_label = current.label
    else:
        current = store.get_cards_by_board(board.id)
        current_label = "now"

    if args.from_ is not None:
        baseline = find_episode(store, board, args.from_, args.json)
    else:
        earlier = [
            s for s in store.get_snapshots_by_board(board.id) if args.to is None or s.episode_number < args.to
        ]
        baseline = earlier[-1] if earlier else None

    results = compute_movement(baseline, current)
    counts = movement_counts(results)
    score = agreement(_pairs(baseline), _pairs(current)) if baseline else None

    if args.json:
        output_json(
            {
                "from": baseline.episode_number if baseline else None,
                "to": args.to,
                "agreement": score,
                "counts": counts,
                "cards": [
                    {
                        "id": r.card_id,
                        "name": r.card_name,
                        "rank": r.current_rank,
                        "baseline": r.baseline_rank,
                        "movement": r.movement,
                        "new": r.is_new,
                        "removed": r.is_removed,
                    }
                    for r in results
                ],
            }
        )
        return 0

    if baseline is None:
        print(f"{board.name}: no earlier episode to compare with")
    else:
        print(f"{board.name}: {baseline.label} → {current_label}  ({score}% agreement)")
    for r in results:
        rank = f"{r.current_rank:>3}." if r.current_rank is not None else "   -"
        print(f"  {rank} {r.card_name:<30} {movement_text(r).plain}".rstrip())
    if baseline is not None:
        print(
            f"  {counts['up']} up, {counts['down']} down, {counts['same']} same, "
            f"{counts['new']} new, {counts['removed']} removed"
        )
    return 0
