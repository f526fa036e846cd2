"""Handlers for 'rankban episode' commands."""

from rankban.cli._common import (
    error,
    find_board,
    find_episode,
    load_store_or_die,
    output_json,
    output_result,
    snapshot_dict,
)
from rankban.model.snapshot import capture_episode, update_snapshot


def episode_list(args) -> int:
    """List a board's saved episodes."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    snapshots = store.get_snapshots_by_board(board.id)

    if args.json:
        output_json([snapshot_dict(s) for s in snapshots])
        return 0

    print(f"{board.id}  {board.name}")
    if not snapshots:
        print("  no episodes")
    for s in snapshots:
        cards = "card" if len(s.rankings) == 1 else "cards"
        saved = s.created_at.strftime("%Y-%m-%d %H:%M")
        print(f"  {s.episode_number:>3}  {s.label:<24} {saved}  {len(s.rankings)} {cards}")
    return 0


def episode_save(args) -> int:
    """Capture the board's current order as a new episode."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)

    try:
        snapshot = capture_episode(
            store,
            board.id,
            store.get_cards_by_board(board.id),
            episode_number=args.number,
            label=args.label,
            notes=args.notes,
        )
    except ValueError as e:
        error(str(e), args.json)

    commit = store.library.commit
    output_result(
        {**snapshot_dict(snapshot), "commit": commit},
        f"Saved {snapshot.label} on {board.name} ({commit[:7]})",
        args.json,
    )
    return 0


def episode_label(args) -> int:
    """Change an episode's label (and optionally its notes)."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    snapshot = find_episode(store, board, args.number, args.json)

    updated = update_snapshot(snapshot, label=args.label, notes=args.notes)
    store.save_snapshot(updated)
    commit = store.library.commit

    output_result(
        {"episode": updated.episode_number, "label": updated.label, "commit": commit},
        f"Relabelled episode {updated.episode_number}: {updated.label} ({commit[:7]})",
        args.json,
    )
    return 0


def episode_delete(args) -> int:
    """Delete an episode. Later episodes keep their numbers."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    snapshot = find_episode(store, board, args.number, args.json)

    store.delete_snapshot(snapshot.id)
    commit = store.library.commit

    output_result(
        {"episode": snapshot.episode_number, "commit": commit},
        f"Deleted episode {snapshot.episode_number} ({commit[:7]})",
        args.json,
    )
    return 0
