"""Handlers for 'rankban card' commands."""

from rankban.cli._common import (
    card_dict,
    error,
    find_board,
    find_card_or_die,
    load_store_or_die,
    output_json,
    output_result,
)
from rankban.model.board import create_card, delete_card, rename_card
from rankban.model.compare import compute_movement
from rankban.model.rank import InvalidIndexError, RankStore
from rankban.ui.indicators import movement_text


def card_list(args) -> int:
    """List a board's cards in rank order, with movement since the last episode."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)

    cards = store.get_cards_by_board(board.id)
    baseline = store.latest_snapshot(board.id)
    movements = {r.card_id: r for r in compute_movement(baseline, cards)}

    if args.json:
        items = []
        for card in cards:
            data = card_dict(card)
            result = movements[card.id]
            data["movement"] = result.movement
            data["new"] = result.is_new
            items.append(data)
        output_json(items)
    else:
        print(f"{board.id}  {board.name}")
        for card in cards:
            indicator = movement_text(movements[card.id]).plain
            print(f"  {card.rank:>3}. {card.id}  {card.name}  {indicator}".rstrip())

    return 0


def card_add(args) -> int:
    """Append a card at the bottom of a board."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)

    card = create_card(store.library, board.id, args.name, thumbnail=args.thumbnail, notes=args.notes)
    commit = store.commit(f"Add card: {args.name}")

    output_result(
        {**card_dict(card), "commit": commit},
        f"Created card {card.id} at rank {card.rank} on {board.name} ({commit[:7]})",
        args.json,
    )
    return 0


def card_move(args) -> int:
    """Move a card to a new rank (1-indexed)."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    card = find_card_or_die(store, board, args.id, args.json)

    ranks = RankStore(board.id, store)
    try:
        changed = ranks.reorder(ranks.index_of(card.id), args.position - 1)
    except InvalidIndexError:
        error(f"Position {args.position} out of range (1-{len(ranks)}).", args.json)

    commit = store.library.commit
    if changed:
        text = f"Moved {card.name} to rank {args.position} ({commit[:7]})"
    else:
        text = f"{card.name} is already at rank {args.position}"

    output_result(
        {"id": card.id, "rank": args.position, "changed": changed, "commit": commit},
        text,
        args.json,
    )
    return 0


def card_rename(args) -> int:
    """Rename a card. Saved episodes keep the old name."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    card = find_card_or_die(store, board, args.id, args.json)

    renamed = rename_card(store.library, board.id, card.id, args.name)
    commit = store.commit(f"Rename card {card.id}: {args.name}")

    output_result(
        {**card_dict(renamed), "commit": commit},
        f"Renamed card {card.id} to {args.name} ({commit[:7]})",
        args.json,
    )
    return 0


def card_remove(args) -> int:
    """Delete a card and close the gap in the ranks."""
    store = load_store_or_die(args.repo, args.json)
    board = find_board(store, args.board, args.json)
    card = find_card_or_die(store, board, args.id, args.json)

    delete_card(store.library, board.id, card.id)
    commit = store.commit(f"Remove card {card.id}: {card.name}")

    output_result(
        {"id": card.id, "commit": commit},
        f"Removed card {card.id} ({commit[:7]})",
        args.json,
    )
    return 0
