"""Handlers for 'rankban board' commands."""

from rankban.cli._common import load_store_or_die, output_json, output_result
from rankban.model.board import create_board


def board_list(args) -> int:
    """List boards with card and episode counts."""
    store = load_store_or_die(args.repo, args.json)
    library = store.library

    boards = [
        {
            "id": board.id,
            "name": board.name,
            "cards": len(library.cards.get(board.id, [])),
            "episodes": len(library.snapshots.get(board.id, [])),
        }
        for board in library.boards.values()
    ]

    if args.json:
        output_json(boards)
    else:
        print(library.title)
        for b in boards:
            cards = "card" if b["cards"] == 1 else "cards"
            episodes = "episode" if b["episodes"] == 1 else "episodes"
            print(f"  {b['id']}  {b['name']:<20} {b['cards']} {cards}, {b['episodes']} {episodes}")

    return 0


def board_add(args) -> int:
    """Create an empty board."""
    store = load_store_or_die(args.repo, args.json)

    board = create_board(store.library, args.name)
    commit = store.commit(f"Add board: {args.name}")

    output_result(
        {"id": board.id, "name": board.name, "commit": commit},
        f"Created board {board.id} ({commit[:7]})",
        args.json,
    )
    return 0
