"""Board and card mutations on a Library."""

from dataclasses import replace

from rankban.ids import next_id
from rankban.model.rank import renumber, sort_by_rank
from rankban.models import Board, Card, Library


def create_board(library: Library, name: str, notes: str = "") -> Board:
    """Add an empty board and return it."""
    board = Board(id=next_id(library.boards.keys()), name=name, notes=notes)
    library.boards[board.id] = board
    library.cards[board.id] = []
    library.snapshots[board.id] = []
    return board


def _all_card_ids(library: Library) -> list[str]:
    return [card.id for cards in library.cards.values() for card in cards]


def create_card(
    library: Library,
    board_id: str,
    name: str,
    thumbnail: str | None = None,
    notes: str = "",
) -> Card:
    """Append a card at the bottom of a board (rank N + 1)."""
    library.board(board_id)
    cards = library.cards.setdefault(board_id, [])
    card = Card(
        id=next_id(_all_card_ids(library)),
        board_id=board_id,
        name=name,
        rank=max((c.rank for c in cards), default=0) + 1,
        thumbnail=thumbnail,
        notes=notes,
    )
    cards.append(card)
    return card


def find_card(library: Library, board_id: str, card_id: str) -> Card:
    """Look up a card on a board, raising KeyError if it isn't there."""
    for card in library.cards.get(board_id, []):
        if card.id == card_id:
            return card
    raise KeyError(f"Card '{card_id}' not found on board '{board_id}'")


def _replace_card(library: Library, card: Card) -> None:
    cards = library.cards[card.board_id]
    library.cards[card.board_id] = [card if c.id == card.id else c for c in cards]


def rename_card(library: Library, board_id: str, card_id: str, name: str) -> Card:
    """Rename a live card. Episodes keep the name they captured."""
    card = replace(find_card(library, board_id, card_id), name=name)
    _replace_card(library, card)
    return card


def delete_card(library: Library, board_id: str, card_id: str) -> None:
    """Remove a card and close the gap it leaves in the ranks."""
    find_card(library, board_id, card_id)
    remaining = [c for c in library.cards[board_id] if c.id != card_id]
    library.cards[board_id] = renumber(sort_by_rank(remaining))
