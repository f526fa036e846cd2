"""Rank ordering for a board's cards.

A board's cards always hold the ranks 1..N exactly once each. Every
operation here rewrites ranks from list position, so the invariant holds
on whatever they return.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Sequence

from rankban.models import Card

if TYPE_CHECKING:
    from rankban.model.ports import CardRepository

logger = logging.getLogger(__name__)


class InvalidIndexError(IndexError):
    """A reorder index fell outside the list."""

    def __init__(self, index: int, length: int):
        super().__init__(f"index {index} out of range for {length} cards")
        self.index = index
        self.length = length


def renumber(cards: Sequence[Card]) -> list[Card]:
    """Return cards with rank set to position + 1."""
    return [card if card.rank == i + 1 else replace(card, rank=i + 1) for i, card in enumerate(cards)]


def is_dense(cards: Sequence[Card]) -> bool:
    """True if the ranks are exactly 1..N with no gaps or duplicates."""
    return sorted(card.rank for card in cards) == list(range(1, len(cards) + 1))


def sort_by_rank(cards: Sequence[Card]) -> list[Card]:
    return sorted(cards, key=lambda c: c.rank)


def move_item(cards: Sequence[Card], from_index: int, to_index: int) -> tuple[list[Card], bool]:
    """Move the card at from_index to to_index.

    Returns (cards, changed). from_index == to_index is always a no-op:
    the input comes back as-is with changed=False, and callers must not
    persist anything. Otherwise indices outside the list raise
    InvalidIndexError.

    Every rank is rewritten from the new positions. That is O(N) per move,
    which is fine for lists of tens of cards.
    """
    if from_index == to_index:
        return cards, False

    length = len(cards)
    for index in (from_index, to_index):
        if not 0 <= index < length:
            raise InvalidIndexError(index, length)

    reordered = list(cards)
    moved = reordered.pop(from_index)
    reordered.insert(to_index, moved)
    return renumber(reordered), True


def find_move(old_ids: Sequence[str], new_ids: Sequence[str]) -> tuple[int, int] | None:
    """Turn a new ordering into a (from_index, to_index) pair.

    Scans for the first and last positions where the orders differ. This
    assumes exactly one card was relocated between the two orders: either
    it moved up to the first mismatch or down to the last one. If several
    cards moved, the pair describes the first mismatch only and applying
    it may not reproduce new_ids.

    Returns None when the orders match or aren't the same length.
    """
    if len(old_ids) != len(new_ids):
        return None
    mismatches = [i for i, (old, new) in enumerate(zip(old_ids, new_ids)) if old != new]
    if not mismatches:
        return None
    first, last = mismatches[0], mismatches[-1]
    if new_ids[first] == old_ids[last]:
        return last, first
    if new_ids[last] == old_ids[first]:
        return first, last
    moved = new_ids[first]
    if moved not in old_ids:
        return None
    return list(old_ids).index(moved), first


class RankStore:
    """Live rank order of one board, persisted through a CardRepository.

    reorder() writes to the repository once per change and never for a
    no-op move.
    """

    def __init__(self, board_id: str, repository: CardRepository):
        self.board_id = board_id
        self.repository = repository
        self.cards: list[Card] = []
        self.refresh()

    def refresh(self) -> None:
        """Reload the board's cards from the repository."""
        self.cards = sort_by_rank(self.repository.get_cards_by_board(self.board_id))

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move a card and persist the new order. Returns True if anything changed."""
        cards, changed = move_item(self.cards, from_index, to_index)
        if not changed:
            return False
        self.cards = cards
        logger.debug("board %s: moved %d -> %d", self.board_id, from_index, to_index)
        self.repository.save_cards_for_board(self.board_id, cards)
        return True

    def index_of(self, card_id: str) -> int:
        """Position of card_id in the current order."""
        for i, card in enumerate(self.cards):
            if card.id == card_id:
                return i
        raise KeyError(card_id)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)
