"""Board, card and episode identifiers.

Boards and cards use short numeric string ids ("1", "2", ...) so the files
on the branch stay readable. They are zero-padded on disk and normalized on
load, so "007" and "7" name the same record.
"""

import uuid


def normalize_id(s: str) -> str:
    """Strip leading zeros, keeping at least one digit.

    "007" → "7", "0" → "0"
    """
    return s.lstrip("0") or "0"


def pad_id(s: str, width: int = 3) -> str:
    """Zero-pad an id for use as a filename: "7" → "007"."""
    return s.zfill(width)


def next_id(ids) -> str:
    """Next free id after the highest of ids.

    Non-numeric ids are skipped; an empty collection starts at "1".
    """
    numbers = [int(i) for i in ids if str(i).isdigit()]
    return str(max(numbers, default=0) + 1)


def next_episode_number(numbers) -> int:
    """max(numbers) + 1, or 1 when there are no episodes yet."""
    return max(numbers, default=0) + 1


def snapshot_id() -> str:
    """Random id for a new snapshot."""
    return uuid.uuid4().hex
