"""Textual UI for rankban."""

from rankban.ui.app import RankbanApp
from rankban.ui.gesture import GestureRecognizer, GestureState

__all__ = [
    "GestureRecognizer",
    "GestureState",
    "RankbanApp",
]
