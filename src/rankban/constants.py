"""Shared constants."""

BRANCH_NAME = "rankban"

LIBRARY_TITLE = "rankban"

TRAJECTORY_SEPARATOR = "→"
