"""Git-backed ranking boards with episode history."""
