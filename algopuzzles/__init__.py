"""Solutions to classic array, string, arithmetic, tree and linked-list puzzles."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "linked_lists", "strings", "trees"]