"""Solutions to classic algorithm puzzles on trees, arrays, strings and integers."""

__version__ = "0.1.0"
__all__ = ["trees", "arrays", "strings", "integers"]