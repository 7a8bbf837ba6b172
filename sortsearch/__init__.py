"""Greedy, counting and ordered-multiset solutions to classic sorting and searching problems."""

__version__ = "0.1.0"
__all__ = ["__version__"]