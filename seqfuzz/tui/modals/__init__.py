"""TUI modals for seqfuzz."""

from .fuzzy_select import FuzzySelectItem, FuzzySelectModal, highlight_text

__all__ = [
    "FuzzySelectItem",
    "FuzzySelectModal",
    "highlight_text",
]
