"""Interactive fuzzy picker built on Textual."""

from .app import PickerApp
from .modals import FuzzySelectModal

__all__ = ["FuzzySelectModal", "PickerApp"]
