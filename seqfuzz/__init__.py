"""Sublime Text-like sequential fuzzy string matching."""

from .collection import fuzzy_filter, match_all
from .config import DEFAULT_CONFIG, ScoringConfig, ScoringConfigError, load_config
from .matcher import locate, match
from .models import MatchResult
from .scorer import score

__version__ = "0.2.0"

__all__ = [
    "DEFAULT_CONFIG",
    "MatchResult",
    "ScoringConfig",
    "ScoringConfigError",
    "fuzzy_filter",
    "load_config",
    "locate",
    "match",
    "match_all",
    "score",
]
