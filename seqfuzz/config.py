"""Scoring configuration for sequential fuzzy matching.

A ScoringConfig is built once (from defaults, a mapping, or a TOML file)
and passed read-only into every match call. Validation happens at
construction time so that matching itself never fails.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SEPARATORS",
    "ScoringConfig",
    "ScoringConfigError",
    "load_config",
]

DEFAULT_SEPARATORS = frozenset({"_", " ", ".", "/", ","})

WEIGHT_FIELDS = (
    "sequential_bonus",
    "separator_bonus",
    "camel_bonus",
    "first_letter_bonus",
    "leading_letter_penalty",
    "max_leading_letter_penalty",
    "unmatched_letter_penalty",
    "case_match_bonus",
    "string_match_bonus",
    "initial_score",
    "default_empty_score",
)


class ScoringConfigError(ValueError):
    """Raised when a scoring configuration is malformed."""


def _normalize_separators(value: Any) -> frozenset[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ScoringConfigError(
            f"separators must be a collection of single characters, got {value!r}"
        )
    try:
        separators = frozenset(value)
    except TypeError as e:
        raise ScoringConfigError(f"Invalid separators {value!r}: {e}") from e
    for sep in separators:
        if not isinstance(sep, str) or len(sep) != 1:
            raise ScoringConfigError(f"Invalid separator {sep!r}: must be a single character")
    return separators


@dataclass(frozen=True)
class ScoringConfig:
    """Weights used by the scorer.

    Positive values are bonuses, negative values penalties. The
    ``default_empty_score`` is returned as-is for an empty query or an
    empty candidate instead of running the scoring formula.
    """

    sequential_bonus: int = 15
    separator_bonus: int = 30
    camel_bonus: int = 30
    first_letter_bonus: int = 15
    leading_letter_penalty: int = -3
    max_leading_letter_penalty: int = -25
    unmatched_letter_penalty: int = -1
    case_match_bonus: int = 1
    string_match_bonus: int = 20
    separators: frozenset[str] = field(default=DEFAULT_SEPARATORS)
    initial_score: int = 100
    default_empty_score: int = -10000

    def __post_init__(self) -> None:
        for name in WEIGHT_FIELDS:
            value = getattr(self, name)
            # reject bools, which are ints
            if isinstance(value, bool) or not isinstance(value, int):
                raise ScoringConfigError(
                    f"Invalid value for {name}: expected an integer, got {value!r}"
                )
        object.__setattr__(self, "separators", _normalize_separators(self.separators))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScoringConfig:
        """Build a config from a mapping, falling back to defaults for missing keys.

        Args:
            data: Mapping of field name to value (e.g. a parsed TOML table).

        Returns:
            Validated ScoringConfig.

        Raises:
            ScoringConfigError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ScoringConfigError(f"Unknown scoring option(s): {', '.join(unknown)}")
        return cls(**dict(data))

    def replace(self, **changes: Any) -> ScoringConfig:
        """Return a copy with the given fields changed."""
        try:
            return replace(self, **changes)
        except TypeError as e:
            raise ScoringConfigError(str(e)) from e

    def is_separator(self, char: str) -> bool:
        """Check if a character is a configured word separator."""
        return char in self.separators


DEFAULT_CONFIG = ScoringConfig()


def load_config(path: Path | str | None = None) -> ScoringConfig:
    """Load scoring configuration from a TOML file.

    The file's ``[scoring]`` table overrides the defaults key by key:

        [scoring]
        sequential_bonus = 20
        separators = ["_", "-", "/"]

    Args:
        path: Path to the TOML file. None returns the defaults.

    Returns:
        Validated ScoringConfig.

    Raises:
        ScoringConfigError: If the file can't be read or contains invalid options.
    """
    if path is None:
        return DEFAULT_CONFIG

    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ScoringConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ScoringConfigError(f"Invalid TOML in {path}: {e}") from e

    scoring = data.get("scoring", {})
    if not isinstance(scoring, dict):
        raise ScoringConfigError(f"[scoring] in {path} must be a table")

    logger.debug("Loaded %d scoring option(s) from %s", len(scoring), path)
    return ScoringConfig.from_mapping(scoring)
