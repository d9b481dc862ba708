"""Shared CLI helpers for context management and input handling."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from ..config import ScoringConfigError, load_config
from .formatters import echo_error

if TYPE_CHECKING:
    from click import Context

    from ..config import ScoringConfig


def get_config(ctx: Context) -> ScoringConfig:
    """Lazily load the scoring config.

    Exits with status 1 if the config file is invalid.

    Args:
        ctx: Click context with the config path.

    Returns:
        ScoringConfig instance.
    """
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = load_config(ctx.obj.get("config_path"))
        except ScoringConfigError as e:
            echo_error(f"Invalid configuration: {e}")
            ctx.exit(1)
    return ctx.obj["config"]


def read_lines(source: TextIO) -> list[str]:
    """Read candidate lines without their line endings."""
    return [line.rstrip("\r\n") for line in source]
