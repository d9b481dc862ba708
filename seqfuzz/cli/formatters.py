"""CLI output formatters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from seqfuzz.models import MatchResult


def highlight_positions(text: str, positions: Sequence[int], fg: str = "cyan") -> str:
    """Style the matched characters of text.

    Args:
        text: Candidate string.
        positions: Indices into text to highlight.
        fg: Foreground color for matched characters.

    Returns:
        Text with ANSI styling around each matched character.
    """
    matched = set(positions)
    return "".join(
        click.style(char, fg=fg, bold=True) if idx in matched else char
        for idx, char in enumerate(text)
    )


def format_result_row(text: str, result: MatchResult, show_score: bool = False) -> str:
    """Format a ranked line for CLI display.

    Args:
        text: Candidate string.
        result: Match result for the candidate.
        show_score: Prefix the line with its score.

    Returns:
        Formatted string for display.
    """
    row = highlight_positions(text, result.positions)
    if show_score:
        row = f"{result.score:>6}  {row}"
    return row


def format_match_result(candidate: str, query: str, result: MatchResult) -> None:
    """Display a single match result."""
    if result.matched:
        echo_success(f"{query!r} matches {candidate!r}")
    else:
        echo_warning(f"{query!r} does not match {candidate!r}")
    click.echo(f"    Score: {result.score}")
    click.echo(f"    Positions: {', '.join(str(p) for p in result.positions) or '-'}")
    click.echo(f"    {highlight_positions(candidate, result.positions)}")


def echo_success(message: str) -> None:
    """Echo a success message in green."""
    click.echo(click.style(f"✓ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Echo an error message in red."""
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Echo a warning message in yellow."""
    click.echo(click.style(f"⚠ {message}", fg="yellow"))
