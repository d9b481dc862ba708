"""Command-line entry point for seqfuzz."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .. import __version__
from ..collection import match_all
from ..matcher import match
from .formatters import format_match_result, format_result_row
from .helpers import get_config, read_lines


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="SEQFUZZ_CONFIG",
    help="TOML file with a [scoring] table overriding the default weights.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="seqfuzz")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """seqfuzz - Sublime Text-like sequential fuzzy matching."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@main.command("match")
@click.argument("candidate")
@click.argument("query")
@click.pass_context
def match_cmd(ctx: click.Context, candidate: str, query: str) -> None:
    """Match QUERY against a single CANDIDATE and show its score."""
    config = get_config(ctx)
    result = match(candidate, query, config)
    format_match_result(candidate, query, result)
    if not result.matched:
        ctx.exit(1)


@main.command("filter")
@click.argument("query")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--all", "keep_all", is_flag=True, help="Keep lines that don't match.")
@click.option("--no-sort", is_flag=True, help="Keep input order instead of ranking.")
@click.option("--scores", is_flag=True, help="Prefix each line with its score.")
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None, help="Max lines.")
@click.pass_context
def filter_cmd(
    ctx: click.Context,
    query: str,
    source,
    keep_all: bool,
    no_sort: bool,
    scores: bool,
    limit: int | None,
) -> None:
    """Rank lines of SOURCE (default stdin) against QUERY, best first."""
    config = get_config(ctx)
    lines = read_lines(source)

    results = match_all(lines, query, filter=not keep_all, sort=not no_sort, config=config)
    if limit is not None:
        results = results[:limit]

    for line, result in results:
        click.echo(format_result_row(line, result, show_score=scores))

    # grep-style: nothing selected is exit status 1
    if not results:
        ctx.exit(1)


@main.command("pick")
@click.argument("source", type=click.File("r"))
@click.option("-q", "--query", default="", help="Initial query.")
@click.option("--title", default="Select", show_default=True, help="Picker title.")
@click.pass_context
def pick_cmd(ctx: click.Context, source, query: str, title: str) -> None:
    """Interactively pick a line of SOURCE and print it."""
    from ..tui import PickerApp

    config = get_config(ctx)
    lines = read_lines(source)

    app = PickerApp(lines, query=query, title=title, config=config)
    selection = app.run()
    if selection is None:
        ctx.exit(1)
    click.echo(selection)


if __name__ == "__main__":
    main()
