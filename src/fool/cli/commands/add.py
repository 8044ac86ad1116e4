"""fool add -- stage files for the next commit."""

from __future__ import annotations

from pathlib import Path

import click

from fool.cli.formatting import COMMAND_HELP, format_add_outcomes


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.pass_context
def add(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Add files to the staging area.

    Paths are relative to the current directory.  Each path is reported on
    its own line; one failure does not stop the rest.
    """
    from fool.cli import _repo_session

    with _repo_session(ctx) as (repo, console):
        if not paths:
            console.print(COMMAND_HELP["add"].splitlines()[0], highlight=False)
            return
        outcomes = repo.add_many(paths, base=Path.cwd())
        format_add_outcomes(outcomes, console)
