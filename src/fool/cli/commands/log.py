"""fool log -- show commit history."""

from __future__ import annotations

import click

from fool.cli.formatting import format_log


@click.command()
@click.pass_context
def log(ctx: click.Context) -> None:
    """Show commit history, newest first."""
    from fool.cli import _repo_session

    with _repo_session(ctx) as (repo, console):
        format_log(repo.log_entries(), console)
