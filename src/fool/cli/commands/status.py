"""fool status -- show working directory status."""

from __future__ import annotations

import click

from fool.cli.formatting import format_status


@click.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show staged, untracked and modified files."""
    from fool.cli import _repo_session

    with _repo_session(ctx) as (repo, console):
        format_status(repo.status(), console)
