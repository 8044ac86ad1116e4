"""fool commit -- snapshot the staged files."""

from __future__ import annotations

import click

from fool.cli.formatting import COMMAND_HELP, format_commit_result, format_skipped
from fool.exceptions import EmptyIndexError, NoFilesCommittedError


@click.command()
@click.option("-m", "--message", default=None, help="Commit message.")
@click.pass_context
def commit(ctx: click.Context, message: str | None) -> None:
    """Commit staged files with a message."""
    from fool.cli import _repo_session

    with _repo_session(ctx) as (repo, console):
        if not message:
            console.print(COMMAND_HELP["commit"].splitlines()[0], highlight=False)
            return
        try:
            result = repo.commit(message)
        except EmptyIndexError as e:
            console.print(str(e), highlight=False)
            return
        except NoFilesCommittedError as e:
            format_skipped(e.skipped, console)
            console.print(str(e), highlight=False)
            return
        format_commit_result(result, console)
