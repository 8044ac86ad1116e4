"""fool init -- create a repository in the current directory."""

from __future__ import annotations

import click

from fool.cli.formatting import format_error, get_console
from fool.exceptions import RepositoryExistsError, RepositoryIOError


@click.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Initialize a new repository."""
    from fool.repo import Repo

    console = get_console()
    try:
        repo = Repo.init(ctx.obj["repo_root"])
    except RepositoryExistsError as e:
        console.print(str(e), highlight=False)
        return
    except RepositoryIOError as e:
        format_error(str(e), console)
        raise SystemExit(1) from None
    console.print(
        f"Initialized empty fool repository in {repo.config.marker_dir}/",
        highlight=False,
    )
