"""fool CLI -- terminal interface for the fool version control system.

This module is NEVER imported from fool/__init__.py.
It is only loaded via the ``fool`` console script.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from fool.cli.formatting import (
    format_error,
    format_unknown_command,
    format_usage,
    get_console,
)
from fool.exceptions import FoolError, RepositoryNotInitializedError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from fool.repo import Repo

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _unknown_command(name: str) -> click.Command:
    def _report() -> None:
        format_unknown_command(name, get_console())

    return click.Command(
        name,
        callback=_report,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    )


class FoolGroup(click.Group):
    """Command group that answers unknown command names with the usage text.

    An unknown name is a logical failure like any other, so it prints and
    exits 0 instead of raising click's usage error.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            return args[0], _unknown_command(args[0]), args[1:]
        return super().resolve_command(ctx, args)


@click.group(cls=FoolGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.option(
    "-C",
    "--repo",
    "repo_root",
    default=".",
    envvar="FOOL_REPO",
    type=click.Path(file_okay=False),
    help="Repository root (defaults to the current directory).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log engine activity to stderr.")
@click.pass_context
def cli(ctx: click.Context, repo_root: str, verbose: bool) -> None:
    """fool: a minimal version control system."""
    ctx.ensure_object(dict)
    ctx.obj["repo_root"] = repo_root

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if ctx.invoked_subcommand is None:
        format_usage(get_console())


def _get_repo(ctx: click.Context) -> "Repo":  # noqa: F821 (forward ref)
    """Open the repository named by the Click context.

    Exits with status 1 when the repository is not initialized.
    """
    from fool.repo import Repo

    try:
        return Repo.open(ctx.obj["repo_root"])
    except RepositoryNotInitializedError as e:
        format_error(str(e), get_console())
        raise SystemExit(1) from None


@contextmanager
def _repo_session(ctx: click.Context) -> Iterator[tuple[Repo, Console]]:
    """Context manager that opens a Repo and yields (repo, console).

    Logical failures (any FoolError) are printed and swallowed so the
    command still exits 0.  Commands that want their own wording for a
    specific error catch it inside the ``with`` block first.  Anything else
    is printed and exits 1.
    """
    console = get_console()
    repo = _get_repo(ctx)
    try:
        yield repo, console
    except SystemExit:
        raise
    except FoolError as e:
        format_error(str(e), console)
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from fool.cli.commands.init import init  # noqa: E402
from fool.cli.commands.add import add  # noqa: E402
from fool.cli.commands.commit import commit  # noqa: E402
from fool.cli.commands.log import log  # noqa: E402
from fool.cli.commands.status import status  # noqa: E402
from fool.cli.commands.help import help_command  # noqa: E402
from fool.cli.commands.version import version  # noqa: E402

cli.add_command(init)
cli.add_command(add)
cli.add_command(commit)
cli.add_command(log)
cli.add_command(status)
cli.add_command(help_command)
cli.add_command(version)
