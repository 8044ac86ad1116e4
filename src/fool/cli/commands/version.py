"""fool version -- print the installed version."""

from __future__ import annotations

import click

from fool._version import __version__
from fool.cli.formatting import get_console


@click.command()
def version() -> None:
    """Show fool version."""
    get_console().print(f"fool version {__version__}", highlight=False)
