"""fool help -- show usage for fool or one of its commands."""

from __future__ import annotations

import click

from fool.cli.formatting import format_command_help, get_console


@click.command("help")
@click.argument("command", required=False)
def help_command(command: str | None) -> None:
    """Show help for a command."""
    format_command_help(command, get_console())
