"""Rich formatting helpers for the fool CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
User-supplied text (paths, messages) is always escaped so square brackets
are never read as markup, and soft-wrapped so long paths stay on one line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from fool.engine.staging import AddOutcome
    from fool.models.commit import CommitResult
    from fool.operations.status import StatusInfo

USAGE_LINES = (
    "fool - a minimal version control system",
    "Usage:",
    "  fool <command> [options]",
    "Commands:",
    "  init         Initialize a new repository",
    "  add <file>   Add a file to the staging area",
    "  commit -m <message>  Commit staged files with a message",
    "  log          Show commit history",
    "  status       Show the status of the working directory",
    "  help [cmd]   Show help for a command",
    "  version      Show fool version",
)

COMMAND_HELP: dict[str, str] = {
    "init": "Usage: fool init\n  Initialize a new repository.",
    "add": "Usage: fool add <file>...\n  Add files to the staging area.",
    "commit": "Usage: fool commit -m <message>\n  Commit staged files with a message.",
    "log": "Usage: fool log\n  Show commit history.",
    "status": "Usage: fool status\n  Show the status of the working directory.",
    "version": "Usage: fool version\n  Show fool version.",
}


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation.

    Emoji shortcodes are left alone so paths and messages print as written.
    """
    return Console(stderr=False, emoji=False)


def _plain(console: Console, text: str) -> None:
    console.print(escape(text), highlight=False, soft_wrap=True)


def format_usage(console: Console) -> None:
    for line in USAGE_LINES:
        _plain(console, line)


def format_unknown_command(name: str, console: Console) -> None:
    """Name the unrecognized command, then show the general usage."""
    _plain(console, f"Unknown command: {name}")
    format_usage(console)


def format_command_help(command: str | None, console: Console) -> None:
    """Show one command's usage, or the general usage if unknown."""
    text = COMMAND_HELP.get(command) if command else None
    if text is None:
        format_usage(console)
        return
    _plain(console, text)


def format_add_outcomes(outcomes: list[AddOutcome], console: Console) -> None:
    """One line per path, in the order the paths were given."""
    for outcome in outcomes:
        if outcome.ok:
            _plain(console, f"Added '{outcome.path}' to staging area.")
        else:
            _plain(console, str(outcome.error))


def format_skipped(skipped: list[str], console: Console) -> None:
    for path in skipped:
        console.print(
            f"[yellow]Warning:[/yellow] could not commit '{escape(path)}', skipping.",
            highlight=False,
            soft_wrap=True,
        )


def format_commit_result(result: CommitResult, console: Console) -> None:
    format_skipped(result.skipped, console)
    console.print(
        f"Committed {result.committed_count} file(s) with id "
        f"[yellow]{result.record.commit_id}[/yellow]",
        highlight=False,
    )


def format_log(entries: list[str], console: Console) -> None:
    """Print raw log blocks verbatim, blank line between commits."""
    if not entries:
        console.print("No commits yet.", highlight=False)
        return

    for i, block in enumerate(entries):
        if i > 0:
            console.print()
        _plain(console, block)


def _format_group(title: str, paths: list[str], color: str, console: Console) -> None:
    console.print(f"[bold]{title}[/bold]", highlight=False)
    for path in paths:
        console.print(f"  [{color}]{escape(path)}[/{color}]", highlight=False, soft_wrap=True)


def format_status(info: StatusInfo, console: Console) -> None:
    """Staged, then untracked, then modified files."""
    if info.staged:
        _format_group("Staged files:", info.staged, "green", console)
    else:
        console.print("No files staged for commit.", highlight=False)

    if info.untracked:
        _format_group("Untracked files:", info.untracked, "red", console)

    if info.modified:
        _format_group("Modified files:", info.modified, "yellow", console)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
