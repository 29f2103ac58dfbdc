"""
CLI command for organizing files.

Sorts the files of one or more directories into category folders by
extension and prints a report for each run.
"""

import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from ..core.config import get_settings
from ..organization import (
    DirectoryReadError,
    ExtensionRules,
    FileOrganizer,
    LogFileError,
    RunSummary,
    open_run_log,
)
from ..shared import format_megabytes, setup_logging

console = Console()


@click.command()
@click.argument("directories", nargs=-1, type=click.Path())
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Run log file (default: organizer.log, or $TIDY_LOG_FILE)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress diagnostics except errors",
)
def organize(
    directories: tuple,
    log_file: Optional[str],
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Organize the files in DIRECTORIES into category folders.

    Each file directly inside a directory is moved into a subfolder named
    after its category (Images, Documents, Music, Video, Archives). Files
    with unknown extensions stay where they are. Subdirectories are never
    entered.

    \b
    Examples:
        # Organize two directories, one after the other
        tidy-organize ~/Downloads ~/Desktop

        # Prompt for directories until an empty line
        tidy-organize

        # Write the run log somewhere else
        tidy-organize ~/Downloads --log-file /tmp/organizer.log

    \b
    Every event is appended to the run log:
        2024/01/15 09:30:00 [SUCCESS] moved: /home/me/Downloads/a.jpg -> Images
    """
    setup_logging(verbose=verbose, quiet=quiet)

    log_path = Path(log_file) if log_file else get_settings().log_file

    console.print("\n[bold cyan]File Organizer[/bold cyan]")
    categories = ", ".join(ExtensionRules.default().categories)
    console.print(f"[dim]Categories: {categories}[/dim]\n")

    interactive = not directories
    sources: Iterable[str] = directories if directories else _prompt_directories()

    failures = 0
    for source in sources:
        try:
            if not _run(Path(source).expanduser(), log_path):
                failures += 1
        except LogFileError as e:
            console.print(f"[red]✗ {escape(str(e))}[/red]")
            sys.exit(1)

    if interactive:
        console.print("[dim]Done.[/dim]")
    elif failures:
        sys.exit(1)


def _prompt_directories() -> Iterator[str]:
    """Ask for directories until an empty line or end of input."""
    while True:
        try:
            answer = Prompt.ask(
                "Enter the directory to organize (empty to quit)",
                console=console,
                default="",
                show_default=False,
            )
        except EOFError:
            console.print()
            return

        answer = answer.strip()
        if not answer:
            return
        yield answer


def _run(source_directory: Path, log_path: Path) -> bool:
    """
    Organize one directory and print its report.

    Returns:
        False if the directory could not be read

    Raises:
        LogFileError: If the run log cannot be opened
    """
    console.print(f"Organizing [bold]{escape(str(source_directory))}[/bold]...")

    with open_run_log(log_path) as sink:
        with FileOrganizer(source_directory, sink) as organizer:
            try:
                summary = organizer.organize()
            except DirectoryReadError as e:
                console.print(f"[red]✗ {escape(str(e))}[/red]\n")
                return False

    _display_summary(summary)
    return True


def _display_summary(summary: RunSummary) -> None:
    """Display the report for one run."""
    console.print("\n[green]✓ Organization complete![/green]\n")

    console.print(f"Total files processed: {summary.processed_files}")
    console.print(f"Total size: {format_megabytes(summary.total_size)}\n")

    if summary.categories:
        table = Table(title="By category")
        table.add_column("Category", style="cyan")
        table.add_column("Files", style="green", justify="right")
        table.add_column("Size", style="green", justify="right")

        for category, stats in sorted(summary.categories.items()):
            table.add_row(
                category, str(stats.count), format_megabytes(stats.total_size)
            )

        console.print(table)

    if summary.unsupported:
        console.print(
            f"[yellow]{summary.unsupported} file(s) left in place "
            f"(unsupported extension)[/yellow]"
        )

    # Show errors if any
    if summary.errors:
        console.print("\n[red]Errors:[/red]")
        for error in summary.errors[:10]:  # Show first 10
            console.print(f"  [red]• {escape(error)}[/red]")
        if len(summary.errors) > 10:
            console.print(f"  [dim]... and {len(summary.errors) - 10} more[/dim]")

    console.print()


if __name__ == "__main__":
    organize()
