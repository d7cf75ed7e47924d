# ancestry/cli/cli.py
"""
Ancestry CLI - Main application.

Commands:
    ancestry tree      Print the directory hierarchy with ancestry ordering
    ancestry node      Print one file's ancestry record as JSON
    ancestry version   Show the installed version

NOTE: Commands use lazy loading - the builder is only imported when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="ancestry",
    help="Ancestry - parent, child and sibling links for path-keyed files.",
    no_args_is_help=True,
    add_completion=False,
)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("tree")
def tree(
    source: Path = typer.Argument(..., help="Directory to scan."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML options file."),
    sort_by: Optional[List[str]] = typer.Option(None, "--sort-by", "-s", help="Sort property (repeatable)."),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Invert the ordering."),
    match: Optional[str] = typer.Option(None, "--match", "-m", help="Inclusion glob."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Print the hierarchy of a directory as a tree."""
    from ancestry.cli.commands import tree as mod

    mod.command(source=source, config=config, sort_by=sort_by, reverse=reverse, match=match, verbose=verbose)


@app.command("node")
def node(
    source: Path = typer.Argument(..., help="Directory to scan."),
    paths: List[str] = typer.Argument(..., help="Relative path(s) of the file(s) to show."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML options file."),
    sort_by: Optional[List[str]] = typer.Option(None, "--sort-by", "-s", help="Sort property (repeatable)."),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Invert the ordering."),
    match: Optional[str] = typer.Option(None, "--match", "-m", help="Inclusion glob."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Print the ancestry record of one or more files as JSON."""
    from ancestry.cli.commands import node as mod

    mod.command(source=source, paths=paths, config=config, sort_by=sort_by, reverse=reverse, match=match, verbose=verbose)


@app.command("version")
def version() -> None:
    """Show the installed version."""
    from ancestry import __version__

    typer.echo(f"ancestry {__version__}")


if __name__ == "__main__":
    app()
