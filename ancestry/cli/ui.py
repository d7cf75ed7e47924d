# ancestry/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from ancestry.cli.ui import ui, console

    ui.error("Something went wrong")
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


class UI:
    """Consistent Rich styling for command output."""

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]")


ui = UI()

__all__ = ["ui", "console", "UI"]
