"""CLI commands."""

from ancestry.cli.commands import node, tree

__all__ = ["node", "tree"]
