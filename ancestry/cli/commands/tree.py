# ancestry/cli/commands/tree.py
"""
Print the ancestry hierarchy of a directory.

Usage:
    ancestry tree ./site
    ancestry tree ./site --sort-by order --sort-by title
    ancestry tree ./site --config ancestry.yaml --reverse
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from rich.markup import escape
from rich.tree import Tree

from ancestry.cli.helpers import build_or_exit, setup_logging
from ancestry.cli.ui import console, ui
from ancestry.tree.graph import AncestryGraph
from ancestry.tree.node import AncestryNode


def _add_bucket(branch: Tree, graph: AncestryGraph, first: AncestryNode) -> None:
    label = f"{first.directory}/" if first.directory else "./"
    bucket = branch.add(f"[bold blue]{escape(label)}[/bold blue]")

    for path in first.member_paths:
        bucket.add(escape(graph.node(path).basename))

    for child_path in first.children_paths or []:
        _add_bucket(bucket, graph, graph.node(child_path))


def render_tree(graph: AncestryGraph, title: str = "") -> Tree:
    """
    Build a rich Tree with one branch per directory bucket.

    Members are listed in bucket order, followed by child buckets in
    children order. Buckets with no parent hang off the top.
    """
    tree = Tree(f"[bold]{escape(title)}[/bold]" if title else "[bold].[/bold]")
    for root in graph.roots():
        _add_bucket(tree, graph, root)
    return tree


def command(
    source: Path,
    config: Optional[Path] = None,
    sort_by: Optional[List[str]] = None,
    reverse: bool = False,
    match: Optional[str] = None,
    verbose: bool = False,
) -> None:
    setup_logging(verbose)

    _, graph = build_or_exit(source, config, sort_by, reverse, match)
    if not len(graph):
        ui.info(f"No files found under {source}")
        return

    console.print(render_tree(graph, title=str(source)))
    ui.success(f"{len(graph)} items in {len(graph.buckets)} directories")
