# ancestry/tree/__init__.py
"""
Ancestry tree construction.

Turns a flat path -> item mapping into a navigable hierarchy. Each item
gets an AncestryNode with its parent, root, members, siblings, children and
the ordering links within each of them.

Usage:
    from ancestry.tree import AncestryBuilder

    graph = AncestryBuilder(sort_by="title").build(files)
    node = graph.node("docs/index.md")
    node.children.paths   # ['docs/api/index.md', 'docs/guide/index.md']
"""

from ancestry.tree.builder import AncestryBuilder
from ancestry.tree.graph import AncestryGraph
from ancestry.tree.grouper import PathGrouper, directory_key
from ancestry.tree.matcher import PathMatcher, resolve_matcher
from ancestry.tree.node import AncestryNode, ItemSequence
from ancestry.tree.sorting import build_comparator, compare_values

__all__ = [
    "AncestryBuilder",
    "AncestryGraph",
    "AncestryNode",
    "ItemSequence",
    "PathGrouper",
    "PathMatcher",
    "build_comparator",
    "compare_values",
    "directory_key",
    "resolve_matcher",
]
