# ancestry/tree/graph.py
"""
AncestryGraph - the per-run lookup table that nodes resolve through.

Holds path -> item, path -> node and id(item) -> path tables, plus the
PathGrouper with the directory buckets. Nothing here survives between
runs; every AncestryBuilder.build() call returns a fresh graph.
"""

from __future__ import annotations

import posixpath
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from ancestry.core.item import set_property
from ancestry.tree.grouper import PathGrouper, directory_key
from ancestry.tree.node import AncestryNode, ItemSequence


class AncestryGraph:
    """
    Arena of items and their ancestry nodes.

    Example:
        >>> graph = AncestryBuilder().build({"index.md": {}, "docs/a.md": {}})
        >>> graph.node("docs/a.md").parent_path
        'index.md'
    """

    def __init__(self) -> None:
        self.grouper = PathGrouper()
        self._items: Dict[str, Any] = {}
        self._nodes: Dict[str, AncestryNode] = {}
        self._paths_by_id: Dict[int, str] = {}
        self._views: Dict[int, ItemSequence] = {}

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, path: str, item: Any) -> AncestryNode:
        """Add an item, bucket it, and create its node stub."""
        members = self.grouper.add(path)
        node = AncestryNode(
            path=path,
            basename=posixpath.basename(path),
            directory=directory_key(path),
            members=members,
            graph=self,
        )
        self._items[path] = item
        self._nodes[path] = node
        self._paths_by_id[id(item)] = path
        return node

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def item(self, path: str) -> Any:
        return self._items[path]

    def node(self, path: str) -> AncestryNode:
        return self._nodes[path]

    def path_of(self, item: Any) -> str:
        """Path key of a registered item."""
        return self._paths_by_id[id(item)]

    def nodes(self) -> Iterator[Tuple[str, AncestryNode]]:
        return iter(self._nodes.items())

    @property
    def buckets(self) -> Dict[str, List[str]]:
        return self.grouper.buckets

    def roots(self) -> List[AncestryNode]:
        """First member of every bucket that has no parent, ordered by directory key."""
        result = []
        for key in sorted(self.buckets):
            bucket = self.buckets[key]
            if bucket:
                first = self._nodes[bucket[0]]
                if first.parent_path is None:
                    result.append(first)
        return result

    def view(self, paths: List[str]) -> ItemSequence:
        """Cached read-only view over a shared path list."""
        key = id(paths)
        view = self._views.get(key)
        if view is None:
            view = ItemSequence(paths, self)
            self._views[key] = view
        return view

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def attach(self, files: Mapping[str, Any], property_name: str) -> None:
        """Set each node on its item in files under property_name."""
        for path, node in self._nodes.items():
            set_property(files[path], property_name, node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, path: object) -> bool:
        return path in self._nodes

    def __repr__(self) -> str:
        return f"AncestryGraph(items={len(self._nodes)}, directories={len(self.grouper)})"


__all__ = ["AncestryGraph"]
