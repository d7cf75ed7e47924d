# ancestry/tree/builder.py
"""
Relationship builder.

Turns a path -> item mapping into an AncestryGraph. The work runs in
strictly ordered phases. Each phase finishes over every item before the
next begins, because parents, children and siblings all read global
bucket state:

    1. collect   - bucket every path, create node stubs
    2. sort      - order each bucket with the comparator
    3. parents   - first member of the bucket one level up (single level only)
    4. roots     - follow parent links to the top
    5. members   - first/last/next/prev member and member_index
    6. children  - sorted first members of child buckets, shared per bucket
    7. siblings  - parent's children (same list) or a singleton of self,
                   links and sibling_index from first member's position

The parent lookup never searches past one missing directory level. An item
whose parent directory has no bucket gets parent = None, even if an
ancestor further up has items.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List, Mapping, Optional, Tuple

from ancestry.logging.logger import get_logger
from ancestry.logging.tags import ANCESTRY
from ancestry.tree.graph import AncestryGraph
from ancestry.tree.grouper import ROOT_KEY, directory_key
from ancestry.tree.node import AncestryNode
from ancestry.tree.sorting import SortBy, build_comparator

logger = get_logger(__name__)

Links = Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]


def link_within(paths: List[str], index: int) -> Links:
    """
    First, last, previous and next entries around position index.

    Previous and next are None at the respective ends.
    """
    prev_path = paths[index - 1] if index > 0 else None
    next_path = paths[index + 1] if index + 1 < len(paths) else None
    return paths[0], paths[-1], prev_path, next_path


class AncestryBuilder:
    """
    Builds ancestry graphs with a fixed ordering.

    The comparator is built in the constructor, so an unusable files_first
    matcher raises ConfigurationError before any item is seen. The builder
    keeps no state between build() calls.

    Example:
        >>> builder = AncestryBuilder(sort_by="order")
        >>> graph = builder.build({"a": {"order": 2}, "b": {"order": 1}})
        >>> graph.node("a").members.paths
        ['b', 'a']
    """

    def __init__(
        self,
        sort_by: SortBy = None,
        reverse: bool = False,
        files_first: Optional[Any] = None,
    ):
        self._graph: Optional[AncestryGraph] = None
        self._compare = build_comparator(
            sort_by,
            reverse,
            files_first,
            path_of=self._path_of,
        )

    def _path_of(self, item: Any) -> str:
        if self._graph is None:
            raise RuntimeError("Item paths are only available during build()")
        return self._graph.path_of(item)

    def _sort_key(self, graph: AncestryGraph):
        def compare(a: str, b: str) -> int:
            return self._compare(graph.item(a), graph.item(b))

        return cmp_to_key(compare)

    def build(self, files: Mapping[str, Any]) -> AncestryGraph:
        """
        Compute the ancestry graph for every item in files.

        Args:
            files: Mapping of path -> item. It is read and never modified.

        Returns:
            Fully linked AncestryGraph
        """
        graph = AncestryGraph()
        self._graph = graph
        try:
            self._collect(graph, files)
            self._sort(graph)
            self._assign_parents(graph)
            self._assign_roots(graph)
            self._assign_members(graph)
            self._assign_children(graph)
            self._assign_siblings(graph)
        finally:
            self._graph = None

        logger.info(
            f"{ANCESTRY} Built ancestry for {len(graph)} items "
            f"in {len(graph.buckets)} directories ({len(graph.roots())} roots)"
        )
        return graph

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def _collect(self, graph: AncestryGraph, files: Mapping[str, Any]) -> None:
        # Path order, so ties under the comparator never depend on input order
        for path in sorted(files):
            graph.register(path, files[path])
        graph.grouper.log_summary()

    def _sort(self, graph: AncestryGraph) -> None:
        key = self._sort_key(graph)
        for bucket in graph.buckets.values():
            bucket.sort(key=key)
        logger.debug(f"{ANCESTRY} Sorted {len(graph.buckets)} buckets")

    def _assign_parents(self, graph: AncestryGraph) -> None:
        orphans = 0
        for _, node in graph.nodes():
            if node.directory == ROOT_KEY:
                continue

            parent_bucket = graph.buckets.get(directory_key(node.directory))
            if parent_bucket:
                node.parent_path = parent_bucket[0]
            else:
                orphans += 1

        if orphans:
            logger.debug(f"{ANCESTRY} {orphans} nested items have no parent bucket")

    def _assign_roots(self, graph: AncestryGraph) -> None:
        for _, node in graph.nodes():
            current = node
            while current.parent_path is not None:
                current = graph.node(current.parent_path)
            node.root_path = current.path

    def _assign_members(self, graph: AncestryGraph) -> None:
        for bucket in graph.buckets.values():
            for index, path in enumerate(bucket):
                node = graph.node(path)
                node.member_index = index
                (
                    node.first_member_path,
                    node.last_member_path,
                    node.prev_member_path,
                    node.next_member_path,
                ) = link_within(bucket, index)

    def _assign_children(self, graph: AncestryGraph) -> None:
        key = self._sort_key(graph)
        for dir_key, bucket in graph.buckets.items():
            children = [graph.buckets[k][0] for k in graph.grouper.child_keys(dir_key)]
            children.sort(key=key)

            shared: Optional[List[str]] = children or None
            first_child = children[0] if children else None
            last_child = children[-1] if children else None

            for path in bucket:
                node = graph.node(path)
                node.children_paths = shared
                node.first_child_path = first_child
                node.last_child_path = last_child

    def _assign_siblings(self, graph: AncestryGraph) -> None:
        for bucket in graph.buckets.values():
            first = graph.node(bucket[0])

            # Parent depends only on the directory, so the whole bucket shares it
            if first.parent_path is None:
                for path in bucket:
                    self._link_siblings(graph.node(path), [path], 0)
                continue

            siblings = graph.node(first.parent_path).children_paths
            if siblings is None or first.path not in siblings:
                raise RuntimeError(f"{first.path!r} is missing from its parent's children")

            index = siblings.index(first.path)
            for path in bucket:
                self._link_siblings(graph.node(path), siblings, index)

    @staticmethod
    def _link_siblings(node: AncestryNode, siblings: List[str], index: int) -> None:
        node.sibling_paths = siblings
        node.sibling_index = index
        (
            node.first_sibling_path,
            node.last_sibling_path,
            node.prev_sibling_path,
            node.next_sibling_path,
        ) = link_within(siblings, index)


__all__ = ["AncestryBuilder", "link_within"]
