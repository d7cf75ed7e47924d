# ancestry/tree/node.py
"""
Ancestry node - the record attached to every item.

Nodes never hold other items or nodes directly. Every link is stored as a
path identifier (``parent_path``, ``next_member_path``, ...) and resolved
through the owning AncestryGraph on read, so ``node.parent`` returns the
live parent item.

List-valued fields (``members``, ``children``, ``siblings``) are returned
as read-only ItemSequence views. The graph caches one view per underlying
path list, so aliased lists stay identical:

    >>> node.siblings is graph.node(node.parent_path).children
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union, overload

if TYPE_CHECKING:
    from ancestry.tree.graph import AncestryGraph


class ItemSequence(Sequence):
    """
    Read-only view of a shared path list, yielding items.

    ``index`` and ``in`` compare by identity, since distinct items may be
    equal by value (two empty dicts, for instance).
    """

    __slots__ = ("_paths", "_graph")

    def __init__(self, paths: List[str], graph: "AncestryGraph"):
        self._paths = paths
        self._graph = graph

    @property
    def paths(self) -> List[str]:
        """Copy of the path identifiers, in order."""
        return list(self._paths)

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> List[Any]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return [self._graph.item(p) for p in self._paths[index]]
        return self._graph.item(self._paths[index])

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Any]:
        for path in self._paths:
            yield self._graph.item(path)

    def __contains__(self, item: object) -> bool:
        return any(candidate is item for candidate in self)

    def index(self, item: Any, start: int = 0, stop: Optional[int] = None) -> int:
        stop = len(self._paths) if stop is None else stop
        for i in range(start, stop):
            if self[i] is item:
                return i
        raise ValueError("item is not in sequence")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemSequence):
            return self._paths == other._paths and self._graph is other._graph
        if isinstance(other, Sequence) and not isinstance(other, str):
            return len(self) == len(other) and all(a is b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ItemSequence({self._paths!r})"


class _ItemLink:
    """Descriptor resolving ``<name>_path`` to the live item."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = f"{name}_path"

    def __get__(self, node: Optional["AncestryNode"], owner: Optional[type] = None) -> Any:
        if node is None:
            return self
        path = getattr(node, self._attr)
        if path is None:
            return None
        return node._graph.item(path)


class AncestryNode:
    """
    Relationship and ordering data for one item.

    Identity fields (``path``, ``basename``, ``directory``) are set at
    creation. Every other field is filled in by AncestryBuilder, one phase
    at a time.
    """

    item = _ItemLink()
    parent = _ItemLink()
    root = _ItemLink()
    first_member = _ItemLink()
    last_member = _ItemLink()
    next_member = _ItemLink()
    prev_member = _ItemLink()
    first_child = _ItemLink()
    last_child = _ItemLink()
    first_sibling = _ItemLink()
    last_sibling = _ItemLink()
    next_sibling = _ItemLink()
    prev_sibling = _ItemLink()

    def __init__(
        self,
        path: str,
        basename: str,
        directory: str,
        members: List[str],
        graph: "AncestryGraph",
    ):
        self.path = path
        self.basename = basename
        self.directory = directory
        self.item_path: str = path
        self._graph = graph

        # Shared path lists; never copied per node
        self.member_paths = members
        self.children_paths: Optional[List[str]] = None
        self.sibling_paths: List[str] = []

        self.parent_path: Optional[str] = None
        self.root_path: str = path

        self.first_member_path: Optional[str] = None
        self.last_member_path: Optional[str] = None
        self.next_member_path: Optional[str] = None
        self.prev_member_path: Optional[str] = None

        self.first_child_path: Optional[str] = None
        self.last_child_path: Optional[str] = None

        self.first_sibling_path: Optional[str] = None
        self.last_sibling_path: Optional[str] = None
        self.next_sibling_path: Optional[str] = None
        self.prev_sibling_path: Optional[str] = None

        self.member_index: int = 0
        self.sibling_index: int = 0

    # -------------------------------------------------------------------------
    # List views
    # -------------------------------------------------------------------------

    @property
    def members(self) -> ItemSequence:
        return self._graph.view(self.member_paths)

    @property
    def children(self) -> Optional[ItemSequence]:
        if self.children_paths is None:
            return None
        return self._graph.view(self.children_paths)

    @property
    def siblings(self) -> ItemSequence:
        return self._graph.view(self.sibling_paths)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe rendering using paths in place of items."""
        return {
            "path": self.path,
            "basename": self.basename,
            "directory": self.directory,
            "parent": self.parent_path,
            "root": self.root_path,
            "members": list(self.member_paths),
            "member_index": self.member_index,
            "first_member": self.first_member_path,
            "last_member": self.last_member_path,
            "next_member": self.next_member_path,
            "prev_member": self.prev_member_path,
            "children": None if self.children_paths is None else list(self.children_paths),
            "first_child": self.first_child_path,
            "last_child": self.last_child_path,
            "siblings": list(self.sibling_paths),
            "sibling_index": self.sibling_index,
            "first_sibling": self.first_sibling_path,
            "last_sibling": self.last_sibling_path,
            "next_sibling": self.next_sibling_path,
            "prev_sibling": self.prev_sibling_path,
        }

    def __repr__(self) -> str:
        return f"AncestryNode(path={self.path!r}, parent={self.parent_path!r})"


__all__ = ["AncestryNode", "ItemSequence"]
