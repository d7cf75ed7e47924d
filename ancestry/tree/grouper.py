# ancestry/tree/grouper.py
"""
Path grouping by directory.

Buckets paths by their normalized directory key. Each key owns exactly one
list object; that same list is later shared as ``members`` by every node
in the bucket.
"""

from __future__ import annotations

import posixpath
from typing import Dict, List

from ancestry.logging.logger import get_logger
from ancestry.logging.tags import ANCESTRY

logger = get_logger(__name__)

ROOT_KEY = ""


def directory_key(path: str) -> str:
    """
    Directory key of a path: ``path/..`` resolved against ``/``, no leading slash.

    Applied to a directory key it gives the key one level up.

    Examples:
        >>> directory_key("test/folder/index.jade")
        'test/folder'
        >>> directory_key("index.html")
        ''
        >>> directory_key("test")
        ''
    """
    resolved = posixpath.normpath(posixpath.join("/", path, ".."))
    return resolved.lstrip("/")


class PathGrouper:
    """
    Groups paths into directory buckets.

    Example:
        >>> grouper = PathGrouper()
        >>> grouper.add("test/a.md")
        ['test/a.md']
        >>> grouper.add("test/b.md")
        ['test/a.md', 'test/b.md']
        >>> grouper.buckets
        {'test': ['test/a.md', 'test/b.md']}
    """

    def __init__(self) -> None:
        self._buckets: Dict[str, List[str]] = {}

    @property
    def buckets(self) -> Dict[str, List[str]]:
        """Live mapping of directory key -> bucket list."""
        return self._buckets

    def bucket_for(self, key: str) -> List[str]:
        """Return the bucket for key, creating it if absent."""
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = []
            self._buckets[key] = bucket
        return bucket

    def add(self, path: str) -> List[str]:
        """Append path to its directory bucket and return that bucket."""
        bucket = self.bucket_for(directory_key(path))
        bucket.append(path)
        return bucket

    def child_keys(self, key: str) -> List[str]:
        """Registered keys exactly one level below key."""
        # directory_key("") == "", so the root is never its own child
        return [k for k in self._buckets if k != key and directory_key(k) == key]

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def log_summary(self) -> None:
        total = sum(len(bucket) for bucket in self._buckets.values())
        logger.info(f"{ANCESTRY} Grouped {total} items into {len(self._buckets)} directories")


__all__ = ["PathGrouper", "directory_key", "ROOT_KEY"]
