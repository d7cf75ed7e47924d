# ancestry/core/item.py
"""
Access helpers for caller-owned items.

Items are opaque records. They are usually mappings (a dict per file), but
attribute-style objects work too. The tree code reads sort properties and
writes the ancestry node only through these helpers.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


def get_property(item: Any, name: str, default: Any = None) -> Any:
    """
    Read a named property from an item.

    Mappings are read by key, anything else by attribute.

    Args:
        item: Mapping or object
        name: Property name
        default: Value returned when the property is missing

    Returns:
        The property value, or default

    Examples:
        >>> get_property({"order": 2}, "order")
        2
        >>> get_property({}, "order") is None
        True
    """
    if isinstance(item, Mapping):
        return item.get(name, default)
    return getattr(item, name, default)


def set_property(item: Any, name: str, value: Any) -> None:
    """Attach a value to an item under name (key for mappings, attribute otherwise)."""
    if isinstance(item, MutableMapping):
        item[name] = value
    else:
        setattr(item, name, value)


__all__ = ["get_property", "set_property"]
