# ancestry/config/__init__.py
from ancestry.config.loader import load_ancestry_config, resolve_config
from ancestry.config.schema import (
    DEFAULT_ANCESTRY_PROPERTY,
    DEFAULT_MATCH,
    DEFAULT_SORT_FILES_FIRST,
    AncestryConfig,
    MatchOptions,
)

__all__ = [
    "AncestryConfig",
    "MatchOptions",
    "DEFAULT_ANCESTRY_PROPERTY",
    "DEFAULT_MATCH",
    "DEFAULT_SORT_FILES_FIRST",
    "load_ancestry_config",
    "resolve_config",
]
