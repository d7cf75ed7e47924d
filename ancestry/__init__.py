"""
Ancestry - parent, child and sibling links for path-keyed content.

Given a flat mapping of path -> item (as produced by a static site
generator or a directory scan), ancestry attaches a node to every item
describing where it sits in the directory hierarchy: its parent, root,
the other members of its directory, the child directories below it and
its siblings, each in a configurable order.

Quick Start:
    >>> from ancestry import build_ancestry
    >>> files = {"index.md": {}, "docs/index.md": {}, "docs/a.md": {}}
    >>> build_ancestry(files)
    >>> files["docs/a.md"]["ancestry"].parent is files["index.md"]
    True

Public API:
    Plugin:
        - AncestryPlugin: Configured, reusable enrichment step
        - build_ancestry: One-call helper

    Configuration:
        - AncestryConfig: Options schema (pydantic)
        - load_ancestry_config: Load options from YAML
        - resolve_config: Merge defaults, configs and overrides

    Graph:
        - AncestryBuilder: Computes the graph
        - AncestryGraph: Per-run arena nodes resolve through
        - AncestryNode: Relationship record attached to each item
        - ItemSequence: Read-only members/children/siblings view

    Sources:
        - scan_directory: path -> item mapping from a local directory

Architecture:
    ancestry/
    ├── core/      # Errors, YAML loading, item property access
    ├── config/    # AncestryConfig schema and resolution
    ├── tree/      # Matchers, comparators, grouper, builder, graph
    ├── plugin.py  # Host integration
    ├── source.py  # Directory scanner
    └── cli/       # typer CLI
"""

from ancestry.config import AncestryConfig, load_ancestry_config, resolve_config
from ancestry.core.exceptions import (
    AncestryError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
    ConfigValidationError,
)
from ancestry.plugin import AncestryPlugin, build_ancestry
from ancestry.source import scan_directory
from ancestry.tree import (
    AncestryBuilder,
    AncestryGraph,
    AncestryNode,
    ItemSequence,
    PathMatcher,
    build_comparator,
    compare_values,
    directory_key,
    resolve_matcher,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Plugin
    "AncestryPlugin",
    "build_ancestry",
    # Configuration
    "AncestryConfig",
    "load_ancestry_config",
    "resolve_config",
    # Graph
    "AncestryBuilder",
    "AncestryGraph",
    "AncestryNode",
    "ItemSequence",
    "PathMatcher",
    "build_comparator",
    "compare_values",
    "directory_key",
    "resolve_matcher",
    # Sources
    "scan_directory",
    # Errors
    "AncestryError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
