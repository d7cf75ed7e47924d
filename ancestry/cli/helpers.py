# ancestry/cli/helpers.py
"""
Helpers shared by the tree and node commands.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import typer

from ancestry.cli.ui import ui
from ancestry.config import AncestryConfig, load_ancestry_config, resolve_config
from ancestry.core.exceptions import AncestryError
from ancestry.logging.logger import configure_logging, get_logger
from ancestry.logging.tags import CLI
from ancestry.plugin import AncestryPlugin
from ancestry.source import scan_directory
from ancestry.tree.graph import AncestryGraph

logger = get_logger(__name__)

Files = Dict[str, Dict[str, Any]]


def setup_logging(verbose: bool) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


def load_options(
    config_path: Optional[Path] = None,
    sort_by: Optional[List[str]] = None,
    reverse: bool = False,
    match: Optional[str] = None,
) -> AncestryConfig:
    """
    Merge an optional YAML config with command-line overrides.

    Flags only override the file when they are given; a single --sort-by
    is passed as a property name, several as a list.
    """
    config = load_ancestry_config(config_path) if config_path else None

    overrides: Dict[str, Any] = {}
    if sort_by:
        overrides["sort_by"] = sort_by[0] if len(sort_by) == 1 else list(sort_by)
    if reverse:
        overrides["reverse"] = True
    if match:
        overrides["match"] = match

    return resolve_config(config, **overrides)


def build_from_source(source: Path, config: AncestryConfig) -> Tuple[Files, AncestryGraph]:
    """Scan source, build the graph and attach nodes to the scanned items."""
    files = scan_directory(source)
    graph = AncestryPlugin(config).build(files)
    graph.attach(files, config.ancestry_property)
    logger.debug(f"{CLI} Built {graph!r} from {source}")
    return files, graph


def build_or_exit(
    source: Path,
    config_path: Optional[Path] = None,
    sort_by: Optional[List[str]] = None,
    reverse: bool = False,
    match: Optional[str] = None,
) -> Tuple[Files, AncestryGraph]:
    """Run load_options and build_from_source, exiting with code 1 on known errors."""
    try:
        config = load_options(config_path, sort_by, reverse, match)
        return build_from_source(source, config)
    except (AncestryError, FileNotFoundError) as e:
        ui.error(str(e))
        raise typer.Exit(1)


__all__ = ["setup_logging", "load_options", "build_from_source", "build_or_exit"]
