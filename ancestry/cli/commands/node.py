# ancestry/cli/commands/node.py
"""
Print the ancestry record of one or more files as JSON.

Usage:
    ancestry node ./site docs/index.md
    ancestry node ./site docs/index.md docs/api/index.md --sort-by title
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from ancestry.cli.helpers import build_or_exit, setup_logging
from ancestry.cli.ui import ui


def command(
    source: Path,
    paths: List[str],
    config: Optional[Path] = None,
    sort_by: Optional[List[str]] = None,
    reverse: bool = False,
    match: Optional[str] = None,
    verbose: bool = False,
) -> None:
    setup_logging(verbose)

    _, graph = build_or_exit(source, config, sort_by, reverse, match)

    missing = [p for p in paths if p not in graph]
    if missing:
        ui.error(f"No ancestry for: {', '.join(missing)}")
        raise typer.Exit(1)

    records = [graph.node(p).to_dict() for p in paths]
    payload = records[0] if len(records) == 1 else records
    typer.echo(json.dumps(payload, indent=2))
