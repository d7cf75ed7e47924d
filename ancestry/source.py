# ancestry/source.py
"""
Local filesystem source for path -> item mappings.

Walks a directory and returns one dict item per file, keyed by its
POSIX-style path relative to the root. Text files that open with a YAML
front-matter block (``---`` ... ``---``) have its keys merged into the
item, so options like ``sort_by: order`` can use them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ancestry.logging.logger import get_logger
from ancestry.logging.tags import SOURCE

logger = get_logger(__name__)

FRONT_MATTER_DELIMITER = "---"
FRONT_MATTER_EXTENSIONS = {".md", ".markdown", ".html", ".htm", ".jade", ".txt", ".rst"}


def read_front_matter(path: Path) -> Dict[str, Any]:
    """
    Parse the YAML front matter at the top of a text file.

    Returns an empty dict when there is no front matter, or when the block
    is not a YAML mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"{SOURCE} Skipping front matter for {path}: {e}")
        return {}

    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            block = "\n".join(lines[1:end])
            break
    else:
        return {}

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.warning(f"{SOURCE} Invalid front matter in {path}: {e}")
        return {}

    return data if isinstance(data, dict) else {}


def scan_directory(
    root: Union[str, Path],
    patterns: Optional[List[str]] = None,
    front_matter: bool = True,
) -> Dict[str, Dict[str, Any]]:
    """
    Build a path -> item mapping from the files under root.

    Args:
        root: Directory to scan recursively
        patterns: Optional rglob patterns (e.g. ["*.md"]); all files if None
        front_matter: Merge YAML front matter into items

    Returns:
        Mapping of relative POSIX path -> item dict with ``path``,
        ``filename``, ``extension``, ``size`` and any front-matter keys

    Raises:
        FileNotFoundError: If root does not exist or is not a directory
    """
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        raise FileNotFoundError(f"Not a directory: {root_path}")

    found = set()
    for pattern in patterns or ["*"]:
        found.update(p for p in root_path.rglob(pattern) if p.is_file())

    files: Dict[str, Dict[str, Any]] = {}
    for file_path in sorted(found):
        rel = file_path.relative_to(root_path).as_posix()
        item: Dict[str, Any] = {}

        if front_matter and file_path.suffix.lower() in FRONT_MATTER_EXTENSIONS:
            item.update(read_front_matter(file_path))

        item.update(
            {
                "path": rel,
                "filename": file_path.name,
                "extension": file_path.suffix.lower(),
                "size": file_path.stat().st_size,
            }
        )
        files[rel] = item

    logger.info(f"{SOURCE} Discovered {len(files)} files under {root_path}")
    return files


__all__ = ["scan_directory", "read_front_matter"]
