# tests/conftest.py
"""
Root conftest - shared fixtures for every test module.

Test Tiers:
===========
- tier1: Pure logic, no I/O beyond tmp_path (<30s)
         Run: pytest -m tier1
- tier2: CLI and filesystem tests
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

from typing import Any, Dict

import pytest

SITE_PATHS = [
    "index.html",
    "test/page.html",
    "test/index.md",
    "test/image.gif",
    "test/thing.htm",
    "test/folder/index.jade",
    "test/folder2/big.html",
    "test/folder2/index.htm",
]


@pytest.fixture
def site_files() -> Dict[str, Dict[str, Any]]:
    """A small site with a root page, one section and two subsections."""
    return {path: {} for path in SITE_PATHS}


@pytest.fixture
def letter_files() -> Dict[str, Dict[str, Any]]:
    """Four top-level items named after their paths."""
    return {name: {"name": name} for name in "abcd"}


@pytest.fixture
def site_dir(tmp_path):
    """The site_files layout written to disk, with front matter on two pages."""
    for path in SITE_PATHS:
        target = tmp_path / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("")

    (tmp_path / "test" / "page.html").write_text("---\ntitle: Alpha\norder: 2\n---\n<p>page</p>\n")
    (tmp_path / "test" / "thing.htm").write_text("---\ntitle: Beta\norder: 1\n---\n<p>thing</p>\n")
    return tmp_path
