# tests/unit/conftest.py
"""
Tier markers for unit tests.

Tier 1: Pure logic tests with no I/O beyond tmp_path
Tier 2: Everything else (CLI runs, directory scans)
"""

from __future__ import annotations

import pytest

TIER2_PATTERNS = [
    "test_cli",
    "test_source",
]


def pytest_collection_modifyitems(items):
    """Add tier markers to unit tests based on their file."""
    for item in items:
        fspath = str(item.fspath)

        if "/unit/" not in fspath and "\\unit\\" not in fspath:
            continue

        has_tier = any(marker.name.startswith("tier") for marker in item.iter_markers())
        if has_tier:
            continue

        if any(pattern in fspath for pattern in TIER2_PATTERNS):
            item.add_marker(pytest.mark.tier2)
        else:
            item.add_marker(pytest.mark.tier1)
