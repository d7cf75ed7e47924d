# ancestry/core/exceptions.py
"""
All exceptions for the ancestry package.

Hierarchy:
    AncestryError
    └── ConfigurationError - Invalid options or matcher shapes
        ├── ConfigNotFoundError - Config file missing
        ├── ConfigParseError - YAML syntax / root-type errors
        └── ConfigValidationError - Schema validation failures

Only configuration can fail. Building the tree itself is total over
well-formed path strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class AncestryError(Exception):
    """Base error for the ancestry package."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AncestryError):
    """Raised when options cannot be turned into a working configuration."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigurationError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigurationError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when config doesn't match schema."""

    pass


__all__ = [
    "AncestryError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
