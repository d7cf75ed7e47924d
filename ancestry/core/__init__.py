# ancestry/core/__init__.py
"""
Ancestry core - errors, config loading and item access shared by every layer.
"""

from ancestry.core.config import load_config, load_yaml
from ancestry.core.exceptions import (
    AncestryError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
    ConfigValidationError,
)
from ancestry.core.item import get_property, set_property

__all__ = [
    "AncestryError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_yaml",
    "load_config",
    "get_property",
    "set_property",
]
