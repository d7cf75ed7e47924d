# ancestry/core/config.py
"""
Centralized configuration loading.

Usage:
    from ancestry.core.config import load_yaml, load_config

    # Load raw YAML
    data = load_yaml("ancestry.yaml")

    # Load and validate with a schema
    from ancestry.config.schema import AncestryConfig
    config = load_config("ancestry.yaml", AncestryConfig)

Schemas live with their packages; this module only loads and validates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml

from ancestry.core.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from ancestry.logging.logger import get_logger
from ancestry.logging.tags import CONFIG

logger = get_logger(__name__)

T = TypeVar("T")


# =============================================================================
# Core Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    An empty file loads as an empty dict.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary of config data

    Raises:
        ConfigNotFoundError: If the file doesn't exist or is a directory
        ConfigParseError: If the YAML is invalid or its root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigNotFoundError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def load_config(path: Union[str, Path], schema: Optional[Type[T]] = None) -> T:
    """
    Load and validate a configuration file.

    Args:
        path: Path to config file
        schema: Pydantic model to validate against. If None, the raw dict
                is returned.

    Returns:
        Validated config object

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If config doesn't match schema
    """
    p = Path(path)
    data = load_yaml(p)

    if schema is None:
        return data  # type: ignore[return-value]

    return validate_config(data, schema, path=p)


def validate_config(
    data: Dict[str, Any],
    schema: Type[T],
    path: Optional[Path] = None,
) -> T:
    """
    Validate config data against a pydantic schema.

    Any validation failure is re-raised as ConfigValidationError with the
    original error chained.
    """
    try:
        return schema.model_validate(data)  # type: ignore[attr-defined]
    except Exception as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=path) from e


__all__ = [
    "load_yaml",
    "load_config",
    "validate_config",
]
