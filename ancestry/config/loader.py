# ancestry/config/loader.py
"""
Configuration loading and option resolution.

Two entry points:
    load_ancestry_config(path)         # YAML file -> AncestryConfig
    resolve_config(config, **options)  # programmatic options -> AncestryConfig
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ancestry.config.schema import AncestryConfig
from ancestry.core.config import load_config, validate_config
from ancestry.logging.logger import get_logger
from ancestry.logging.tags import CONFIG

logger = get_logger(__name__)

_FIELD_BY_ALIAS = {
    field.alias: name for name, field in AncestryConfig.model_fields.items() if field.alias
}


def _canonical(options: Mapping[str, Any]) -> dict:
    """Rename camelCase aliases to field names so merged keys never collide."""
    return {_FIELD_BY_ALIAS.get(key, key): value for key, value in options.items()}


def load_ancestry_config(path: Union[str, Path]) -> AncestryConfig:
    """
    Load an ancestry configuration from YAML.

    Args:
        path: Path to YAML config file

    Returns:
        Validated AncestryConfig

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the YAML is invalid
        ConfigValidationError: If the options don't match the schema

    Examples:
        >>> config = load_ancestry_config("ancestry.yaml")
    """
    config = load_config(path, schema=AncestryConfig)
    logger.debug(f"{CONFIG} Loaded ancestry config from {path}")
    return config


def resolve_config(
    config: Optional[Union[AncestryConfig, Mapping[str, Any]]] = None,
    **options: Any,
) -> AncestryConfig:
    """
    Resolve defaults and overrides into one AncestryConfig.

    Args:
        config: Existing config, a mapping of options, or None for defaults
        **options: Individual option overrides (snake_case or camelCase)

    Returns:
        Validated AncestryConfig

    Raises:
        ConfigValidationError: If the merged options don't match the schema
    """
    if isinstance(config, AncestryConfig):
        if not options:
            return config
        # Field values as-is; regexes and callables must not be re-serialized
        data = {name: getattr(config, name) for name in AncestryConfig.model_fields}
    else:
        data = _canonical(config or {})

    data.update(_canonical(options))
    return validate_config(data, AncestryConfig)


__all__ = ["load_ancestry_config", "resolve_config"]
