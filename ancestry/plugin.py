# ancestry/plugin.py
"""
Ancestry plugin - attaches an AncestryNode to every included item.

Host pipelines hand over a mutable path -> item mapping. The plugin:
1. Keeps the paths matching the inclusion glob (``match``, ``match_options``)
2. Builds the ancestry graph over those items
3. Sets ``item[ancestry_property]`` on each of them

Excluded items are never touched. Option errors are raised when the plugin
is constructed, before any mapping is seen.

Usage:
    plugin = AncestryPlugin(sort_by="title", sortFilesFirst="**/index.md")
    plugin(files)
    files["docs/intro.md"]["ancestry"].parent
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, TypeVar, Union

from ancestry.config.loader import resolve_config
from ancestry.config.schema import AncestryConfig
from ancestry.logging.logger import get_logger
from ancestry.logging.tags import ANCESTRY
from ancestry.tree.builder import AncestryBuilder
from ancestry.tree.graph import AncestryGraph
from ancestry.tree.glob import GlobOptions
from ancestry.tree.matcher import GlobPattern

logger = get_logger(__name__)

FilesT = TypeVar("FilesT", bound=MutableMapping[str, Any])


class AncestryPlugin:
    """
    Callable enrichment step for a path -> item mapping.

    Args:
        config: AncestryConfig or mapping of options; None for defaults
        **options: Option overrides (snake_case or camelCase names)

    Raises:
        ConfigurationError: On invalid options or matcher shapes
    """

    def __init__(
        self,
        config: Optional[Union[AncestryConfig, Mapping[str, Any]]] = None,
        **options: Any,
    ):
        self._config = resolve_config(config, **options)
        self._include = GlobPattern(
            self._config.match,
            GlobOptions(**self._config.match_options.model_dump()),
        )
        self._builder = AncestryBuilder(
            sort_by=self._config.sort_by,
            reverse=self._config.reverse,
            files_first=self._config.sort_files_first,
        )

    @property
    def config(self) -> AncestryConfig:
        return self._config

    def build(self, files: Mapping[str, Any]) -> AncestryGraph:
        """Build the graph for the included items without attaching anything."""
        included = {path: item for path, item in files.items() if self._include.matches(path)}
        skipped = len(files) - len(included)
        if skipped:
            logger.debug(f"{ANCESTRY} {skipped} items excluded by match '{self._config.match}'")
        return self._builder.build(included)

    def __call__(self, files: FilesT) -> FilesT:
        """
        Enrich files in place and return it.

        Args:
            files: Mutable mapping of path -> item

        Returns:
            The same mapping, with ancestry nodes attached
        """
        graph = self.build(files)
        graph.attach(files, self._config.ancestry_property)
        return files


def build_ancestry(
    files: FilesT,
    config: Optional[Union[AncestryConfig, Mapping[str, Any]]] = None,
    **options: Any,
) -> FilesT:
    """
    One-call helper: configure a plugin and run it over files.

    Examples:
        >>> files = {"index.md": {}, "docs/a.md": {}}
        >>> build_ancestry(files)["docs/a.md"]["ancestry"].parent_path
        'index.md'
    """
    return AncestryPlugin(config, **options)(files)


__all__ = ["AncestryPlugin", "build_ancestry"]
