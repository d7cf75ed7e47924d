# ancestry/config/schema.py
"""
Configuration schema for ancestry runs.

Options accept snake_case names or camelCase aliases (``sortBy``,
``sortFilesFirst``, ...), as written in static-site build configs.

Example YAML:
    ancestry_property: ancestry
    match: "**/*.md"
    match_options:
      dot: true
    sort_by: [order, title]
    reverse: false
    sort_files_first:
      - "**/index.md"
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ANCESTRY_PROPERTY = "ancestry"
DEFAULT_MATCH = "**/*"
DEFAULT_SORT_FILES_FIRST: List[str] = ["**/index.{htm,html,jade,md}"]


class MatchOptions(BaseModel):
    """
    Glob flags for the ``match`` inclusion pattern.

    Attributes:
        dot: Wildcards also match dotfiles and dot-directories.
        nocase: Case-insensitive matching.
        nobrace: Treat ``{a,b}`` literally.
        noglobstar: Treat ``**`` like ``*``.
        nonegate: Treat a leading ``!`` literally.
    """

    dot: bool = False
    nocase: bool = False
    nobrace: bool = False
    noglobstar: bool = False
    nonegate: bool = False

    model_config = ConfigDict(extra="forbid")


class AncestryConfig(BaseModel):
    """
    Options for building and attaching ancestry nodes.

    Attributes:
        ancestry_property: Key under which each node is attached to its item.
        match: Inclusion glob; only matching paths get a node.
        match_options: Glob flags for match (``dot``, ``nocase``, ...).
        sort_by: Comparator function, property name, or list of names.
                 None sorts by path.
        reverse: Invert the final ordering.
        sort_files_first: Matcher(s) ranked first in every bucket and child
                          list. None or [] disables the ranking.
    """

    ancestry_property: str = Field(
        default=DEFAULT_ANCESTRY_PROPERTY,
        alias="ancestryProperty",
        min_length=1,
        description="Key the ancestry node is attached under",
    )
    match: str = Field(default=DEFAULT_MATCH, description="Inclusion glob")
    match_options: MatchOptions = Field(
        default_factory=MatchOptions,
        alias="matchOptions",
        description="Glob flags for the inclusion pattern",
    )
    sort_by: Optional[Union[str, List[str], Callable[..., Any]]] = Field(
        default=None,
        alias="sortBy",
        description="Sort criteria (function, property name or names)",
    )
    reverse: bool = Field(default=False, description="Invert the final ordering")
    sort_files_first: List[Any] = Field(
        default_factory=lambda: list(DEFAULT_SORT_FILES_FIRST),
        alias="sortFilesFirst",
        description="Matchers ranked first (globs, regexes, predicates, .test/.match objects)",
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("sort_files_first", mode="before")
    @classmethod
    def normalize_files_first(cls, v: Any) -> List[Any]:
        """Wrap a single matcher in a list; None disables."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return list(v)
        return [v]

    @field_validator("sort_by", mode="before")
    @classmethod
    def normalize_sort_by(cls, v: Any) -> Any:
        """Treat an empty string or list as 'sort by path'."""
        if not v and not callable(v):
            return None
        if isinstance(v, tuple):
            return list(v)
        return v


__all__ = [
    "AncestryConfig",
    "MatchOptions",
    "DEFAULT_ANCESTRY_PROPERTY",
    "DEFAULT_MATCH",
    "DEFAULT_SORT_FILES_FIRST",
]
