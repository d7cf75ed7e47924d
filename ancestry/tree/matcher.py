# ancestry/tree/matcher.py
"""
Path matching for "sort these first" rules and inclusion filters.

Matcher inputs are duck-typed: a glob string, a compiled regex, a predicate
function, or any object with a callable ``test`` or ``match`` method. They
are resolved once, at configuration time, into one of a closed set of
pattern classes. Each class answers ``matches(path) -> bool``.

Globs are compiled by ancestry.tree.glob and matched segment by segment on
POSIX-normalized paths: ``*`` stays inside one directory, ``**`` spans any
number of them (including none), ``{a,b}`` expands, and dotfiles need
``dot`` or a literal leading dot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Union

from ancestry.core.exceptions import ConfigurationError
from ancestry.logging.logger import get_logger
from ancestry.logging.tags import CONFIG
from ancestry.tree.glob import CompiledGlob, GlobOptions, compile_glob

logger = get_logger(__name__)


def normalize_path(path: str) -> str:
    """Convert Windows backslashes to forward slashes."""
    return path.replace("\\", "/")


# =============================================================================
# Pattern Variants
# =============================================================================


@dataclass(frozen=True)
class GlobPattern:
    """Shell-style glob, e.g. ``"**/index.{md,html}"`` or ``"b"``."""

    pattern: str
    options: GlobOptions = field(default_factory=GlobOptions)
    _glob: CompiledGlob = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_glob", compile_glob(self.pattern, self.options))

    def matches(self, path: str) -> bool:
        return self._glob.matches(normalize_path(path))


@dataclass(frozen=True)
class RegexPattern:
    """Compiled regular expression; matches anywhere in the path."""

    pattern: "re.Pattern[str]"

    def matches(self, path: str) -> bool:
        return self.pattern.search(path) is not None


@dataclass(frozen=True)
class Predicate:
    """Plain function called with the path; truthy results match."""

    fn: Callable[[str], Any]

    def matches(self, path: str) -> bool:
        return bool(self.fn(path))


@dataclass(frozen=True)
class TestCapable:
    """Object exposing ``test(path)``, like a JS-style RegExp wrapper."""

    __test__ = False  # keep pytest from collecting this class

    obj: Any

    def matches(self, path: str) -> bool:
        return bool(self.obj.test(path))


@dataclass(frozen=True)
class MatchCapable:
    """Object exposing ``match(path)``, e.g. a third-party glob matcher."""

    obj: Any

    def matches(self, path: str) -> bool:
        return bool(self.obj.match(path))


PathPattern = Union[GlobPattern, RegexPattern, Predicate, TestCapable, MatchCapable]


def resolve_matcher(value: Any) -> PathPattern:
    """
    Resolve one duck-typed matcher input into a pattern variant.

    Args:
        value: Glob string, compiled regex, callable, or object with a
               callable ``test`` / ``match`` attribute

    Returns:
        The matching PathPattern variant

    Raises:
        ConfigurationError: If the value has none of the supported shapes
    """
    if isinstance(value, str):
        return GlobPattern(value)

    if isinstance(value, re.Pattern):
        return RegexPattern(value)

    if callable(value):
        return Predicate(value)

    if callable(getattr(value, "test", None)):
        return TestCapable(value)

    if callable(getattr(value, "match", None)):
        return MatchCapable(value)

    raise ConfigurationError(f"Can't handle matcher: {value!r}")


# =============================================================================
# Combined Matcher
# =============================================================================


class PathMatcher:
    """
    Matches paths against any of several patterns.

    Example:
        >>> matcher = PathMatcher.from_spec(["**/index.md", re.compile(r"README")])
        >>> matcher.matches("docs/index.md")
        True
    """

    def __init__(self, patterns: Iterable[PathPattern]):
        self._patterns: List[PathPattern] = list(patterns)

    @classmethod
    def from_spec(cls, spec: Optional[Any]) -> "PathMatcher":
        """
        Build a matcher from None, a single matcher input, or a list of them.

        None and an empty list produce an empty matcher that matches nothing.

        Raises:
            ConfigurationError: If any entry has an unsupported shape
        """
        if spec is None:
            entries: List[Any] = []
        elif isinstance(spec, (list, tuple)):
            entries = list(spec)
        else:
            entries = [spec]

        patterns = [resolve_matcher(entry) for entry in entries]
        logger.debug(f"{CONFIG} Resolved {len(patterns)} path matcher(s)")
        return cls(patterns)

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def matches(self, path: str) -> bool:
        """True if any pattern matches path."""
        return any(pattern.matches(path) for pattern in self._patterns)


__all__ = [
    "GlobPattern",
    "RegexPattern",
    "Predicate",
    "TestCapable",
    "MatchCapable",
    "PathPattern",
    "PathMatcher",
    "normalize_path",
    "resolve_matcher",
]
