# ancestry/tree/glob.py
"""
Shell-style glob matching for slash-separated paths.

Semantics follow the globs used by static-site tooling:

    *         any run of characters inside one path segment
    ?         one character inside a segment
    [abc]     character class ([!abc] / [^abc] negate it)
    **        as a whole segment, zero or more directories
    {a,b}     brace alternatives, nestable; {1..3} and {a..c} ranges
    !pattern  a leading ``!`` negates the whole pattern
    \\x       literal x

Segments starting with ``.`` (dotfiles, dot-directories) are only matched
by pattern segments that start with a literal ``.``, unless ``dot`` is set.

Example:
    >>> glob = compile_glob("**/index.{md,html}")
    >>> glob.matches("docs/index.md"), glob.matches("index.html")
    (True, True)
    >>> compile_glob("*.md").matches("docs/a.md")
    False
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence, Tuple, Union

GLOBSTAR = "**"

_RANGE = re.compile(r"^(-?\d+)\.\.(-?\d+)$|^([A-Za-z])\.\.([A-Za-z])$")

Token = Union[str, Pattern[str]]


@dataclass(frozen=True)
class GlobOptions:
    """
    Matching flags.

    Attributes:
        dot: Let wildcards match segments starting with ``.``
        nocase: Case-insensitive matching
        nobrace: Treat ``{`` and ``}`` literally
        noglobstar: Treat ``**`` like ``*``
        nonegate: Treat a leading ``!`` literally
    """

    dot: bool = False
    nocase: bool = False
    nobrace: bool = False
    noglobstar: bool = False
    nonegate: bool = False


# =============================================================================
# Brace Expansion
# =============================================================================


def _closing_brace(pattern: str, start: int) -> Optional[int]:
    depth = 0
    i = start
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def _split_top_level(body: str) -> List[str]:
    parts: List[str] = []
    depth = 0
    current = ""
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\":
            current += body[i : i + 2]
            i += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append(current)
            current = ""
            i += 1
            continue
        current += char
        i += 1
    parts.append(current)
    return parts


def _expand_range(body: str) -> Optional[List[str]]:
    found = _RANGE.match(body)
    if not found:
        return None

    if found.group(1) is not None:
        first, last = int(found.group(1)), int(found.group(2))
        step = 1 if last >= first else -1
        return [str(n) for n in range(first, last + step, step)]

    first, last = ord(found.group(3)), ord(found.group(4))
    step = 1 if last >= first else -1
    return [chr(n) for n in range(first, last + step, step)]


def _first_brace_set(pattern: str) -> Optional[Tuple[int, int, List[str]]]:
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            end = _closing_brace(pattern, i)
            if end is not None:
                body = pattern[i + 1 : end]
                alternatives = _split_top_level(body)
                if len(alternatives) > 1:
                    return i, end, alternatives
                expanded = _expand_range(body)
                if expanded is not None:
                    return i, end, expanded
        i += 1
    return None


def expand_braces(pattern: str) -> List[str]:
    """
    Expand brace sets left to right, like a POSIX shell.

    A brace pair without a top-level comma or range stays literal.

    Examples:
        >>> expand_braces("index.{md,html}")
        ['index.md', 'index.html']
        >>> expand_braces("a{1..3}")
        ['a1', 'a2', 'a3']
        >>> expand_braces("{x}")
        ['{x}']
    """
    found = _first_brace_set(pattern)
    if found is None:
        return [pattern]

    start, end, alternatives = found
    prefix, suffix = pattern[:start], pattern[end + 1 :]

    expanded: List[str] = []
    for alternative in alternatives:
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


# =============================================================================
# Segment Translation
# =============================================================================


def _translate_class(segment: str, start: int) -> Tuple[Optional[str], int]:
    """Regex for the ``[...]`` class at start, and the index after it."""
    i = start + 1
    negate = i < len(segment) and segment[i] in "!^"
    if negate:
        i += 1

    body = ""
    first = True
    while i < len(segment):
        char = segment[i]
        if char == "]" and not first:
            prefix = "^" if negate else ""
            return f"[{prefix}{body}]", i + 1
        if char == "\\" and i + 1 < len(segment):
            body += re.escape(segment[i + 1])
            i += 2
        else:
            body += "\\" + char if char in "\\^[]" else char
            i += 1
        first = False

    return None, start + 1


def translate_segment(segment: str, options: GlobOptions) -> Pattern[str]:
    """Compile one path segment of a glob to an anchored regex."""
    parts: List[str] = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if char == "\\" and i + 1 < len(segment):
            parts.append(re.escape(segment[i + 1]))
            i += 2
        elif char == "*":
            while i < len(segment) and segment[i] == "*":
                i += 1
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
            i += 1
        elif char == "[":
            translated, i = _translate_class(segment, i)
            parts.append(translated if translated is not None else re.escape("["))
        else:
            parts.append(re.escape(char))
            i += 1

    if segment.startswith("."):
        guard = ""
    elif options.dot:
        guard = r"(?!\.\.?$)"
    else:
        guard = r"(?!\.)"

    flags = re.IGNORECASE if options.nocase else 0
    return re.compile(guard + "".join(parts), flags)


# =============================================================================
# Compiled Glob
# =============================================================================


class CompiledGlob:
    """A glob pattern compiled to per-segment token lists, one per brace alternative."""

    def __init__(self, pattern: str, options: GlobOptions):
        self.pattern = pattern
        self.options = options

        body, self.negate = self._parse_negation(pattern, options)
        expanded = [body] if options.nobrace else expand_braces(body)
        self._alternatives: List[List[Token]] = [self._tokenize(p) for p in expanded]

    @staticmethod
    def _parse_negation(pattern: str, options: GlobOptions) -> Tuple[str, bool]:
        if options.nonegate:
            return pattern, False
        stripped = pattern.lstrip("!")
        return stripped, (len(pattern) - len(stripped)) % 2 == 1

    def _tokenize(self, pattern: str) -> List[Token]:
        tokens: List[Token] = []
        for segment in pattern.split("/"):
            if segment == GLOBSTAR and not self.options.noglobstar:
                if not tokens or tokens[-1] is not GLOBSTAR:
                    tokens.append(GLOBSTAR)
            else:
                tokens.append(translate_segment(segment, self.options))
        return tokens

    def _globstar_can_consume(self, part: str) -> bool:
        if part in (".", ".."):
            return False
        return self.options.dot or not part.startswith(".")

    def _match_tokens(self, parts: Sequence[str], tokens: Sequence[Token]) -> bool:
        def walk(pi: int, ti: int) -> bool:
            if ti == len(tokens):
                return pi == len(parts)

            token = tokens[ti]
            if token is GLOBSTAR:
                if walk(pi, ti + 1):
                    return True
                while pi < len(parts) and self._globstar_can_consume(parts[pi]):
                    pi += 1
                    if walk(pi, ti + 1):
                        return True
                return False

            if pi == len(parts):
                return False
            return token.fullmatch(parts[pi]) is not None and walk(pi + 1, ti + 1)  # type: ignore[union-attr]

        return walk(0, 0)

    def matches(self, path: str) -> bool:
        parts = path.split("/")
        found = any(self._match_tokens(parts, tokens) for tokens in self._alternatives)
        return found != self.negate

    def __repr__(self) -> str:
        return f"CompiledGlob({self.pattern!r})"


def compile_glob(pattern: str, options: Optional[GlobOptions] = None) -> CompiledGlob:
    """Compile a glob for repeated matching."""
    return CompiledGlob(pattern, options or GlobOptions())


__all__ = ["GlobOptions", "CompiledGlob", "compile_glob", "expand_braces", "translate_segment"]
