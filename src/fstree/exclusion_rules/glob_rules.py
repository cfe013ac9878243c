"""Glob patterns for the include and exclude filters."""

import fnmatch
import re
from typing import List, Optional, Pattern

from fstree.exceptions import GlobPatternError


class GlobMatcher:
    """Compiled glob that is matched against entry base names.

    Supported syntax:
    - ``*`` matches any run of characters, ``?`` a single character
    - ``[abc]``, ``[a-z]``, ``[!abc]`` / ``[^abc]`` character classes
    - ``{a,b}`` alternation, which may be nested
    - ``\\`` escapes the following character

    Matching is case-sensitive. The matcher holds no state besides the compiled
    expressions.

    Attributes:
        pattern (str): The glob as given.

    Example:
        >>> matcher = GlobMatcher("*.{py,txt}")
        >>> matcher.is_match("notes.txt")
        True
        >>> matcher.is_match("notes.md")
        False
        >>> GlobMatcher("[abc")
        Traceback (most recent call last):
        ...
        fstree.exceptions.GlobPatternError: Invalid glob pattern '[abc': unclosed character class
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        _validate(pattern)
        self._regexes: List[Pattern[str]] = [
            re.compile(fnmatch.translate(_escape_for_fnmatch(alternative)))
            for alternative in _expand_braces(pattern)
        ]

    def is_match(self, name: str) -> bool:
        return any(regex.match(name) for regex in self._regexes)

    def __repr__(self) -> str:
        return f"GlobMatcher({self.pattern!r})"


def compile_glob(pattern: Optional[str]) -> Optional[GlobMatcher]:
    """Compile an optional glob pattern.

    Args:
        pattern: The glob, or None (or an empty string) when no pattern was given.

    Returns:
        A GlobMatcher, or None if there is no pattern.

    Raises:
        GlobPatternError: If the pattern is malformed.
    """
    if not pattern:
        return None
    return GlobMatcher(pattern)


def _class_end(pattern: str, start: int) -> int:
    """Return the index just past the character class opened at ``start``, or -1."""
    i = start + 1
    if i < len(pattern) and pattern[i] in "!^":
        i += 1
    # A leading ] is a literal member of the class
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    while i < len(pattern) and pattern[i] != "]":
        i += 1
    return i + 1 if i < len(pattern) else -1


def _validate(pattern: str) -> None:
    depth = 0
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= len(pattern):
                raise GlobPatternError(pattern, "dangling escape")
            i += 2
            continue
        if ch == "[":
            end = _class_end(pattern, i)
            if end == -1:
                raise GlobPatternError(pattern, "unclosed character class")
            i = end
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                raise GlobPatternError(pattern, "unopened alternate group")
            depth -= 1
        i += 1
    if depth:
        raise GlobPatternError(pattern, "unclosed alternate group")


def _expand_braces(pattern: str) -> List[str]:
    """Expand the first top-level {a,b} group, recursively. Assumes a valid pattern."""
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            i += 2
        elif ch == "[":
            i = _class_end(pattern, i)
        elif ch == "{":
            break
        else:
            i += 1
    else:
        return [pattern]

    start = i
    depth = 0
    parts = []
    last = start + 1
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "[":
            i = _class_end(pattern, i)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                parts.append(pattern[last:i])
                break
        elif ch == "," and depth == 1:
            parts.append(pattern[last:i])
            last = i + 1
        i += 1

    prefix, suffix = pattern[:start], pattern[i + 1 :]  # noqa: E203
    expanded: List[str] = []
    for part in parts:
        expanded.extend(_expand_braces(prefix + part + suffix))
    return expanded


def _escape_for_fnmatch(pattern: str) -> str:
    """Rewrite escapes and [^...] classes into forms fnmatch understands."""
    out = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            escaped = pattern[i + 1]
            # fnmatch has no escape character; a one-member class is literal
            out.append(escaped if escaped in "!^" else f"[{escaped}]")
            i += 2
        elif ch == "[":
            end = _class_end(pattern, i)
            body = pattern[i:end]
            if body.startswith("[^"):
                body = "[!" + body[2:]
            out.append(body)
            i = end
        else:
            out.append(ch)
            i += 1
    return "".join(out)
