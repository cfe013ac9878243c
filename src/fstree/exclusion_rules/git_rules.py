"""Ignore rules read from .gitignore-style files."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from fstree.types import PathType

from .base_rules import BaseExclusionRules

# Rule that is always in effect, whatever the ignore files say
GIT_DIRECTORY_RULE = ".git"


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Ignore-rule set with Git's matching semantics, backed by pathspec.

    Every line of every loaded file, and every rule added by hand, is kept in one
    ordered list that is compiled into a single GitIgnoreSpec. Order matters: the
    last matching line wins, so a later ``!pattern`` re-admits what an earlier
    line hid. Anchored patterns (``/build``), directory patterns (``logs/``),
    ``**`` and comments behave as they do in Git.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.matched("node_modules", is_dir=True)
        True
        >>> rules.matched("node_modules", is_dir=False)
        False

    Note:
        Paths should use forward slashes (/) as separators, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Create a rule set, optionally preloaded from files.

        Args:
            rules_files: One ignore file or a sequence of them, loaded in order.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            ValueError: If a rules file contains a malformed pattern.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded patterns.

        Args:
            path: The path to check, relative to the root. A trailing slash marks a
                directory.

        Returns:
            bool: True if the last pattern matching the path is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.log")
            >>> rules.add_rule("!keep.log")
            >>> rules.exclude("logs/debug.log"), rules.exclude("keep.log")
            (True, False)
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the lines of one or more ignore files, in the given order.

        Nothing is changed if any file is missing or a pattern fails to compile.

        Args:
            rules_files: One ignore file or a sequence of them.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            ValueError: If a file cannot be decoded or holds a malformed pattern.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        lines = list(self._lines)
        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Ignore file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())

        self._compile(lines)

    def add_rule(self, rule: str) -> None:
        """Append one pattern line.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "build/", "!keep.txt").

        Raises:
            ValueError: If the pattern is malformed.
        """
        self._compile(self._lines + [rule])

    def _compile(self, lines: List[str]) -> None:
        # Compile first so a bad pattern leaves the previous state untouched
        self.spec = GitIgnoreSpec.from_lines(lines)
        self._lines = lines


def build_ignore_rules(root: PathType, ignore_files: Sequence[str] = ()) -> GitIgnoreExclusionRules:
    """Build the ignore-rule set applied under a traversal root.

    The set always excludes ``.git``, then adds ``<root>/.gitignore`` and each of
    ``ignore_files`` (names relative to the root) that exist, in that order.
    Files that do not exist are skipped.

    Ignoring is best effort: if any file cannot be read or holds a malformed
    pattern, an empty rule set is returned instead and nothing is ignored.

    Args:
        root: Traversal root.
        ignore_files: Extra ignore-file names, relative to the root.

    Returns:
        GitIgnoreExclusionRules: The compiled rule set.

    Example:
        >>> rules = build_ignore_rules("/nonexistent/project")
        >>> rules.matched(".git", is_dir=True)
        True
        >>> rules.matched("src", is_dir=True)
        False
    """
    root_path = Path(root)
    candidates = [root_path / ".gitignore"] + [root_path / name for name in ignore_files]

    try:
        rules = GitIgnoreExclusionRules()
        rules.add_rule(GIT_DIRECTORY_RULE)
        existing = [path for path in candidates if path.is_file()]
        if existing:
            rules.load_rules(existing)
    except (OSError, ValueError):
        return GitIgnoreExclusionRules()

    return rules
