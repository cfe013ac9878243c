"""Admission of directory entries into the tree."""

import os
from pathlib import Path
from typing import List, Optional

from fstree.config import TreeConfig
from fstree.exclusion_rules.base_rules import BaseExclusionRules
from fstree.exclusion_rules.git_rules import build_ignore_rules
from fstree.exclusion_rules.glob_rules import GlobMatcher, compile_glob
from fstree.types import PathType


class EntryFilter:
    """Decides which directory entries appear in the tree.

    The filter is the single place where the configured rules are combined. An
    entry is admitted only if it passes every gate, checked in this order:

    1. Type gate: with directory-only mode, non-directories are rejected.
    2. Include gate: non-directories whose name does not match the include glob
       are rejected.
    3. Exclude gate: non-directories whose name matches the exclude glob are
       rejected.
    4. Ignore gate: unless show-all is set, entries matched by the ignore rules
       (``.git``, ``.gitignore``, extra ignore files) are rejected.

    Directories are exempt from the glob gates so that the path to a matching
    file deep in the tree is never cut off. An entry whose type cannot be read
    is always rejected.

    The filter is immutable once constructed.

    Attributes:
        root (Path): Traversal root that relative paths are computed against.
        only_directories (bool): Directory-only mode.
        show_all (bool): Whether the ignore gate is disabled.
        include_pattern (Optional[GlobMatcher]): Compiled include glob.
        exclude_pattern (Optional[GlobMatcher]): Compiled exclude glob.
        ignore_rules (BaseExclusionRules): Compiled ignore rules.

    Raises:
        GlobPatternError: If the include or exclude glob is malformed.
    """

    def __init__(self, config: TreeConfig, ignore_rules: Optional[BaseExclusionRules] = None) -> None:
        self.root = Path(config.root)
        self.only_directories = config.directory
        self.show_all = config.show_all
        self.include_pattern: Optional[GlobMatcher] = compile_glob(config.include)
        self.exclude_pattern: Optional[GlobMatcher] = compile_glob(config.exclude)
        self.ignore_rules = ignore_rules if ignore_rules is not None else build_ignore_rules(self.root, config.ignore)

    def filter_entries(self, path: PathType) -> List[os.DirEntry]:
        """List the admitted entries of a directory.

        The directory is read once. Entries keep the order of the directory
        listing; no sorting is applied here.

        Args:
            path: Directory to list.

        Returns:
            The entries that pass should_include().

        Raises:
            OSError: If the directory cannot be opened.
        """
        with os.scandir(path) as entries:
            return [entry for entry in entries if self.should_include(entry)]

    def should_include(self, entry: os.DirEntry) -> bool:
        """Check a single directory entry against all gates."""
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            return False

        if self.only_directories and not is_dir:
            return False

        if self.include_pattern is not None and not is_dir and not self.include_pattern.is_match(entry.name):
            return False

        if self.exclude_pattern is not None and not is_dir and self.exclude_pattern.is_match(entry.name):
            return False

        if not self.show_all:
            relative_path = self._relative_path(entry.path)
            if relative_path is not None and self.ignore_rules.matched(relative_path, is_dir):
                return False

        return True

    def _relative_path(self, path: PathType) -> Optional[str]:
        """Return ``path`` relative to the root with forward slashes, or None if it is outside."""
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return None
