"""Construction of the in-memory tree from the filesystem.

This module provides the TreeBuilder class, which walks a directory depth-first,
asks an EntryFilter which children to admit, and produces a FileSystemNode tree
together with the Statistics gathered on the way.
"""

import os
import stat
from pathlib import Path
from typing import List, Optional, Set

from fstree.config import TreeConfig
from fstree.file_system_tree.entry_filter import EntryFilter
from fstree.file_system_tree.file_system_node import UNREADABLE_TARGET, FileSystemNode
from fstree.statistics import Statistics
from fstree.types import NodeType, PathType, SortOrder


class TreeBuilder:
    """Builds a FileSystemNode tree for a configured root.

    Traversal rules:
        - Entry types come from ``lstat``: a symlink is a symlink, whatever it
          points to.
        - Every directory is canonicalized before it is expanded. A directory whose
          canonical path was already expanded during the same build is kept with
          no children and is not counted again.
        - Depth is the number of path components between the root and a directory.
          The root is always expanded; any other directory is expanded only while
          its depth is below ``max_depth``. Directories at the limit are not read.
        - A child that fails to build (vanished entry, permission denied) is left
          out of its parent. Only a failure on the starting path is raised.

    Symbolic Link Behavior:
        By default symlinks are leaves. With ``follow_symlinks`` a symlink to a
        directory stays a SYMLINK node but is expanded and counted like a directory.
        A followed link whose target was already expanded, such as a link back to
        an ancestor, is kept as an empty leaf and counted as a file.

    Attributes:
        config (TreeConfig): Settings for this traversal.
        root (Path): Traversal root that depths are measured from.
        entry_filter (EntryFilter): Decides which children are admitted.
        stats (Statistics): Counters for the most recent build.

    Example:
        >>> from fstree.config import TreeConfig
        >>> builder = TreeBuilder(TreeConfig(root="src", max_depth=2))  # doctest: +SKIP
        >>> tree = builder.build()  # doctest: +SKIP
        >>> str(builder.stats)  # doctest: +SKIP
        '4 directories, 12 files'
    """

    def __init__(self, config: TreeConfig, entry_filter: Optional[EntryFilter] = None) -> None:
        """Initialize a TreeBuilder.

        Args:
            config: Settings for the traversal.
            entry_filter: Filter to use. Built from ``config`` when omitted.

        Raises:
            GlobPatternError: If the configured include or exclude glob is malformed.
        """
        self.config = config
        self.root = Path(config.root)
        self.entry_filter = entry_filter if entry_filter is not None else EntryFilter(config)
        self.stats = Statistics()
        self._visited: Set[Path] = set()

    def build(self, path: Optional[PathType] = None) -> FileSystemNode:
        """Build the tree rooted at ``path``.

        Statistics and the visited set are reset first, so building an unchanged
        directory twice gives identical results.

        Args:
            path: Where to start. Defaults to the configured root.

        Returns:
            The root node of the finished tree.

        Raises:
            OSError: If the starting path cannot be read (e.g. FileNotFoundError,
                PermissionError).
        """
        self.stats = Statistics()
        self._visited = set()
        return self._create_node(Path(path) if path is not None else self.root)

    def get_stats(self) -> Statistics:
        return self.stats

    def _create_node(self, path: Path) -> FileSystemNode:
        """Create the node for ``path`` and, for directories, its subtree."""
        stat_result = path.lstat()
        mode = stat_result.st_mode

        if stat.S_ISDIR(mode):
            node_type = NodeType.DIRECTORY
        elif stat.S_ISLNK(mode):
            node_type = NodeType.SYMLINK
        else:
            node_type = NodeType.FILE

        node = FileSystemNode(self._display_name(path), fs_path=path, node_type=node_type)

        if node_type is NodeType.SYMLINK:
            node.symlink_target = read_symlink_target(path)
            if self.config.follow_symlinks and path.is_dir() and self._expand_directory(node, path):
                return node

        if node_type is NodeType.DIRECTORY:
            self._expand_directory(node, path)
        else:
            node.file_size = stat_result.st_size
            self.stats.add_files(1)
            self.stats.add_byte_size(node.file_size)

        return node

    def _expand_directory(self, node: FileSystemNode, path: Path) -> bool:
        canonical = Path(os.path.realpath(path))
        if canonical in self._visited:
            # Already expanded in this build: symlink loop or repeated path
            return False

        entries: List[os.DirEntry] = []
        if self._within_depth(path):
            entries = self._sorted(self.entry_filter.filter_entries(path))

        self._visited.add(canonical)
        self.stats.add_dirs(1)

        for entry in entries:
            try:
                child = self._create_node(path / entry.name)
            except OSError:
                continue
            child.parent = node
        return True

    def _depth(self, path: Path) -> int:
        try:
            return len(path.relative_to(self.root).parts)
        except ValueError:
            return 0

    def _within_depth(self, path: Path) -> bool:
        depth = self._depth(path)
        return depth == 0 or self.config.max_depth is None or depth < self.config.max_depth

    def _sorted(self, entries: List[os.DirEntry]) -> List[os.DirEntry]:
        if self.config.sort is SortOrder.NAME:
            return sorted(entries, key=lambda entry: entry.name)
        if self.config.sort is SortOrder.DIRS_FIRST:
            return sorted(entries, key=lambda entry: (not _is_dir_entry(entry), entry.name.casefold()))
        return entries

    def _display_name(self, path: Path) -> str:
        if self.config.full_path:
            return os.path.abspath(path)
        return path.name or str(path)


def read_symlink_target(path: PathType) -> str:
    """Return the target of a symbolic link as written in the link, or a placeholder.

    Example:
        >>> read_symlink_target("/nonexistent/link")
        '<unreadable>'
    """
    try:
        return os.readlink(path)
    except OSError:
        return UNREADABLE_TARGET


def _is_dir_entry(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
