"""Resolved configuration consumed by the tree construction engine."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from fstree.types import SortOrder


@dataclass(frozen=True)
class TreeConfig:
    """Settings that decide which entries end up in the tree.

    A TreeConfig is produced once by the CLI (command line merged with the config
    file) and is never modified afterwards. The engine reads nothing else: no
    environment variables, no terminal detection.

    Attributes:
        root: Directory (or file) the traversal starts from.
        full_path: Use the absolute path instead of the base name as node name.
        show_all: Disable the ignore-rule gate (.gitignore, extra ignore files, .git).
        include: Glob that non-directory entries must match to be listed.
        exclude: Glob that non-directory entries must not match to be listed.
        ignore: Extra ignore-file names, relative to the root.
        directory: List directories only.
        max_depth: Depth limit for expansion, or None for no limit.
        follow_symlinks: Expand symlinks that point to directories.
        sort: Order of children within a directory.
    """

    root: Path = Path(".")
    full_path: bool = False
    show_all: bool = False
    include: Optional[str] = None
    exclude: Optional[str] = None
    ignore: Tuple[str, ...] = field(default_factory=tuple)
    directory: bool = False
    max_depth: Optional[int] = None
    follow_symlinks: bool = False
    sort: SortOrder = SortOrder.NONE
