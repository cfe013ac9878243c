from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeType(Enum):
    """Enumeration of node types produced during traversal.

    The type is always taken from the entry itself, never from the target of a
    symbolic link.

    Attributes:
        FILE: Regular file (or anything that is neither a directory nor a symlink)
        DIRECTORY: Directory
        SYMLINK: Symbolic link
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class SortOrder(str, Enum):
    """Order in which the children of a directory are listed.

    Values:
        NONE: Keep the order returned by the directory listing (default)
        NAME: Sort by name, case-sensitive
        DIRS_FIRST: Directories first, then by case-insensitive name
    """

    NONE = "none"
    NAME = "name"
    DIRS_FIRST = "dirs-first"
