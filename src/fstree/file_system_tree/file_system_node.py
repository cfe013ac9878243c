"""Node representation for file system elements in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node

from fstree.types import NodeType, PathType

# Shown in place of a symlink target that cannot be read
UNREADABLE_TARGET = "<unreadable>"


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file, directory or symlink in the tree.

    Extends anytree.Node with the filesystem attributes the renderers need.
    anytree already defines ``path`` and ``size`` on its nodes (the node chain
    from the root and the subtree size), so the filesystem path and the byte
    length are stored as ``fs_path`` and ``file_size``.

    Attributes:
        name (str): Display name, the base name or the absolute path.
        fs_path (Path): The filesystem path this node denotes.
        node_type (NodeType): File, directory or symlink, taken from lstat.
        file_size (Optional[int]): Byte length for non-directories, None for directories.
        symlink_target (Optional[str]): Link target for symlinks, or "<unreadable>".
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", fs_path="root", node_type=NodeType.DIRECTORY)
        >>> child = FileSystemNode("a.txt", fs_path="root/a.txt", file_size=3, parent=root)
        >>> root.is_dir, child.is_dir
        (True, False)
        >>> [c.name for c in root.children]
        ['a.txt']
    """

    def __init__(
        self,
        name: str,
        fs_path: PathType,
        node_type: NodeType = NodeType.FILE,
        file_size: Optional[int] = None,
        symlink_target: Optional[str] = None,
        parent: Optional["FileSystemNode"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The display name of the entry.
            fs_path: The path of the entry, as supplied or descended.
            node_type: Type of the entry. Defaults to NodeType.FILE.
            file_size: Byte length, None for directories.
            symlink_target: Target of a symbolic link, for display.
            parent: The parent node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.fs_path = Path(fs_path)
        self.node_type = node_type
        self.file_size = file_size
        self.symlink_target = symlink_target

    @property
    def is_dir(self) -> bool:
        return self.node_type is NodeType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.node_type is NodeType.SYMLINK
