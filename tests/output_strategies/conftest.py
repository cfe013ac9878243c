"""Fixtures shared by the output strategy tests."""

import pytest

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.statistics import Statistics
from fstree.types import NodeType


@pytest.fixture
def sample_tree():
    """project/ with a.txt, sub/{b.py, c.log} and a symlink, in that order."""
    root = FileSystemNode("project", fs_path="project", node_type=NodeType.DIRECTORY)
    FileSystemNode("a.txt", fs_path="project/a.txt", file_size=10, parent=root)
    sub = FileSystemNode("sub", fs_path="project/sub", node_type=NodeType.DIRECTORY, parent=root)
    FileSystemNode("b.py", fs_path="project/sub/b.py", file_size=20, parent=sub)
    FileSystemNode("c.log", fs_path="project/sub/c.log", file_size=30, parent=sub)
    FileSystemNode(
        "link",
        fs_path="project/link",
        node_type=NodeType.SYMLINK,
        file_size=5,
        symlink_target="a.txt",
        parent=root,
    )
    return root


@pytest.fixture
def sample_stats():
    stats = Statistics()
    stats.add_dirs(2)
    stats.add_files(4)
    stats.add_byte_size(65)
    return stats
