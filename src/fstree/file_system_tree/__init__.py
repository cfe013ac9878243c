"""File system tree construction with configurable admission rules.

This package provides the node type, the entry filter and the builder that turn a
directory on disk into an in-memory tree plus traversal statistics.
"""

from .entry_filter import EntryFilter
from .file_system_node import FileSystemNode
from .tree_builder import TreeBuilder

__all__ = ["EntryFilter", "FileSystemNode", "TreeBuilder"]
