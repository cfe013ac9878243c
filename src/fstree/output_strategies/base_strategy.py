"""Output strategy base class defining the interface for tree rendering.

This module provides the abstract base class that every output format implements,
and the RenderOptions that carry the presentation settings from the CLI.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.helpers.bytes import SizeFormat
from fstree.statistics import Statistics


@dataclass(frozen=True)
class RenderOptions:
    """Presentation settings shared by all output strategies.

    Attributes:
        prefix: Branch drawn before an entry that has following siblings.
        last_prefix: Branch drawn before the last entry of a directory.
        child_prefix: Indentation below an entry that has following siblings.
        size: Annotate non-directories with their size.
        size_format: Unit used for size annotations.
        summary: Append the directory and file counts.
        color: Decorate names with ANSI colors (text output only).
    """

    prefix: str = "├── "
    last_prefix: str = "└── "
    child_prefix: str = "│   "
    size: bool = False
    size_format: SizeFormat = SizeFormat.BYTES
    summary: bool = False
    color: bool = False


class OutputStrategy(ABC):
    """Abstract base class for rendering a finished tree.

    This class implements the Strategy pattern: each output format is one concrete
    subclass, and the CLI picks one with get_strategy(). Strategies only read the
    tree and statistics; they never touch the filesystem.

    Example:
        >>> class NamesStrategy(OutputStrategy):
        ...     def render(self, node, stats, options):
        ...         return "\\n".join(n.name for n in node.descendants) + "\\n"
    """

    @abstractmethod
    def render(self, node: FileSystemNode, stats: Statistics, options: RenderOptions) -> str:
        """Render the tree rooted at ``node``.

        Args:
            node: Root of the finished tree.
            stats: Statistics gathered while building the tree.
            options: Presentation settings.

        Returns:
            The complete output, ending with a newline.
        """
        pass
