"""Text output strategy drawing the tree with branch characters."""

from typing import Iterator

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.helpers.ansi import ANSI, ansi
from fstree.helpers.bytes import format_size
from fstree.statistics import Statistics
from fstree.types import NodeType

from .base_strategy import OutputStrategy, RenderOptions


class TextOutputStrategy(OutputStrategy):
    """Output strategy that draws the tree like the Unix ``tree`` command.

    The root is printed on its own line without a branch. Every other entry is
    prefixed by the indentation of its ancestors and a branch (``├── `` or, for the
    last entry of a directory, ``└── ``). Directories get a trailing slash, symlinks
    show their target.

    Example:
        >>> from fstree.statistics import Statistics
        >>> root = FileSystemNode("src", fs_path="src", node_type=NodeType.DIRECTORY)
        >>> pkg = FileSystemNode("pkg", fs_path="src/pkg", node_type=NodeType.DIRECTORY, parent=root)
        >>> _ = FileSystemNode("a.py", fs_path="src/pkg/a.py", file_size=10, parent=pkg)
        >>> _ = FileSystemNode("b.py", fs_path="src/b.py", file_size=20, parent=root)
        >>> print(TextOutputStrategy().render(root, Statistics(), RenderOptions()), end="")
        src/
        ├── pkg/
        │   └── a.py
        └── b.py
    """

    def render(self, node: FileSystemNode, stats: Statistics, options: RenderOptions) -> str:
        return "".join(line + "\n" for line in self.stream_lines(node, stats, options))

    def stream_lines(self, node: FileSystemNode, stats: Statistics, options: RenderOptions) -> Iterator[str]:
        """Generate the output one line at a time, without line terminators."""
        yield self._format_line(node, options)

        children = node.children
        for i, child in enumerate(children):
            yield from self._stream_node(child, "", i == len(children) - 1, options)

        if options.summary:
            total = format_size(stats.bytes, options.size_format) if options.size else None
            yield ""
            yield stats.summary(total)

    def _stream_node(self, node: FileSystemNode, prefix: str, is_last: bool, options: RenderOptions) -> Iterator[str]:
        branch = options.last_prefix if is_last else options.prefix
        yield f"{prefix}{branch}{self._format_line(node, options)}"

        # No vertical line below the last child
        child_prefix = prefix + (" " * len(options.child_prefix) if is_last else options.child_prefix)
        children = node.children
        for i, child in enumerate(children):
            yield from self._stream_node(child, child_prefix, i == len(children) - 1, options)

    def _format_line(self, node: FileSystemNode, options: RenderOptions) -> str:
        line = self.display_name(node, options.color)
        if options.size and node.file_size is not None:
            line += f" ({format_size(node.file_size, options.size_format)})"
        return line

    @staticmethod
    def display_name(node: FileSystemNode, color: bool = False) -> str:
        """Return how a node's name is shown, depending on its type."""
        if node.node_type is NodeType.DIRECTORY:
            return ansi(f" {node.name} ", ANSI.BOLD, ANSI.BG_YELLOW) if color else f"{node.name}/"
        if node.node_type is NodeType.SYMLINK:
            text = f"{node.name} -> {node.symlink_target}"
            return ansi(text, ANSI.BRIGHT_CYAN) if color else text
        return ansi(node.name, ANSI.BRIGHT_WHITE) if color else node.name
