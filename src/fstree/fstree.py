"""High-level entry points: build a tree for a configuration and render it.

Example:
    >>> from fstree.config import TreeConfig
    >>> print(render_tree(TreeConfig(root="src", max_depth=1)), end="")  # doctest: +SKIP
    src/
    ├── fstree/
    └── setup.cfg
"""

from typing import Optional, Tuple

from fstree.config import TreeConfig
from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.file_system_tree.tree_builder import TreeBuilder
from fstree.output_strategies import OutputFormat, RenderOptions, get_strategy
from fstree.statistics import Statistics


def build_tree(config: TreeConfig) -> Tuple[FileSystemNode, Statistics]:
    """Build the tree described by ``config``.

    Raises:
        GlobPatternError: If the include or exclude glob is malformed.
        OSError: If the root cannot be read.
    """
    builder = TreeBuilder(config)
    tree = builder.build()
    return tree, builder.get_stats()


def render_tree(
    config: TreeConfig,
    output_format: OutputFormat = OutputFormat.TEXT,
    options: Optional[RenderOptions] = None,
) -> str:
    """Build the tree described by ``config`` and render it in ``output_format``.

    Raises:
        GlobPatternError: If the include or exclude glob is malformed.
        OSError: If the root cannot be read.
    """
    tree, stats = build_tree(config)
    return get_strategy(output_format).render(tree, stats, options or RenderOptions())
