"""JSON output strategy for the tree and its statistics."""

import json
from typing import Any, Dict

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.statistics import Statistics
from fstree.types import NodeType

from .base_strategy import OutputStrategy, RenderOptions


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that serializes the tree as a JSON document.

    The document has the following structure:
    {
        "tree": {
            "name": "src",
            "type": "directory",
            "path": "src",
            "children": [
                {"name": "main.py", "type": "file", "path": "src/main.py", "size": 120},
                {"name": "link", "type": "symlink", "path": "src/link", "size": 7, "target": "main.py"}
            ]
        },
        "statistics": {"directories": 1, "files": 2, "bytes": 127}
    }

    Sizes are always raw byte counts. The "statistics" member is only present when
    the summary is requested. Colors and branch prefixes do not apply.

    Example:
        >>> from fstree.statistics import Statistics
        >>> node = FileSystemNode("a.txt", fs_path="a.txt", file_size=3)
        >>> JSONOutputStrategy().node_to_dict(node)
        {'name': 'a.txt', 'type': 'file', 'path': 'a.txt', 'size': 3}
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, node: FileSystemNode, stats: Statistics, options: RenderOptions) -> str:
        document: Dict[str, Any] = {"tree": self.node_to_dict(node)}
        if options.summary:
            document["statistics"] = stats.to_dict()
        return json.dumps(document, indent=self.indent, ensure_ascii=False) + "\n"

    def node_to_dict(self, node: FileSystemNode) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": node.name,
            "type": node.node_type.value,
            "path": node.fs_path.as_posix(),
        }
        if node.file_size is not None:
            data["size"] = node.file_size
        if node.node_type is NodeType.SYMLINK:
            data["target"] = node.symlink_target
        if node.node_type is NodeType.DIRECTORY or node.children:
            data["children"] = [self.node_to_dict(child) for child in node.children]
        return data
