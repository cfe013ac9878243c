"""XML output strategy for the tree and its statistics."""

from typing import Iterator, List, Tuple
from xml.sax.saxutils import escape as xml_escape

from fstree.file_system_tree.file_system_node import FileSystemNode
from fstree.statistics import Statistics
from fstree.types import NodeType

from .base_strategy import OutputStrategy, RenderOptions

_ELEMENT_NAMES = {
    NodeType.DIRECTORY: "directory",
    NodeType.FILE: "file",
    NodeType.SYMLINK: "symlink",
}


class XMLOutputStrategy(OutputStrategy):
    """Output strategy that renders the tree as nested XML elements.

    Structure:
    <tree>
      <directory name="src" path="src">
        <file name="main.py" path="src/main.py" size="120" />
        <symlink name="link" path="src/link" size="7" target="main.py" />
      </directory>
      <statistics directories="1" files="2" bytes="127" />
    </tree>

    Attribute values are escaped using xml.sax.saxutils.escape with the quote
    entities added. The statistics element is only written when the summary is
    requested.

    Example:
        >>> from fstree.statistics import Statistics
        >>> node = FileSystemNode('a "b".txt', fs_path="a.txt", file_size=3)
        >>> print(XMLOutputStrategy().render(node, Statistics(), RenderOptions()), end="")
        <?xml version="1.0" encoding="UTF-8"?>
        <tree>
          <file name="a &quot;b&quot;.txt" path="a.txt" size="3" />
        </tree>
    """

    def __init__(self) -> None:
        # Define XML entities mapping for proper escaping
        self._xml_entities = {
            '"': "&quot;",
            "'": "&apos;",
        }

    def render(self, node: FileSystemNode, stats: Statistics, options: RenderOptions) -> str:
        lines = ['<?xml version="1.0" encoding="UTF-8"?>', "<tree>"]
        lines.extend(self._stream_node(node, "  "))
        if options.summary:
            counts = [(key, str(value)) for key, value in stats.to_dict().items()]
            lines.append(f"  <statistics{self._attributes(counts)} />")
        lines.append("</tree>")
        return "\n".join(lines) + "\n"

    def _stream_node(self, node: FileSystemNode, indent: str) -> Iterator[str]:
        element = _ELEMENT_NAMES[node.node_type]
        attributes = [("name", node.name), ("path", node.fs_path.as_posix())]
        if node.file_size is not None:
            attributes.append(("size", str(node.file_size)))
        if node.node_type is NodeType.SYMLINK:
            attributes.append(("target", node.symlink_target or ""))

        if not node.children:
            yield f"{indent}<{element}{self._attributes(attributes)} />"
            return

        yield f"{indent}<{element}{self._attributes(attributes)}>"
        for child in node.children:
            yield from self._stream_node(child, indent + "  ")
        yield f"{indent}</{element}>"

    def _attributes(self, attributes: List[Tuple[str, str]]) -> str:
        return "".join(f' {key}="{xml_escape(value, self._xml_entities)}"' for key, value in attributes)
