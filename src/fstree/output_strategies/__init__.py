"""Output strategies for rendering the finished tree."""

from enum import Enum

from .base_strategy import OutputStrategy, RenderOptions
from .json_strategy import JSONOutputStrategy
from .text_strategy import TextOutputStrategy
from .xml_strategy import XMLOutputStrategy


class OutputFormat(str, Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"
    XML = "xml"


def get_strategy(output_format: OutputFormat) -> OutputStrategy:
    """Return the strategy that renders ``output_format``.

    Raises:
        ValueError: If the format is not supported.

    Example:
        >>> type(get_strategy(OutputFormat("json"))).__name__
        'JSONOutputStrategy'
    """
    if output_format is OutputFormat.TEXT:
        return TextOutputStrategy()
    if output_format is OutputFormat.JSON:
        return JSONOutputStrategy()
    if output_format is OutputFormat.XML:
        return XMLOutputStrategy()
    raise ValueError(f"Unknown output format: {output_format}")


__all__ = [
    "JSONOutputStrategy",
    "OutputFormat",
    "OutputStrategy",
    "RenderOptions",
    "TextOutputStrategy",
    "XMLOutputStrategy",
    "get_strategy",
]
