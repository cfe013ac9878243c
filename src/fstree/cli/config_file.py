"""Configuration file loading and merging.

The configuration file lives at ``~/.config/fstree/config.json`` on every platform.
It holds a JSON object whose keys are the long option names, for example::

    {
        "max-depth": 3,
        "summary": true,
        "size-format": "kb",
        "ignore": [".dockerignore"]
    }

Unknown keys are ignored. Command-line options take precedence over the file,
which takes precedence over the built-in defaults; boolean flags are enabled if
either source enables them.
"""

import argparse
import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from fstree.config import TreeConfig
from fstree.exceptions import ConfigError
from fstree.helpers.bytes import SizeFormat, parse_size_format
from fstree.output_strategies import OutputFormat, RenderOptions
from fstree.types import PathType, SortOrder


@dataclass(frozen=True)
class FileConfig:
    """Settings read from the configuration file. None means "not set"."""

    full_path: Optional[bool] = None
    prefix: Optional[str] = None
    last_prefix: Optional[str] = None
    child_prefix: Optional[str] = None
    show_all: Optional[bool] = None
    include: Optional[str] = None
    exclude: Optional[str] = None
    ignore: Optional[Tuple[str, ...]] = None
    directory: Optional[bool] = None
    summary: Optional[bool] = None
    size: Optional[bool] = None
    size_format: Optional[SizeFormat] = None
    max_depth: Optional[int] = None
    format: Optional[OutputFormat] = None
    sort: Optional[SortOrder] = None
    follow_symlinks: Optional[bool] = None
    no_color: Optional[bool] = None


_BOOL_KEYS = ("full_path", "show_all", "directory", "summary", "size", "follow_symlinks", "no_color")
_STR_KEYS = ("prefix", "last_prefix", "child_prefix", "include", "exclude")


def get_config_path(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Return the path of the configuration file, or None if there is no home directory.

    Uses USERPROFILE on Windows and HOME elsewhere.
    """
    environ = os.environ if environ is None else environ
    home = environ.get("USERPROFILE") if os.name == "nt" else environ.get("HOME")
    if not home:
        return None
    return Path(home) / ".config" / "fstree" / "config.json"


def load_file_config(path: Optional[PathType] = None) -> FileConfig:
    """Load the configuration file.

    A missing, unreadable or blank file yields an empty FileConfig.

    Args:
        path: File to load. Defaults to get_config_path().

    Returns:
        The parsed settings.

    Raises:
        ConfigError: If the file holds invalid JSON or values of the wrong type.
    """
    config_path = Path(path) if path is not None else get_config_path()
    if config_path is None:
        return FileConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return FileConfig()

    if not content.strip():
        return FileConfig()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(str(e), str(config_path))

    try:
        return parse_file_config(data)
    except ConfigError as e:
        raise ConfigError(str(e), str(config_path))


def parse_file_config(data: Any) -> FileConfig:
    """Convert decoded JSON into a FileConfig.

    Raises:
        ConfigError: If ``data`` is not an object or a value has the wrong type.

    Example:
        >>> parse_file_config({"max-depth": 2, "summary": True}).max_depth
        2
    """
    if not isinstance(data, dict):
        raise ConfigError("expected a JSON object at the top level")

    known = {f.name for f in fields(FileConfig)}
    values: Dict[str, Any] = {}

    for raw_key, value in data.items():
        key = raw_key.replace("-", "_")
        if key not in known or value is None:
            continue
        values[key] = _convert(raw_key, key, value)

    return FileConfig(**values)


def _convert(raw_key: str, key: str, value: Any) -> Any:
    if key in _BOOL_KEYS:
        if not isinstance(value, bool):
            raise ConfigError(f"'{raw_key}' must be true or false")
        return value
    if key in _STR_KEYS:
        if not isinstance(value, str):
            raise ConfigError(f"'{raw_key}' must be a string")
        return value
    if key == "ignore":
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"'{raw_key}' must be a list of strings")
        return tuple(value)
    if key == "max_depth":
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"'{raw_key}' must be a non-negative integer")
        return value

    if not isinstance(value, str):
        raise ConfigError(f"'{raw_key}' must be a string")
    try:
        if key == "size_format":
            return parse_size_format(value)
        if key == "format":
            return OutputFormat(value.lower())
        return SortOrder(value.lower())
    except ValueError as e:
        raise ConfigError(f"invalid value for '{raw_key}': {e}")


def merge_configs(
    file: FileConfig, args: argparse.Namespace, color: bool = True
) -> Tuple[TreeConfig, RenderOptions, OutputFormat]:
    """Merge the configuration file with the parsed command line.

    CLI > file > default for valued options; flags are OR-ed.

    Args:
        file: Settings from the configuration file.
        args: Parsed command-line arguments.
        color: Whether color is allowed by the environment (NO_COLOR, TTY, output
            file). Computed once by the caller.

    Returns:
        The tree configuration, the render options and the output format.
    """

    def pick(name: str, default: Any) -> Any:
        cli_value = getattr(args, name, None)
        if cli_value is not None:
            return cli_value
        file_value = getattr(file, name)
        return file_value if file_value is not None else default

    def flag(name: str) -> bool:
        return bool(getattr(args, name, False)) or bool(getattr(file, name))

    ignore = tuple(args.ignore) if args.ignore else (file.ignore or ())
    sort = pick("sort", SortOrder.NONE)
    output_format = pick("format", OutputFormat.TEXT)

    tree_config = TreeConfig(
        root=args.root if args.root is not None else Path("."),
        full_path=flag("full_path"),
        show_all=flag("show_all"),
        include=pick("include", None),
        exclude=pick("exclude", None),
        ignore=ignore,
        directory=flag("directory"),
        max_depth=pick("max_depth", None),
        follow_symlinks=flag("follow_symlinks"),
        sort=SortOrder(sort),
    )

    render_options = RenderOptions(
        prefix=pick("prefix", "├── "),
        last_prefix=pick("last_prefix", "└── "),
        child_prefix=pick("child_prefix", "│   "),
        size=flag("size"),
        size_format=pick("size_format", SizeFormat.BYTES),
        summary=flag("summary"),
        color=color and not flag("no_color"),
    )

    return tree_config, render_options, OutputFormat(output_format)
