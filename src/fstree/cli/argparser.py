"""Command-line argument parsing for fstree.

This module defines the command-line interface for fstree, handling argument
parsing and validation. Options that can also come from the configuration file
default to None (or False for flags) so that the merge step can tell whether
they were given on the command line.
"""

import argparse
from pathlib import Path

from fstree import __version__
from fstree.helpers.bytes import SizeFormat, parse_size_format
from fstree.output_strategies import OutputFormat
from fstree.types import SortOrder


def size_format_type(value: str) -> SizeFormat:
    """argparse type for --size-format."""
    try:
        return parse_size_format(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with fstree's options.
    """
    description = """
    fstree: display a directory as a tree.

    Entries listed in the root's .gitignore (and any extra ignore files) are
    hidden unless --show-all is given; the .git directory is always hidden.
    Include and exclude globs apply to file names only, so directories leading
    to matching files are always shown.

    Settings can also be stored in ~/.config/fstree/config.json using the long
    option names as keys (e.g. {"max-depth": 2, "summary": true}). Command-line
    options take precedence.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      fstree

      # Two levels deep, with sizes in kilobytes and a summary
      fstree -d 2 -s --size-format kb -r src/

      # Only Python files, ignoring test files
      fstree -i "*.py" -e "test_*" .

      # Directories only, including ignored ones
      fstree --directory -a /path/to/project

      # Use an extra ignore file in addition to .gitignore
      fstree --ignore .dockerignore .

      # JSON output written to a file
      fstree --format json -o tree.json .
    """

    parser = argparse.ArgumentParser(
        prog="fstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"fstree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="The directory to display (default: the current directory).",
    )
    parser.add_argument("-f", "--full-path", action="store_true", help="Show the full path of each entry.")
    parser.add_argument("-p", "--prefix", metavar="STR", help='Branch drawn before an entry (default: "├── ").')
    parser.add_argument(
        "-l", "--last-prefix", metavar="STR", help='Branch drawn before the last entry of a directory (default: "└── ").'
    )
    parser.add_argument(
        "-c", "--child-prefix", metavar="STR", help='Indentation below an entry with siblings (default: "│   ").'
    )
    parser.add_argument(
        "-a",
        "--show-all",
        "--all",
        dest="show_all",
        action="store_true",
        help="Show all entries, including those matched by ignore files.",
    )
    parser.add_argument(
        "-i", "--include", "--pattern", dest="include", metavar="GLOB", help="Only show files matching the glob."
    )
    parser.add_argument("-e", "--exclude", metavar="GLOB", help="Hide files matching the glob.")
    parser.add_argument(
        "--ignore",
        "--ignore-file",
        dest="ignore",
        metavar="FILE",
        action="append",
        help="Additional ignore file, relative to the root (can be specified multiple times).",
    )
    parser.add_argument(
        "--directory", "--dir", "--folder", dest="directory", action="store_true", help="Show directories only."
    )
    parser.add_argument(
        "-r", "--summary", "--report", dest="summary", action="store_true", help="Show directory and file counts."
    )
    parser.add_argument(
        "-s", "--size", "--filesize", dest="size", action="store_true", help="Show the size next to each file."
    )
    parser.add_argument(
        "--size-format",
        type=size_format_type,
        metavar="UNIT",
        help="Unit for sizes: b, kb, mb, gb, tb, pb, eb or human (default: b).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        "--depth",
        "--level",
        dest="max_depth",
        type=int,
        metavar="N",
        help="Do not expand directories deeper than N levels below the root.",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--sort",
        choices=[order.value for order in SortOrder],
        help="Order of entries within a directory (default: none, the filesystem's order).",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help=(
            "Expand symbolic links to directories. Loops are shown once. Without this option a root "
            "that is itself a link is shown as a link and not expanded."
        ),
    )
    parser.add_argument("--no-color", "--plain", dest="no_color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument(
        "--no-config", "--nocfg", dest="no_config", action="store_true", help="Do not load the configuration file."
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < 0:
        raise ValueError("--max-depth must not be negative")
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"--output '{args.output}' is a directory")
