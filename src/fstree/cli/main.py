"""Command-line interface for fstree.

This module ties the pieces together: it parses the command line, loads and
merges the configuration file, builds the tree and writes the rendered output.

Exit Codes:
    0: Successful completion
    1: Runtime error (missing root, invalid glob, invalid option value)
    2: Command-line syntax error
    126: Permission denied on the root
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Tree of a directory, two levels deep, with a summary
    $ fstree -d 2 -r /path/to/dir

    # Display version information
    $ fstree --version
"""

import os
import sys
from typing import Mapping, Optional, Sequence

from fstree.cli.argparser import create_parser, validate_args
from fstree.cli.config_file import FileConfig, load_file_config, merge_configs
from fstree.cli.safe_writer import SafeWriter
from fstree.cli.signal_handler import setup_signal_handling, signal_handler
from fstree.exceptions import ConfigError
from fstree.fstree import render_tree


def color_allowed(to_file: bool, environ: Optional[Mapping[str, str]] = None, isatty: Optional[bool] = None) -> bool:
    """Decide once whether colored output is possible.

    Color is off when writing to a file, when NO_COLOR is set (to any value), or
    when stdout is not a terminal.
    """
    environ = os.environ if environ is None else environ
    if to_file or "NO_COLOR" in environ:
        return False
    if isatty is None:
        isatty = sys.stdout.isatty()
    return isatty


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the fstree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)

        file_config = FileConfig()
        if not args.no_config:
            try:
                file_config = load_file_config()
            except ConfigError as e:
                print(f"Warning: Failed to parse config file at '{e.path}': {e}", file=sys.stderr)

        tree_config, render_options, output_format = merge_configs(
            file_config, args, color=color_allowed(to_file=args.output is not None)
        )

        output = render_tree(tree_config, output_format, render_options)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write(output)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
