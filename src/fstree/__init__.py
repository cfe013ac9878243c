"""Directory tree visualization utilities.

This package walks a directory, filters its entries with glob and
.gitignore-style rules, and renders the result as a tree.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fstree")
except PackageNotFoundError:
    __version__ = "unknown"
