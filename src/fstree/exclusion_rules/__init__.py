"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules, build_ignore_rules
from .glob_rules import GlobMatcher, compile_glob

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "GlobMatcher",
    "build_ignore_rules",
    "compile_glob",
]
