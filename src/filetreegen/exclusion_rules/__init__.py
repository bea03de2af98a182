"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules, find_ignore_file, parse_ignore_lines

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "find_ignore_file",
    "parse_ignore_lines",
]
