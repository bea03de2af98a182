"""Implementation of exclusion rules using .gitignore pattern syntax."""

import logging
import os
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.pattern import Pattern

from filetreegen.types import PathType

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)

IGNORE_FILE_NAME = ".gitignore"
PATTERN_STYLE = "gitwildmatch"


def parse_ignore_lines(lines: Iterable[str]) -> List[str]:
    """Keep the lines of an ignore file that carry a rule.

    Blank lines and lines starting with ``#`` are dropped; everything else is returned
    unchanged (trailing newlines removed) in its original order.

    Example:
        >>> parse_ignore_lines(["# build output", "", "dist/", "*.log"])
        ['dist/', '*.log']
    """
    rules = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        rules.append(line)
    return rules


def find_ignore_file(start: PathType, file_name: str = IGNORE_FILE_NAME) -> Optional[Path]:
    """Find the nearest readable ignore file at or above a directory.

    The search starts at ``start`` and walks up one parent at a time, stopping below
    the filesystem root, which is not searched. It stops at the first directory holding
    a readable ``file_name``; ignore files further up are never considered.

    Args:
        start: Directory to start the search from.
        file_name: Name of the ignore file. Defaults to ``.gitignore``.

    Returns:
        Path to the ignore file, or None if no ancestor has one.

    Example:
        >>> find_ignore_file("/path/to/project/src")  # doctest: +SKIP
        PosixPath('/path/to/project/.gitignore')
    """
    current = Path(start).resolve()
    for directory in (current, *current.parents):
        if directory == directory.parent:
            break
        candidate = directory / file_name
        if candidate.is_file() and os.access(candidate, os.R_OK):
            return candidate
    return None


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore pattern
    matching rules. It uses the pathspec library to match file paths against patterns in
    the same way that Git does.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Anchored patterns (starting with or containing /)

    Rules are evaluated in the order they were added, and the last matching rule decides,
    so later rules (and negations in particular) override earlier ones. Rules taken from
    the nearest .gitignore come first; patterns added afterwards with add_rule() or
    add_rules() follow them and therefore take precedence.

    Note:
        Paths are matched relative to the root of the tree being built, not relative to
        the directory that contains the .gitignore file. For a tree rooted below the
        directory holding the ignore file, anchored patterns such as ``/build`` are
        therefore interpreted against the tree root.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.
        source (Optional[Path]): The ignore file loaded by load_nearest(), if any.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rules(["*.log", "!keep.log"])
        >>> rules.exclude("app.log")
        True
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally with patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(PATTERN_STYLE, [])
        self.source: Optional[Path] = None

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded patterns.

        Args:
            path: Path relative to the tree root, using forward slashes. Directories
                should be passed with a trailing slash.

        Returns:
            bool: True if the last pattern matching the path is an exclusion. Always
                False when no rules are loaded.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("build/")
            >>> rules.exclude("build/")
            True
            >>> rules.exclude("build")
            False
        """
        if not self.spec.patterns:
            return False
        return bool(self.spec.match_file(path))

    def has_rules(self) -> bool:
        return len(self.spec.patterns) > 0

    def load_nearest(self, start: PathType) -> Optional[Path]:
        """Load rules from the nearest .gitignore at or above ``start``.

        Failing to find or read the file is not an error: the matcher simply keeps the
        rules it already has.

        Args:
            start: Directory the tree is rooted at.

        Returns:
            The ignore file whose rules were loaded, or None.
        """
        ignore_file = find_ignore_file(start)
        if ignore_file is None:
            logger.debug("No %s found at or above %s", IGNORE_FILE_NAME, start)
            return None

        try:
            with open(ignore_file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable ignore file %s: %s", ignore_file, e)
            return None

        rules = parse_ignore_lines(lines)
        self._extend(PathSpec.from_lines(PATTERN_STYLE, rules).patterns)
        self.source = ignore_file
        logger.debug("Loaded %d rule(s) from %s", len(rules), ignore_file)
        return ignore_file

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more explicit files.

        Unlike load_nearest(), a file named here must exist.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                rules = parse_ignore_lines(f.read().splitlines())

            self._extend(PathSpec.from_lines(PATTERN_STYLE, rules).patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern after all existing ones.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "node_modules/",
                "!important.txt"). Blank rules and comments are ignored.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("test.pyc"), rules.exclude("important.pyc")
            (True, False)
        """
        if not parse_ignore_lines([rule]):
            return
        self._extend(PathSpec.from_lines(PATTERN_STYLE, [rule]).patterns)

    def _extend(self, patterns: Iterable[Pattern]) -> None:
        # Rules keep their insertion order; the last matching rule wins
        self.spec = PathSpec([*self.spec.patterns, *patterns])
