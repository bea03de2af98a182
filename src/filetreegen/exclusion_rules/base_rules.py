from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Union

from filetreegen.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    The tree builder only depends on this contract: it asks, for every directory entry,
    whether the entry's path relative to the tree root is excluded. Implementations decide
    how rules are obtained (ignore files, explicit patterns) and how they are matched.

    Paths passed to exclude() always use forward slashes, and directory paths carry a
    trailing slash so that directory-only rules can tell them apart from files.

    Example:
        >>> from filetreegen.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('test.pyc')
        True
        >>> rules.exclude('test.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): Path relative to the root of the tree being built. Directories
                are passed with a trailing slash (e.g. ``"node_modules/"``).

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """Return True if at least one rule has been loaded or added."""
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file-based loading use this default implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def add_rules(self, rules: Iterable[str]) -> None:
        """
        Add several exclusion rules, preserving their order.

        Args:
            rules: Rules to append after any existing ones.
        """
        for rule in rules:
            self.add_rule(rule)
