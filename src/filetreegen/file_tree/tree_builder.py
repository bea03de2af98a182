"""Directory walk producing a filtered, sorted TreeNode tree.

This module provides the TreeBuilder class, which expands a root directory
depth-first, skips entries matched by exclusion rules, and drops directories
that end up with nothing in them.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from filetreegen.config import UNLIMITED_DEPTH, TreeOptions
from filetreegen.exceptions import DirectoryReadError
from filetreegen.exclusion_rules.base_rules import BaseExclusionRules
from filetreegen.exclusion_rules.git_rules import GitIgnoreExclusionRules
from filetreegen.file_tree.tree_node import TreeNode, sort_key
from filetreegen.types import PathType

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds a tree representation of a directory with exclusion rules applied.

    Every entry is checked against the exclusion rules using its path relative to the
    tree root (directories with a trailing slash). Excluded entries are skipped together
    with everything below them.

    Directories are expanded before it is decided whether to keep them: a directory
    that is empty on disk, whose entries were all excluded, or which lies at the depth
    limit ends up without children and is dropped from its parent. The root is always
    kept, even when empty.

    Symbolic links are never followed; they appear as files.

    Error Handling:
        A directory that cannot be listed aborts the whole build with a
        DirectoryReadError. No partial tree is returned.

    Attributes:
        options (TreeOptions): Options for the build.
        exclusion_rules (Optional[BaseExclusionRules]): Rules used to skip entries.
            When not given, they are derived from the options on each build.

    Example:
        >>> builder = TreeBuilder(TreeOptions(max_depth=2))  # doctest: +SKIP
        >>> root = builder.build("src")  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['filetreegen']
    """

    def __init__(
        self,
        options: Optional[TreeOptions] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a TreeBuilder.

        Args:
            options: Options for the build. Defaults to TreeOptions().
            exclusion_rules: Prepared exclusion rules. When given, they are used as-is
                and the gitignore/pattern options are not consulted.
        """
        self.options = options if options is not None else TreeOptions()
        self.exclusion_rules = exclusion_rules
        self._rules: Optional[BaseExclusionRules] = None

    def create_exclusion_rules(self, root_path: PathType) -> Optional[BaseExclusionRules]:
        """Create the exclusion rules for a build rooted at ``root_path``.

        Rules from the nearest .gitignore (when enabled) come first, followed by the
        configured exclude patterns.

        Returns:
            The rules, or None when there is nothing to exclude.
        """
        if not self.options.needs_matcher:
            return None

        rules = GitIgnoreExclusionRules()
        if self.options.use_gitignore:
            rules.load_nearest(root_path)
        rules.add_rules(self.options.exclude_patterns)
        return rules if rules.has_rules() else None

    def build(self, root_path: PathType) -> TreeNode:
        """Build the tree for a directory.

        Args:
            root_path: Directory to build the tree for.

        Returns:
            The root node. Its name is the base name of the resolved directory.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            DirectoryReadError: If any directory in the subtree cannot be listed.
        """
        path = Path(root_path)
        if not path.exists():
            raise FileNotFoundError(f"Root path does not exist: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {path}")

        resolved = path.resolve()
        if self.exclusion_rules is not None:
            self._rules = self.exclusion_rules
        else:
            self._rules = self.create_exclusion_rules(resolved)

        root = TreeNode(resolved.name or str(resolved), abs_path=str(resolved), is_dir=True)
        logger.debug("Building tree for %s (max depth %s)", resolved, self.options.max_depth)
        self._expand(root, resolved, 0)
        return root

    def _expand(self, node: TreeNode, root_path: Path, depth: int) -> None:
        """Attach the filtered children of a directory node, recursively."""
        max_depth = self.options.max_depth
        if max_depth != UNLIMITED_DEPTH and depth >= max_depth:
            return

        children: List[TreeNode] = []
        for child in self._list_entries(node.abs_path):
            relative_path = _relative_path(child.abs_path, root_path, child.is_dir)
            if self._rules is not None and self._rules.exclude(relative_path):
                logger.debug("Excluded %s", relative_path)
                continue

            if child.is_dir:
                self._expand(child, root_path, depth + 1)
                if child.is_empty_dir:
                    logger.debug("Pruned empty directory %s", relative_path)
                    continue
            children.append(child)

        node.children = children

    def _list_entries(self, directory: str) -> List[TreeNode]:
        """List a directory's entries, sorted directories first and then by name.

        The returned nodes are detached and have no children yet.
        """
        try:
            with os.scandir(directory) as it:
                entries = [
                    TreeNode(
                        entry.name,
                        abs_path=os.path.join(directory, entry.name),
                        is_dir=entry.is_dir(follow_symlinks=False),
                    )
                    for entry in it
                ]
        except OSError as e:
            raise DirectoryReadError(directory, e.strerror or str(e)) from e
        return sorted(entries, key=sort_key)


def _relative_path(path: str, root_path: Path, is_dir: bool) -> str:
    """Path of an entry relative to the tree root, with a trailing slash for directories."""
    relative = Path(path).relative_to(root_path).as_posix()
    return relative + "/" if is_dir else relative


def build_tree(root_path: PathType, options: Optional[TreeOptions] = None) -> TreeNode:
    """Build the tree for ``root_path`` with a fresh TreeBuilder."""
    return TreeBuilder(options).build(root_path)
