"""Directory tree generation and formatting.

This module ties the pieces together: a FileTreeGenerator holds one set of
TreeOptions, builds the filtered tree for a directory and formats it in the
configured output format.
"""

import logging
from typing import Optional, Union

from filetreegen.config import TreeOptions, parse_format
from filetreegen.file_tree.tree_builder import TreeBuilder
from filetreegen.file_tree.tree_node import TreeNode
from filetreegen.renderers import get_renderer
from filetreegen.types import PathType, TreeFormat

logger = logging.getLogger(__name__)


class FileTreeGenerator:
    """Generates formatted file trees for directories.

    Each call to generate_tree() performs an independent build with its own exclusion
    rules, so a generator can be reused for several directories.

    Attributes:
        options (TreeOptions): Options applied to every build and to formatting.

    Example:
        >>> generator = FileTreeGenerator(TreeOptions(format="markdown"))  # doctest: +SKIP
        >>> root = generator.generate_tree("proj")  # doctest: +SKIP
        >>> print(generator.format_tree(root))  # doctest: +SKIP
        # File Tree: proj
        <BLANKLINE>
        - 📄 readme.md

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        DirectoryReadError: If a directory below the root cannot be listed.
    """

    def __init__(self, options: Optional[TreeOptions] = None) -> None:
        self.options = options if options is not None else TreeOptions()

    def generate_tree(self, directory: PathType) -> TreeNode:
        """Build the filtered tree for ``directory``."""
        return TreeBuilder(self.options).build(directory)

    def format_tree(self, root: TreeNode, output_format: Optional[Union[str, TreeFormat]] = None) -> str:
        """Format a tree, using the configured format unless one is given."""
        fmt = parse_format(output_format) if output_format is not None else self.options.format
        return get_renderer(fmt).render(root)

    def generate(self, directory: PathType) -> str:
        """Build and format the tree for ``directory`` in one step."""
        root = self.generate_tree(directory)
        logger.info("Generated tree for %s with %d entries", root.abs_path, len(root.descendants))
        return self.format_tree(root)


def generate_file_tree(directory: PathType, options: Optional[TreeOptions] = None) -> str:
    """Build and format the tree for ``directory``.

    Args:
        directory: Directory to generate the tree for.
        options: Build and format options. Defaults to TreeOptions().

    Returns:
        The rendered tree.
    """
    return FileTreeGenerator(options).generate(directory)
