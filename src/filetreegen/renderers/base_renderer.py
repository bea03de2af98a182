"""Renderer base class defining the interface for file tree formatting.

This module provides the abstract base class that every output format implements.
Renderers are pure: they only read the already-built tree and never touch the
filesystem, and they accept any valid tree without raising.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from filetreegen.file_tree.tree_node import TreeNode


class TreeRenderer(ABC):
    """Abstract base class for file tree rendering strategies.

    This class implements the Strategy pattern for turning a TreeNode tree into text.
    Line-oriented formats implement stream() and inherit render(), which joins the
    streamed lines; whole-document formats override render() directly.

    Example:
        >>> class NamesRenderer(TreeRenderer):
        ...     @property
        ...     def format_name(self) -> str:
        ...         return "names"
        ...
        ...     def stream(self, root: TreeNode) -> Iterator[str]:
        ...         yield root.name
        ...         for child in root.children:
        ...             yield child.name
        >>> root = TreeNode("proj", is_dir=True)
        >>> _ = TreeNode("a.txt", parent=root)
        >>> NamesRenderer().render(root)
        'proj\\na.txt\\n'
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the format produced by this renderer."""
        pass

    @abstractmethod
    def stream(self, root: TreeNode) -> Iterator[str]:
        """Generate the rendered tree one line at a time.

        Args:
            root: Root node of the tree to render.

        Yields:
            Lines of output without trailing newlines.
        """
        pass

    def render(self, root: TreeNode) -> str:
        """Render the whole tree as a single string.

        Every line, including the last one, is terminated by a newline.

        Args:
            root: Root node of the tree to render.

        Returns:
            The complete rendered tree.
        """
        return "".join(f"{line}\n" for line in self.stream(root))
