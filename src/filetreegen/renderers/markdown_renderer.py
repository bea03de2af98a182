"""Markdown outline rendering."""

from typing import Iterator

from anytree import PreOrderIter

from filetreegen.file_tree.tree_node import TreeNode

from .base_renderer import TreeRenderer

DIRECTORY_MARKER = "📁"
FILE_MARKER = "📄"


class MarkdownTreeRenderer(TreeRenderer):
    """Renderer producing a nested Markdown bullet list.

    The root becomes a level-1 heading followed by a blank line. Each descendant is one
    bullet, indented two spaces per level below the root's direct children and marked
    with a folder or file glyph, in depth-first order.

    Example:
        >>> root = TreeNode("proj", is_dir=True)
        >>> _ = TreeNode("readme.md", parent=root)
        >>> print(MarkdownTreeRenderer().render(root), end="")
        # File Tree: proj
        <BLANKLINE>
        - 📄 readme.md
    """

    @property
    def format_name(self) -> str:
        return "markdown"

    def stream(self, root: TreeNode) -> Iterator[str]:
        yield f"# File Tree: {root.name}"
        yield ""
        for node in PreOrderIter(root):
            if node is root:
                continue
            depth = node.depth - root.depth
            marker = DIRECTORY_MARKER if node.is_dir else FILE_MARKER
            yield f"{'  ' * (depth - 1)}- {marker} {node.name}"
