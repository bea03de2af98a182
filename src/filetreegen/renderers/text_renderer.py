"""Plain-text tree rendering using box-drawing characters."""

from typing import Iterator

from filetreegen.file_tree.tree_node import TreeNode

from .base_renderer import TreeRenderer

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class TextTreeRenderer(TreeRenderer):
    """Renderer producing output similar to the Unix 'tree' command.

    The root line is the bare root name. Every other line starts with one marker per
    ancestor, the root included (``"│   "`` when that ancestor has siblings after it,
    ``"    "`` when it has none) followed by ``"├── "``, or ``"└── "`` for the
    last child of its parent. Children appear in the order stored in the tree.

    Example:
        >>> root = TreeNode("proj", is_dir=True)
        >>> src = TreeNode("src", parent=root, is_dir=True)
        >>> _ = TreeNode("main.py", parent=src)
        >>> _ = TreeNode("README.md", parent=root)
        >>> print(TextTreeRenderer().render(root), end="")
        proj
            ├── src
            │   └── main.py
            └── README.md
    """

    @property
    def format_name(self) -> str:
        return "text"

    def stream(self, root: TreeNode) -> Iterator[str]:
        yield root.name
        yield from self._stream_children(root, SPACE)

    def _stream_children(self, node: TreeNode, prefix: str) -> Iterator[str]:
        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            yield f"{prefix}{LAST_BRANCH if is_last else BRANCH}{child.name}"
            if child.children:
                yield from self._stream_children(child, prefix + (SPACE if is_last else PIPE))
