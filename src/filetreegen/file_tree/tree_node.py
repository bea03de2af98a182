"""Node representation for entries in a generated file tree."""

from typing import Any, Optional, Tuple

from anytree import Node


def sort_key(node: "TreeNode") -> Tuple[bool, str, str]:
    """Ordering used for siblings: directories first, then by name.

    Names compare case-insensitively first, with the exact code points as a tie-break,
    so the order is the same on every platform.

    Example:
        >>> names = [TreeNode("b.txt"), TreeNode("A.txt"), TreeNode("lib", is_dir=True)]
        >>> [n.name for n in sorted(names, key=sort_key)]
        ['lib', 'A.txt', 'b.txt']
    """
    return (not node.is_dir, node.name.casefold(), node.name)


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in a generated tree.

    Extends anytree.Node with the absolute path of the entry and a flag telling
    directories from files. Children are only ever attached to directory nodes.

    Attributes:
        name (str): The base name of the file or directory.
        abs_path (str): The resolved absolute path of the entry.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("proj", abs_path="/tmp/proj", is_dir=True)
        >>> child = TreeNode("readme.md", parent=root, abs_path="/tmp/proj/readme.md")
        >>> child.parent is root
        True
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        abs_path: str = "",
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.abs_path = abs_path
        self.is_dir = is_dir

    @property
    def is_empty_dir(self) -> bool:
        """True for a directory node that has no children left."""
        return self.is_dir and not self.children
