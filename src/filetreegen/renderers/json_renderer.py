"""JSON rendering of the tree structure.

Only names, entry types and the hierarchy are emitted. Filesystem metadata such as
sizes or timestamps is deliberately not part of the document.
"""

import json
from typing import Any, Dict, Iterator

from filetreegen.file_tree.tree_node import TreeNode

from .base_renderer import TreeRenderer


class JsonTreeRenderer(TreeRenderer):
    """Renderer producing a JSON document mirroring the tree.

    Every node becomes an object with ``name`` and ``type`` (``"directory"`` or
    ``"file"``). A ``children`` array is present only on nodes that have children.
    The document is indented with two spaces and has no trailing newline.

    Example:
        >>> root = TreeNode("proj", is_dir=True)
        >>> _ = TreeNode("a.txt", parent=root)
        >>> JsonTreeRenderer().to_dict(root)
        {'name': 'proj', 'type': 'directory', 'children': [{'name': 'a.txt', 'type': 'file'}]}
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    @property
    def format_name(self) -> str:
        return "json"

    def to_dict(self, node: TreeNode) -> Dict[str, Any]:
        """Project a node and its descendants onto plain dicts and lists."""
        result: Dict[str, Any] = {
            "name": node.name,
            "type": "directory" if node.is_dir else "file",
        }
        if node.children:
            result["children"] = [self.to_dict(child) for child in node.children]
        return result

    def render(self, root: TreeNode) -> str:
        return json.dumps(self.to_dict(root), indent=self.indent, ensure_ascii=False)

    def stream(self, root: TreeNode) -> Iterator[str]:
        yield from self.render(root).split("\n")
