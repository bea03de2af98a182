"""Renderers turning a file tree into text, Markdown or JSON."""

from typing import Dict, Type, Union

from filetreegen.config import parse_format
from filetreegen.file_tree.tree_node import TreeNode
from filetreegen.types import TreeFormat

from .base_renderer import TreeRenderer
from .json_renderer import JsonTreeRenderer
from .markdown_renderer import MarkdownTreeRenderer
from .text_renderer import TextTreeRenderer

RENDERERS: Dict[TreeFormat, Type[TreeRenderer]] = {
    TreeFormat.TEXT: TextTreeRenderer,
    TreeFormat.MARKDOWN: MarkdownTreeRenderer,
    TreeFormat.JSON: JsonTreeRenderer,
}


def get_renderer(output_format: Union[str, TreeFormat]) -> TreeRenderer:
    """Return a renderer for the given format.

    Raises:
        UnsupportedFormatError: If no renderer exists for the format.
    """
    return RENDERERS[parse_format(output_format)]()


def render_tree(root: TreeNode, output_format: Union[str, TreeFormat] = TreeFormat.TEXT) -> str:
    """Render ``root`` in the given format."""
    return get_renderer(output_format).render(root)


__all__ = [
    "JsonTreeRenderer",
    "MarkdownTreeRenderer",
    "RENDERERS",
    "TextTreeRenderer",
    "TreeRenderer",
    "get_renderer",
    "render_tree",
]
