"""In-memory file tree built from a directory walk.

This package provides the node type making up a generated tree and the builder
that walks a directory, applies exclusion rules, and prunes empty directories.
"""

from .tree_builder import TreeBuilder, build_tree
from .tree_node import TreeNode

__all__ = ["TreeBuilder", "TreeNode", "build_tree"]
