import pytest

from filetreegen.file_tree.tree_node import TreeNode


@pytest.fixture
def sample_tree():
    """proj/ with src/{lib/util.py, main.py}, docs/guide.md and README.md."""
    root = TreeNode("proj", path="/work/proj", is_dir=True)
    docs = TreeNode("docs", parent=root, path="/work/proj/docs", is_dir=True)
    TreeNode("guide.md", parent=docs, path="/work/proj/docs/guide.md")
    src = TreeNode("src", parent=root, path="/work/proj/src", is_dir=True)
    lib = TreeNode("lib", parent=src, path="/work/proj/src/lib", is_dir=True)
    TreeNode("util.py", parent=lib, path="/work/proj/src/lib/util.py")
    TreeNode("main.py", parent=src, path="/work/proj/src/main.py")
    TreeNode("README.md", parent=root, path="/work/proj/README.md")
    return root
