"""Directory tree generation utilities.

This package walks a directory, filters it with gitignore-style rules, and
renders the resulting hierarchy as a plain-text tree, a Markdown outline, or JSON.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("filetreegen")
except PackageNotFoundError:
    __version__ = "unknown"
