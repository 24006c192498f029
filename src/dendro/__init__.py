"""Directory tree rendering with file type icons.

This package builds an in-memory tree from a directory hierarchy, decorates each
entry with an icon for its file type, and renders the result as a text tree with
branch connectors and aggregate file/directory counts.
"""

from importlib.metadata import PackageNotFoundError, version

from dendro.file_system_tree.file_system_node import FileSystemNode as TreeNode
from dendro.file_system_tree.file_system_tree import FileSystemTree, TreeOptions, build_tree
from dendro.file_system_tree.tree_renderer import RenderOptions, render_tree
from dendro.file_system_tree.tree_stats import TreeStats, get_tree_stats
from dendro.icons import get_icon

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dendro")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "FileSystemTree",
    "RenderOptions",
    "TreeNode",
    "TreeOptions",
    "TreeStats",
    "build_tree",
    "get_icon",
    "get_tree_stats",
    "render_tree",
]
