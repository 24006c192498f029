"""File and directory counts for a built tree."""

from dataclasses import dataclass
from typing import Optional

from anytree import PreOrderIter

from dendro.file_system_tree.file_system_node import FileSystemNode


@dataclass(frozen=True)
class TreeStats:
    """Aggregate counts for a tree.

    Attributes:
        files: Number of file nodes.
        directories: Number of directory nodes, the root directory included.
    """

    files: int = 0
    directories: int = 0

    @property
    def total(self) -> int:
        return self.files + self.directories


def get_tree_stats(tree: Optional[FileSystemNode]) -> TreeStats:
    """Count the files and directories in a tree.

    Every node is counted once: a directory counts itself whether or not it has
    children, and a file counts as one file.

    Args:
        tree: Root node of the tree. None counts as an empty tree.

    Returns:
        The file and directory counts.

    Example:
        >>> from dendro.types import NodeType
        >>> root = FileSystemNode("root", NodeType.DIRECTORY, "/root")
        >>> _ = FileSystemNode("a.txt", NodeType.FILE, "/root/a.txt", parent=root)
        >>> get_tree_stats(root)
        TreeStats(files=1, directories=1)
        >>> get_tree_stats(None)
        TreeStats(files=0, directories=0)
    """
    if tree is None:
        return TreeStats()

    files = 0
    directories = 0
    for node in PreOrderIter(tree):
        if node.is_dir:
            directories += 1
        else:
            files += 1
    return TreeStats(files=files, directories=directories)
