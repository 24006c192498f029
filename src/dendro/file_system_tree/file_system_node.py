"""Node representation for file system elements in the tree."""

from typing import Any, Iterable, Optional

from anytree import Node, TreeError

from dendro.icons import get_icon
from dendro.types import NodeType


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with the entry's type, its resolved path and the icon
    chosen for it. The type is fixed at construction; only directory nodes may
    have children, so attaching a node under a file raises anytree.TreeError.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        node_type (NodeType): Whether the node is a file or a directory. Read-only.
        absolute_path (str): Absolute path of the entry.
        icon (str): Display icon, derived from the name and type. Read-only.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("src", NodeType.DIRECTORY, "/project/src")
        >>> child = FileSystemNode("main.js", NodeType.FILE, "/project/src/main.js", parent=root)
        >>> root.is_dir
        True
        >>> child.icon
        '📜'
        >>> [node.name for node in root.children]
        ['main.js']
    """

    def __init__(
        self,
        name: str,
        node_type: NodeType,
        absolute_path: str,
        parent: Optional["FileSystemNode"] = None,
        children: Optional[Iterable["FileSystemNode"]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            node_type: NodeType.FILE or NodeType.DIRECTORY.
            absolute_path: The absolute path of the entry.
            parent: The parent node. Defaults to None.
            children: Initial children, in display order. Only valid for directories.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        self._node_type = node_type
        self.absolute_path = absolute_path
        super().__init__(name, parent=parent, children=children, **kwargs)

    @property
    def node_type(self) -> NodeType:
        return self._node_type

    @property
    def is_dir(self) -> bool:
        return self._node_type is NodeType.DIRECTORY

    @property
    def icon(self) -> str:
        return get_icon(self.name, self.is_dir)

    def _pre_attach(self, parent: "FileSystemNode") -> None:
        if parent is not None and not parent.is_dir:
            raise TreeError(f"Cannot attach {self.name!r} under file node {parent.name!r}.")
