"""Text rendering of a built file system tree.

Rendering follows the Unix ``tree`` drawing convention: every node, the root
included, gets a branch connector, and the vertical continuation line stays
visible below a branch that still has siblings to come.

Example:
    >>> from dendro.types import NodeType
    >>> root = FileSystemNode("project", NodeType.DIRECTORY, "/project")
    >>> src = FileSystemNode("src", NodeType.DIRECTORY, "/project/src", parent=root)
    >>> _ = FileSystemNode("main.py", NodeType.FILE, "/project/src/main.py", parent=src)
    >>> _ = FileSystemNode("README.md", NodeType.FILE, "/project/README.md", parent=root)
    >>> print(render_tree(root, RenderOptions(show_icons=False)))
    └── project
        ├── src
        │   └── main.py
        └── README.md
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from dendro.file_system_tree.file_system_node import FileSystemNode

LAST_CONNECTOR = "└── "
BRANCH_CONNECTOR = "├── "
BLANK_PREFIX = "    "
CONTINUATION_PREFIX = "│   "


@dataclass(frozen=True)
class RenderOptions:
    """Display settings for render_tree.

    Attributes:
        show_icons: Prefix each name with its icon.
        show_paths: Append each entry's absolute path in parentheses.
    """

    show_icons: bool = True
    show_paths: bool = False


def stream_tree_representation(
    tree: Optional[FileSystemNode], options: Optional[RenderOptions] = None
) -> Iterator[str]:
    """Generate the tree representation one line at a time.

    Children are emitted in the order they are stored, which for trees built by
    FileSystemTree is directories first and then files, each sorted by name.

    Args:
        tree: Root node to render. None yields no lines.
        options: Display settings. Defaults to RenderOptions().

    Yields:
        Lines of the tree representation, without line terminators.
    """
    if tree is None:
        return
    if options is None:
        options = RenderOptions()

    def write_node(node: FileSystemNode, prefix: str, is_last: bool) -> Iterator[str]:
        connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR
        icon = f"{node.icon} " if options.show_icons else ""
        path_info = f" ({node.absolute_path})" if options.show_paths else ""
        yield f"{prefix}{connector}{icon}{node.name}{path_info}"

        children = node.children
        child_prefix = prefix + (BLANK_PREFIX if is_last else CONTINUATION_PREFIX)
        for i, child in enumerate(children):
            yield from write_node(child, child_prefix, i == len(children) - 1)

    # The root is always drawn as a last child
    yield from write_node(tree, "", True)


def render_tree(tree: Optional[FileSystemNode], options: Optional[RenderOptions] = None) -> str:
    """Get a complete string representation of a tree.

    Args:
        tree: Root node to render. None renders as the empty string.
        options: Display settings. Defaults to RenderOptions().

    Returns:
        The rendered lines joined with newlines (no trailing newline).
    """
    return "\n".join(stream_tree_representation(tree, options))
