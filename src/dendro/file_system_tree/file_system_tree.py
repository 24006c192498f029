"""File system tree construction with configurable filtering.

This module provides the FileSystemTree class and the build_tree function for
turning a directory hierarchy into a tree of FileSystemNode objects, with support
for hiding dot-files, excluding entries by pattern and limiting the depth of the
traversal.
"""

import logging
import os
import re
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple

from dendro.exclusion_rules.base_rules import BaseExclusionRules
from dendro.exclusion_rules.composite_rules import CompositeExclusionRules
from dendro.exclusion_rules.regex_rules import PatternType, RegexExclusionRules
from dendro.file_system_tree.file_system_node import FileSystemNode
from dendro.file_system_tree.permission_action import PermissionAction
from dendro.types import NodeType, PathType

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


@dataclass(frozen=True)
class TreeOptions:
    """Immutable configuration snapshot for building a tree.

    Regular-expression patterns are compiled when the options are created, so a
    malformed pattern fails here rather than part way through a traversal.

    Attributes:
        max_depth: Number of levels to include, the root being level 0. None means
            unbounded; 0 produces no tree at all.
        show_hidden: Include entries whose name starts with a dot.
        exclude_patterns: Regular expressions searched in each entry's base name.
            Any match excludes the entry (and, for a directory, its whole subtree).
        exclusion_rules: Additional rules object consulted after exclude_patterns,
            e.g. GitIgnoreExclusionRules for glob patterns.
        dirs_only: Leave files out of the tree.
        permission_action: What to do when an entry cannot be read.

    Raises:
        ValueError: If max_depth is negative.
        InvalidPatternError: If a pattern in exclude_patterns does not compile.

    Example:
        >>> options = TreeOptions(max_depth=2, exclude_patterns=[r"^node_modules$"])
        >>> options.is_excluded("node_modules", is_dir=True)
        True
        >>> options.is_excluded(".env", is_dir=False)
        True
        >>> options.is_excluded("src", is_dir=True)
        False
    """

    max_depth: Optional[int] = None
    show_hidden: bool = False
    exclude_patterns: Sequence[PatternType] = ()
    exclusion_rules: Optional[BaseExclusionRules] = None
    dirs_only: bool = False
    permission_action: PermissionAction = PermissionAction.IGNORE
    _rules: Optional[BaseExclusionRules] = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

        patterns = self.exclude_patterns
        if isinstance(patterns, (str, re.Pattern)):
            patterns = (patterns,)
        object.__setattr__(self, "exclude_patterns", tuple(patterns))

        rules = []
        if self.exclude_patterns:
            rules.append(RegexExclusionRules(self.exclude_patterns))
        if self.exclusion_rules is not None:
            rules.append(self.exclusion_rules)
        object.__setattr__(self, "_rules", CompositeExclusionRules(rules) if rules else None)

    def is_excluded(self, name: str, is_dir: bool) -> bool:
        """Check whether an entry is filtered out by visibility or exclusion rules.

        Args:
            name: Base name of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the entry should be left out of the tree.
        """
        if not self.show_hidden and name.startswith(HIDDEN_PREFIX):
            return True
        return self._rules is not None and self._rules.exclude(name, is_dir)


def _sort_key(node: FileSystemNode) -> Tuple[bool, str, str]:
    # Directories first, then case-insensitive name; lowercase wins a case-only tie
    return (not node.is_dir, node.name.casefold(), node.name.swapcase())


class FileSystemTree:
    """A tree representation of a directory structure.

    This class builds a tree of FileSystemNode objects from a root path, applying
    the visibility, exclusion and depth settings of a TreeOptions snapshot. The tree
    is built lazily on first access; refresh() builds a new tree to reflect
    filesystem changes. A built tree is never modified in place.

    Read Error Handling:
        An entry that cannot be stat'ed or listed is handled according to
        options.permission_action:
        - IGNORE (default): log a warning and prune that entry only; siblings are
          still processed. If the root itself is unreadable the tree is None.
        - RAISE: re-raise the underlying OSError.

    Attributes:
        root_path (Path): The absolute path to the root entry.
        options (TreeOptions): The configuration used for every build.

    Example:
        >>> tree = FileSystemTree(".", TreeOptions(max_depth=2))  # doctest: +SKIP
        >>> root = tree.get_tree()  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['src', 'tests', 'README.md']
    """

    def __init__(self, root_path: PathType, options: Optional[TreeOptions] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory (or file) to represent. Relative
                paths are made absolute against the current working directory.
            options: Build configuration. Defaults to TreeOptions().
        """
        self.root_path = Path(os.path.abspath(root_path))
        self.options = options if options is not None else TreeOptions()
        self._tree: Optional[FileSystemNode] = None
        self._built = False

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the filesystem tree.

        Builds the tree if it hasn't been built yet.

        Returns:
            The root node, or None if the root is unreadable, excluded, or cut off by
            max_depth=0.

        Raises:
            OSError: If an entry is unreadable and permission_action is RAISE.
        """
        if not self._built:
            self._build_tree()
        return self._tree

    def refresh(self) -> None:
        """Discard the current tree and build a new one from the filesystem."""
        self._tree = None
        self._built = False
        self._build_tree()

    def _build_tree(self) -> None:
        logger.debug("Building tree for %s", self.root_path)
        self._tree = self._create_node(str(self.root_path), 0)
        self._built = True

    def _create_node(self, path: str, depth: int) -> Optional[FileSystemNode]:
        """Recursively create the node for a path and its children."""
        options = self.options
        if options.max_depth is not None and depth >= options.max_depth:
            return None

        # The filesystem root has an empty basename
        name = os.path.basename(path) or path

        try:
            is_dir = stat.S_ISDIR(os.stat(path).st_mode)
        except OSError as e:
            return self._handle_read_error(path, e)

        if options.is_excluded(name, is_dir):
            logger.debug("Excluded %s", path)
            return None

        if not is_dir:
            if options.dirs_only:
                return None
            return FileSystemNode(name, NodeType.FILE, path)

        try:
            entries = os.listdir(path)
        except OSError as e:
            return self._handle_read_error(path, e)

        children = []
        for entry in entries:
            child = self._create_node(os.path.join(path, entry), depth + 1)
            if child is not None:
                children.append(child)
        children.sort(key=_sort_key)

        return FileSystemNode(name, NodeType.DIRECTORY, path, children=children)

    def _handle_read_error(self, path: str, error: OSError) -> None:
        if self.options.permission_action == PermissionAction.RAISE:
            raise error
        logger.warning("Error reading %s: %s", path, error.strerror or error)
        return None


def build_tree(root_path: PathType, options: Optional[TreeOptions] = None) -> Optional[FileSystemNode]:
    """Build a tree for root_path in a single pass.

    Args:
        root_path: Path to the root directory (or file).
        options: Build configuration. Defaults to TreeOptions().

    Returns:
        The root node, or None if the root is unreadable, excluded, or max_depth is 0.

    Example:
        >>> root = build_tree("src", TreeOptions(exclude_patterns=[r"^__pycache__$"]))  # doctest: +SKIP
        >>> root.name  # doctest: +SKIP
        'src'
    """
    return FileSystemTree(root_path, options).get_tree()
