"""Unit tests for tree statistics."""

from anytree import PreOrderIter

from dendro.file_system_tree.file_system_node import FileSystemNode
from dendro.file_system_tree.file_system_tree import TreeOptions, build_tree
from dendro.file_system_tree.tree_stats import TreeStats, get_tree_stats
from dendro.types import NodeType


def test_none_tree():
    assert get_tree_stats(None) == TreeStats(files=0, directories=0)


def test_single_file():
    node = FileSystemNode("file.txt", NodeType.FILE, "/file.txt")
    assert get_tree_stats(node) == TreeStats(files=1, directories=0)


def test_empty_directory_counts_itself():
    node = FileSystemNode("empty", NodeType.DIRECTORY, "/empty")
    assert get_tree_stats(node) == TreeStats(files=0, directories=1)


def test_nested_structure():
    root = FileSystemNode("root", NodeType.DIRECTORY, "/root")
    level1 = FileSystemNode("level1", NodeType.DIRECTORY, "/root/level1", parent=root)
    level2 = FileSystemNode("level2", NodeType.DIRECTORY, "/root/level1/level2", parent=level1)
    FileSystemNode("deep.txt", NodeType.FILE, "/root/level1/level2/deep.txt", parent=level2)
    FileSystemNode("mid.txt", NodeType.FILE, "/root/level1/mid.txt", parent=level1)
    FileSystemNode("top.txt", NodeType.FILE, "/root/top.txt", parent=root)

    stats = get_tree_stats(root)
    assert stats == TreeStats(files=3, directories=3)
    assert stats.total == 6


def test_total_equals_node_count(sample_project):
    tree = build_tree(sample_project, TreeOptions(show_hidden=True))
    stats = get_tree_stats(tree)
    assert stats.total == len(list(PreOrderIter(tree)))


def test_excluded_subtree_is_not_counted(sample_project):
    full = get_tree_stats(build_tree(sample_project))
    pruned = get_tree_stats(build_tree(sample_project, TreeOptions(exclude_patterns=[r"^src$"])))

    # src, src/utils, src/utils/helpers.py, src/main.js
    assert full.directories - pruned.directories == 2
    assert full.files - pruned.files == 2


def test_stats_do_not_modify_tree(sample_project):
    tree = build_tree(sample_project)
    before = [(node.name, node.is_dir) for node in PreOrderIter(tree)]
    get_tree_stats(tree)
    assert [(node.name, node.is_dir) for node in PreOrderIter(tree)] == before
