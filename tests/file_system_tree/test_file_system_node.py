"""Unit tests for the FileSystemNode class."""

import pytest
from anytree import TreeError

from dendro.file_system_tree.file_system_node import FileSystemNode
from dendro.icons import ICONS
from dendro.types import NodeType


def test_file_node_initialization():
    node = FileSystemNode("app.ts", NodeType.FILE, "/project/app.ts")
    assert node.name == "app.ts"
    assert node.node_type is NodeType.FILE
    assert not node.is_dir
    assert node.absolute_path == "/project/app.ts"
    assert node.icon == ICONS["typescript"]
    assert node.children == ()


def test_directory_node_initialization():
    node = FileSystemNode("data.json", NodeType.DIRECTORY, "/project/data.json")
    assert node.is_dir
    assert node.icon == ICONS["directory"]


def test_icon_is_derived_and_read_only():
    node = FileSystemNode("x.bin", NodeType.FILE, "/x.bin")
    assert node.icon == ICONS["default"]
    with pytest.raises(AttributeError):
        node.icon = "*"  # type: ignore[misc]


def test_node_type_is_read_only():
    node = FileSystemNode("src", NodeType.DIRECTORY, "/src")
    with pytest.raises(AttributeError):
        node.node_type = NodeType.FILE  # type: ignore[misc]
    with pytest.raises(AttributeError):
        node.is_dir = False  # type: ignore[misc]


def test_children_keep_given_order():
    b = FileSystemNode("b.txt", NodeType.FILE, "/root/b.txt")
    a = FileSystemNode("a.txt", NodeType.FILE, "/root/a.txt")
    root = FileSystemNode("root", NodeType.DIRECTORY, "/root", children=[b, a])

    assert [child.name for child in root.children] == ["b.txt", "a.txt"]
    assert a.parent is root


def test_file_nodes_cannot_have_children():
    file_node = FileSystemNode("main.py", NodeType.FILE, "/main.py")
    child = FileSystemNode("inner", NodeType.FILE, "/main.py/inner")

    with pytest.raises(TreeError):
        child.parent = file_node
    with pytest.raises(TreeError):
        FileSystemNode("other", NodeType.FILE, "/other", parent=file_node)

    assert file_node.children == ()
