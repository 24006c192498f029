"""Unit tests for tree rendering."""

import pytest
from anytree import PreOrderIter

from dendro.file_system_tree.file_system_node import FileSystemNode
from dendro.file_system_tree.file_system_tree import TreeOptions, build_tree
from dendro.file_system_tree.tree_renderer import RenderOptions, render_tree, stream_tree_representation
from dendro.types import NodeType


@pytest.fixture
def nested_tree():
    root = FileSystemNode("root", NodeType.DIRECTORY, "/root")
    level1 = FileSystemNode("level1", NodeType.DIRECTORY, "/root/level1", parent=root)
    level2 = FileSystemNode("level2", NodeType.DIRECTORY, "/root/level1/level2", parent=level1)
    FileSystemNode("deep.txt", NodeType.FILE, "/root/level1/level2/deep.txt", parent=level2)
    FileSystemNode("mid.js", NodeType.FILE, "/root/level1/mid.js", parent=level1)
    FileSystemNode("top.md", NodeType.FILE, "/root/top.md", parent=root)
    return root


def test_none_renders_empty_string():
    assert render_tree(None) == ""
    assert list(stream_tree_representation(None)) == []


def test_single_node():
    node = FileSystemNode("file.txt", NodeType.FILE, "/file.txt")
    assert render_tree(node) == "└── 📄 file.txt"


def test_nested_structure_without_icons(nested_tree):
    expected = "\n".join(
        [
            "└── root",
            "    ├── level1",
            "    │   ├── level2",
            "    │   │   └── deep.txt",
            "    │   └── mid.js",
            "    └── top.md",
        ]
    )
    assert render_tree(nested_tree, RenderOptions(show_icons=False)) == expected


def test_icons_shown_by_default(nested_tree):
    lines = render_tree(nested_tree).split("\n")
    assert lines[0] == "└── 📁 root"
    assert lines[4] == "    │   └── 📜 mid.js"
    assert lines[5] == "    └── 📝 top.md"


def test_show_paths(nested_tree):
    lines = render_tree(nested_tree, RenderOptions(show_icons=False, show_paths=True)).split("\n")
    assert lines[0] == "└── root (/root)"
    assert lines[3] == "    │   │   └── deep.txt (/root/level1/level2/deep.txt)"


def test_empty_directory_renders_single_line():
    node = FileSystemNode("empty", NodeType.DIRECTORY, "/empty")
    assert render_tree(node) == "└── 📁 empty"


def test_no_trailing_newline(nested_tree):
    assert not render_tree(nested_tree).endswith("\n")


def test_stream_matches_render(nested_tree):
    options = RenderOptions(show_paths=True)
    assert "\n".join(stream_tree_representation(nested_tree, options)) == render_tree(nested_tree, options)


def test_render_lists_every_node_once_in_depth_first_order(sample_project):
    tree = build_tree(sample_project, TreeOptions(show_hidden=True))
    lines = render_tree(tree, RenderOptions(show_icons=False)).split("\n")
    names = [node.name for node in PreOrderIter(tree)]

    assert len(lines) == len(names)
    for line, name in zip(lines, names):
        assert line.endswith(f"── {name}")


def test_rendered_built_tree(tmp_path):
    (tmp_path / "b.txt").touch()
    (tmp_path / "a.txt").touch()
    (tmp_path / "z").mkdir()
    (tmp_path / "z" / "inner.py").touch()

    output = render_tree(build_tree(tmp_path))
    assert output == "\n".join(
        [
            f"└── 📁 {tmp_path.name}",
            "    ├── 📁 z",
            "    │   └── 🐍 inner.py",
            "    ├── 📄 a.txt",
            "    └── 📄 b.txt",
        ]
    )


def test_render_does_not_modify_tree(nested_tree):
    before = [(node.name, node.parent) for node in PreOrderIter(nested_tree)]
    render_tree(nested_tree)
    assert [(node.name, node.parent) for node in PreOrderIter(nested_tree)] == before
