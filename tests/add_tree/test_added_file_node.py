"""Unit tests for the AddedFileNode class."""

from addtree.add_tree.added_file_node import AddedFileNode
from addtree.path_entry.memory_path_entry import MemoryPathEntry


def test_added_file_node_initialization():
    tree = MemoryPathEntry.from_paths(["/proj/src/a.txt"])

    dir_node = AddedFileNode(tree.find("/proj/src"))
    assert dir_node.path == "/proj/src"
    assert dir_node.name == "src"
    assert dir_node.is_dir
    assert dir_node.included
    assert dir_node.is_root
    assert dir_node.children == []

    file_node = AddedFileNode(tree.find("/proj/src/a.txt"), included=False)
    assert not file_node.is_dir
    assert not file_node.included
    assert repr(file_node) == "AddedFileNode('/proj/src/a.txt', included=False)"


def test_attach_sets_parent_key_only():
    tree = MemoryPathEntry.from_paths(["/p/d/a", "/p/d/b"])
    parent = AddedFileNode(tree.find("/p/d"))
    child = AddedFileNode(tree.find("/p/d/a"))
    parent.attach(child)

    assert child.parent_key == "/p/d"
    assert not child.is_root
    assert parent.children == [child]
    # The child holds no reference to the parent node itself
    assert all(value is not parent for value in vars(child).values())


def test_sort_orders_children_by_path():
    tree = MemoryPathEntry.from_paths(["/p/d/c", "/p/d/a", "/p/d/b"])
    parent = AddedFileNode(tree.find("/p/d"))
    for name in ("c", "a", "b"):
        parent.attach(AddedFileNode(tree.find(f"/p/d/{name}")))
    parent.sort()
    assert [child.name for child in parent.children] == ["a", "b", "c"]
