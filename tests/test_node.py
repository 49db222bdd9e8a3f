import pytest

from bintree.node import Node, delete, insert_left, insert_right, new_node


@pytest.fixture
def small_tree():
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 402)
    return root


def test_new_node_links_parent_only(small_tree):
    child = new_node(small_tree, 7)
    assert child.parent is small_tree
    assert child.left is None and child.right is None
    assert child.value == 7
    assert small_tree.left.value == 12


def test_insert_left_pushes_existing_child_down(small_tree):
    old_left = small_tree.left
    added = insert_left(small_tree, 54)
    assert small_tree.left is added
    assert added.parent is small_tree
    assert added.left is old_left
    assert old_left.parent is added
    assert added.right is None


def test_insert_left_on_empty_slot(small_tree):
    target = small_tree.right
    added = insert_left(target, 128)
    assert target.left is added
    assert added.left is None and added.right is None
    assert added.value == 128


def test_insert_right_pushes_existing_child_down(small_tree):
    old_right = small_tree.right
    added = insert_right(small_tree, 128)
    assert small_tree.right is added
    assert added.right is old_right
    assert old_right.parent is added
    assert added.left is None


def test_insert_without_parent_returns_none():
    assert insert_left(None, 1) is None
    assert insert_right(None, 1) is None


def test_method_forms_match_functions():
    root = Node(5)
    left = root.insert_left(3)
    right = root.insert_right(8)
    assert (root.left, root.right) == (left, right)
    assert left.parent is root and right.parent is root


def test_delete_unlinks_every_node(small_tree):
    left, right = small_tree.left, small_tree.right
    delete(small_tree)
    for node in (small_tree, left, right):
        assert node.left is None and node.right is None and node.parent is None


def test_delete_subtree_detaches_from_parent(small_tree):
    left = small_tree.left
    delete(left)
    assert small_tree.left is None
    assert small_tree.right.value == 402
    assert left.parent is None


def test_delete_none_is_harmless(small_tree):
    delete(None)
    assert small_tree.left.value == 12


def test_repr_shows_value():
    assert repr(Node(42)) == "Node(42)"