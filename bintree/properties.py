"""Queries about the shape of a binary tree and relations between its nodes."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def is_leaf(node: Optional[Node]) -> bool:
    """True when ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """True for a node without a parent, or for any node with two children."""
    if node is None:
        return False
    if node.parent is None:
        return True
    return node.left is not None and node.right is not None


def height(tree: Optional[Node]) -> int:
    """Number of edges on the longest downward path; 0 for an empty tree."""
    if tree is None:
        return 0
    left_h = height(tree.left) + 1 if tree.left is not None else 0
    right_h = height(tree.right) + 1 if tree.right is not None else 0
    return max(left_h, right_h)


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def depth(tree: Optional[Node]) -> int:
    """Number of edges between the node and the root."""
    count = 0
    if tree is None:
        return count
    current = tree.parent
    while current is not None:
        count += 1
        current = current.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + size(tree.right) + 1


def leaves(tree: Optional[Node]) -> int:
    """Count leaves; a node missing either child counts as a single leaf."""
    if tree is None:
        return 0
    left_l = leaves(tree.left)
    right_l = leaves(tree.right)
    if left_l == 0 or right_l == 0:
        return 1
    return left_l + right_l


def internal_nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return internal_nodes(tree.left) + internal_nodes(tree.right) + 1


def balance(tree: Optional[Node]) -> int:
    """Height of the left subtree minus height of the right subtree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """True when every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """True when the tree is full and both subtrees have as many inner nodes."""
    if tree is None:
        return False
    return internal_nodes(tree.left) == internal_nodes(tree.right) and is_full(tree)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """The other child of the node's parent, when the parent has two children."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is None or parent.right is None:
        return None
    return parent.right if parent.left.value == node.value else parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """The sibling of the node's parent."""
    if node is None:
        return None
    return sibling(node.parent)