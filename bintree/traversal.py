"""Depth-first traversals that call a function with each node's value."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from bintree.node import Node

Visitor = Callable[[int], object]


def _walk_preorder(tree: Optional[Node]) -> Iterator[int]:
    if tree is not None:
        yield tree.value
        yield from _walk_preorder(tree.left)
        yield from _walk_preorder(tree.right)


def _walk_inorder(tree: Optional[Node]) -> Iterator[int]:
    if tree is not None:
        yield from _walk_inorder(tree.left)
        yield tree.value
        yield from _walk_inorder(tree.right)


def _walk_postorder(tree: Optional[Node]) -> Iterator[int]:
    if tree is not None:
        yield from _walk_postorder(tree.left)
        yield from _walk_postorder(tree.right)
        yield tree.value


def _visit(walk: Iterator[int], func: Optional[Visitor]) -> None:
    if func is None:
        return
    for value in walk:
        func(value)


def preorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value, node first, then left and right subtrees."""
    _visit(_walk_preorder(tree), func)


def inorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value, left subtree first, then node, then right."""
    _visit(_walk_inorder(tree), func)


def postorder(tree: Optional[Node], func: Optional[Visitor]) -> None:
    """Call ``func`` on each value after both of its subtrees."""
    _visit(_walk_postorder(tree), func)