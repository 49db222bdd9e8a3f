"""Binary tree node and the operations that build and tear down trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, slots=True)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional["Node"] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> "Node":
        """Insert a new left child; any existing left child becomes its left child."""
        child = Node(value, parent=self, left=self.left)
        if self.left is not None:
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> "Node":
        """Insert a new right child; any existing right child becomes its right child."""
        child = Node(value, parent=self, right=self.right)
        if self.right is not None:
            self.right.parent = child
        self.right = child
        return child


def new_node(parent: Optional[Node], value: int) -> Node:
    """Create a detached node whose parent link points at ``parent``."""
    return Node(value, parent=parent)


def insert_left(parent: Optional[Node], value: int) -> Optional[Node]:
    """Insert a left child under ``parent``; return None when there is no parent."""
    if parent is None:
        return None
    return parent.insert_left(value)


def insert_right(parent: Optional[Node], value: int) -> Optional[Node]:
    """Insert a right child under ``parent``; return None when there is no parent."""
    if parent is None:
        return None
    return parent.insert_right(value)


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole subtree, unlinking every node in it."""
    if tree is None:
        return
    owner = tree.parent
    if owner is not None:
        if owner.left is tree:
            owner.left = None
        if owner.right is tree:
            owner.right = None
    stack = [tree]
    while stack:
        current = stack.pop()
        stack.extend(child for child in (current.left, current.right) if child is not None)
        current.left = current.right = current.parent = None