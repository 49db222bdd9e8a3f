"""ASCII rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintree.node import Node
from bintree.properties import height

_ROW_WIDTH = 255


def _put(row: List[str], column: int, char: str) -> None:
    if column >= len(row):
        row.extend(" " * (column + 1 - len(row)))
    row[column] = char


def _layout(tree: Optional[Node], offset: int, level: int, rows: List[List[str]]) -> int:
    """Draw the subtree into ``rows`` and return its width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, level + 1, rows)
    right = _layout(tree.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows[level], offset + left + i, char)
    if level:
        above = rows[level - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _trim(row: List[str]) -> str:
    text = "".join(row)
    stripped = text.rstrip(" ")
    return stripped if len(stripped) >= 2 else text[:2]


def render_tree(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree`` with a newline after each level."""
    if tree is None:
        return ""
    rows = [[" "] * _ROW_WIDTH for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_trim(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render_tree(tree))