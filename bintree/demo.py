"""Demonstration scenarios that build sample trees and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, TextIO

from bintree.node import Node, delete, insert_left, insert_right, new_node
from bintree.printing import print_tree
from bintree.properties import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_leaf,
    is_perfect,
    is_root,
    leaves,
    sibling,
    size,
    uncle,
)
from bintree.traversal import inorder, postorder, preorder

_NULL = "(nil)"


def _seven_node_tree(inner_right: int) -> Node:
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 402)
    root.left.left = new_node(root.left, 6)
    root.left.right = new_node(root.left, inner_right)
    root.right.left = new_node(root.right, 256)
    root.right.right = new_node(root.right, 512)
    return root


def _five_node_tree() -> Node:
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 402)
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def _nine_node_tree() -> Node:
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 128)
    root.left.right = new_node(root.left, 54)
    root.right.right = new_node(root.right, 402)
    root.left.left = new_node(root.left, 10)
    root.right.left = new_node(root.right, 110)
    root.right.right.left = new_node(root.right.right, 200)
    root.right.right.right = new_node(root.right.right, 512)
    return root


def _three_node_tree() -> Node:
    root = new_node(None, 98)
    root.left = new_node(root, 12)
    root.right = new_node(root, 402)
    return root


def _value_writer(out: TextIO) -> Callable[[int], None]:
    return lambda value: out.write(f"{value}\n")


def _scenario_create(out: TextIO) -> None:
    print_tree(_seven_node_tree(16), out)


def _scenario_insert_left(out: TextIO) -> None:
    root = _three_node_tree()
    print_tree(root, out)
    out.write("\n")
    insert_left(root.right, 128)
    insert_left(root, 54)
    print_tree(root, out)


def _scenario_insert_right(out: TextIO) -> None:
    root = _three_node_tree()
    print_tree(root, out)
    out.write("\n")
    insert_right(root.left, 54)
    insert_right(root, 128)
    print_tree(root, out)


def _scenario_delete(out: TextIO) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    delete(root)


def _report(out: TextIO, root: Node, template: str, query: Callable[[Node], int], nodes: List[Node]) -> None:
    print_tree(root, out)
    for node in nodes:
        out.write(template.format(node.value, int(query(node))) + "\n")


def _scenario_is_leaf(out: TextIO) -> None:
    root = _five_node_tree()
    _report(out, root, "Is {} a leaf: {}", is_leaf, [root, root.right, root.right.right])


def _scenario_is_root(out: TextIO) -> None:
    root = _five_node_tree()
    _report(out, root, "Is {} a root: {}", is_root, [root, root.right, root.right.right])


def _traversal_scenario(walk: Callable[[Optional[Node], Callable[[int], object]], None]) -> Callable[[TextIO], None]:
    def scenario(out: TextIO) -> None:
        root = _seven_node_tree(56)
        print_tree(root, out)
        walk(root, _value_writer(out))

    return scenario


def _measure_scenario(template: str, query: Callable[[Node], int]) -> Callable[[TextIO], None]:
    def scenario(out: TextIO) -> None:
        root = _five_node_tree()
        _report(out, root, template, query, [root, root.right, root.left.right])

    return scenario


def _scenario_balance(out: TextIO) -> None:
    root = _five_node_tree()
    insert_left(root, 45)
    insert_right(root.left, 50)
    insert_left(root.left.left, 10)
    insert_left(root.left.left.left, 8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {balance(node):+d}\n")


def _scenario_is_full(out: TextIO) -> None:
    root = _five_node_tree()
    root.left.left = new_node(root.left, 10)
    _report(out, root, "Is {} full: {}", is_full, [root, root.left, root.right])


def _scenario_is_perfect(out: TextIO) -> None:
    root = _five_node_tree()
    root.left.left = new_node(root.left, 10)
    root.right.left = new_node(root.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(is_perfect(root))}\n\n")
    root.right.right.left = new_node(root.right.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(is_perfect(root))}\n\n")
    root.right.right.right = new_node(root.right.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(is_perfect(root))}\n")


def _relative_line(label: str, node: Node, relative: Optional[Node]) -> str:
    shown = _NULL if relative is None else str(relative.value)
    return f"{label} of {node.value}: {shown}\n"


def _scenario_sibling(out: TextIO) -> None:
    root = _nine_node_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        out.write(_relative_line("Sibling", node, sibling(node)))


def _scenario_uncle(out: TextIO) -> None:
    root = _nine_node_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        out.write(_relative_line("Uncle", node, uncle(node)))


_SCENARIOS: Dict[int, Callable[[TextIO], None]] = {
    0: _scenario_create,
    1: _scenario_insert_left,
    2: _scenario_insert_right,
    3: _scenario_delete,
    4: _scenario_is_leaf,
    5: _scenario_is_root,
    6: _traversal_scenario(preorder),
    7: _traversal_scenario(inorder),
    8: _traversal_scenario(postorder),
    9: _measure_scenario("Height from {}: {}", height),
    10: _measure_scenario("Depth of {}: {}", depth),
    11: _measure_scenario("Size of {}: {}", size),
    12: _measure_scenario("Leaves in {}: {}", leaves),
    13: _measure_scenario("Nodes in {}: {}", internal_nodes),
    14: _scenario_balance,
    15: _scenario_is_full,
    16: _scenario_is_perfect,
    17: _scenario_sibling,
    18: _scenario_uncle,
}


def run_scenario(number: int, out: Optional[TextIO] = None) -> None:
    """Run demonstration ``number`` (0 to 18), writing its report to ``out``."""
    try:
        scenario = _SCENARIOS[number]
    except KeyError:
        raise ValueError(f"no scenario numbered {number!r}") from None
    scenario(out if out is not None else sys.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the chosen scenarios, or all of them, separated by blank lines."""
    parser = argparse.ArgumentParser(prog="bintree-demo", description="Binary tree demonstrations.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        choices=sorted(_SCENARIOS),
        metavar="N",
        help="scenario numbers to run (default: all)",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or sorted(_SCENARIOS)
    for index, number in enumerate(numbers):
        if index:
            sys.stdout.write("\n")
        run_scenario(number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())