# bintree

Linked binary tree nodes that carry parent, left and right links, and a
set of small functions to build, walk, measure and draw them.

## Building a tree

```python
from bintree.node import new_node, insert_left, insert_right

root = new_node(None, 98)
root.left = new_node(root, 12)
root.right = new_node(root, 402)
insert_right(root.left, 54)   # 54 goes between 12 and any existing right child
root.insert_left(45)          # method form of the same operation
```

`Node` is a dataclass with `value`, `parent`, `left` and `right` fields.
`new_node(parent, value)` creates a node whose parent link points at
`parent`; it does not attach the node to the parent, so assign it to
`left` or `right` yourself.

`insert_left` and `insert_right` (and the `Node.insert_left` /
`Node.insert_right` methods) put a new node between a parent and its
current child on that side, so the old child becomes the new node's child
on the same side. The module-level functions return `None` when the
parent is `None`.

`delete(tree)` detaches a subtree from its parent and clears every link
inside it.

## Traversal

```python
from bintree.traversal import preorder, inorder, postorder

inorder(root, print)
```

Each function calls `func` with every node's value in the given order.
Nothing happens when the tree or `func` is `None`.

## Structural queries

`bintree.properties` provides:

- `is_leaf(node)` – the node exists and has no children.
- `is_root(node)` – the node has no parent, or it has two children.
- `height(tree)` – edges on the longest downward path (0 for a single node
  or an empty tree).
- `depth(node)` – edges between the node and the root.
- `size(tree)` – number of nodes.
- `leaves(tree)` – leaf count, where a node missing either child counts
  as one leaf.
- `internal_nodes(tree)` – nodes with at least one child.
- `balance(tree)` – levels in the left subtree minus levels in the right.
- `is_full(tree)` – every node has zero or two children.
- `is_perfect(tree)` – the tree is full and both subtrees have the same
  number of internal nodes.
- `sibling(node)` – the other child of the node's parent, when the parent
  has two children; the sides are told apart by comparing values.
- `uncle(node)` – the sibling of the node's parent.

```python
from bintree.properties import height, size, is_full

height(root), size(root), is_full(root)
```

## Drawing

```python
from bintree.printing import render_tree, print_tree

print_tree(root)          # writes to standard output
text = render_tree(root)  # the same drawing as a string
```

Each value is shown as a zero-padded `(nnn)` box, one line per level,
with `.---` lines connecting parents to their children. An empty tree
renders as an empty string.

## Demonstrations

Nineteen numbered example scenarios (0 to 18) build sample trees and
report on them, covering node creation through to uncle lookup:

```
bintree-demo 9
bintree-demo 6 7 8
bintree-demo
```

With no numbers, every scenario runs, separated by blank lines. From
Python, use `bintree.demo.run_scenario(number, out)`; an unknown number
raises `ValueError`.

## Tests

```
pip install .[test]
pytest
```