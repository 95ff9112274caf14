"""Height-balanced (AVL) binary search trees."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from bintrees import bst
from bintrees.bst import Insertion
from bintrees.node import Node, balance, is_leaf
from bintrees.relations import rotate_left, rotate_right


def is_avl(tree: Node | None) -> bool:
    """True if the tree is a search tree whose subtree heights differ by at most one."""
    if tree is None:
        return False
    stack: list[tuple[Node, float, float]] = [(tree, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if not low < node.value < high or abs(balance(node)) > 1:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def insert(root: Node | None, value: int) -> Insertion:
    """Insert a value, rebalancing on the way back up to the root.

    Raises ValueError if the value is already in the tree.
    """
    inserted = bst.insert(root, value)
    new = inserted.node
    top = new
    node = new.parent
    while node is not None:
        factor = balance(node)
        if factor > 1 and node.left.value > value:
            node = rotate_right(node)
        elif factor < -1 and node.right.value < value:
            node = rotate_left(node)
        elif factor > 1 and node.left.value < value:
            rotate_left(node.left)
            node = rotate_right(node)
        elif factor < -1 and node.right.value > value:
            rotate_right(node.right)
            node = rotate_left(node)
        top = node
        node = node.parent
    return Insertion(top, new)


def from_values(values: Iterable[int]) -> Node | None:
    """Build a tree by inserting values in order, skipping repeats."""
    root: Node | None = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root = insert(root, value).root
    return root


def _rebalance(node: Node | None) -> Node | None:
    """Rotate every unbalanced node once, children before parents."""
    if node is None or is_leaf(node):
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def remove(root: Node | None, value: int) -> Node | None:
    """Remove the value if present, rebalance, and return the new root."""
    try:
        root = bst.remove(root, value)
    except KeyError:
        pass
    return _rebalance(root)


def _build(values: Sequence[int], parent: Node | None) -> Node | None:
    if not values:
        return None
    middle = len(values) // 2
    if len(values) % 2 == 0:
        middle -= 1
    node = Node(values[middle], parent)
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1:], node)
    return node


def from_sorted(values: Sequence[int]) -> Node | None:
    """Build a balanced tree from values already in ascending order."""
    return _build(list(values), None)