"""Max binary heaps stored as complete binary trees of linked nodes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from bintrees.bst import Insertion
from bintrees.node import Node, size
from bintrees.relations import is_complete


class Extraction(NamedTuple):
    """Result of an extraction: the removed value and the heap's root afterwards."""

    value: int
    root: Node | None


def _dominates(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if node.value <= child.value:
                return False
            stack.append(child)
    return True


def is_heap(tree: Node | None) -> bool:
    """True if the tree is complete and every node exceeds its children."""
    if tree is None:
        return False
    return is_complete(tree) and _dominates(tree)


def insert(root: Node | None, value: int) -> Insertion:
    """Add a value at the first free slot and sift it up.

    The returned node is the one that holds the value after sifting; the
    root node itself never changes once the heap is non-empty.
    """
    if root is None:
        node = Node(value)
        return Insertion(node, node)
    # The 1-based level-order position of the new slot, read in binary after
    # the leading 1, spells the path from the root: 0 is left, 1 is right.
    path = bin(size(root) + 1)[3:]
    parent = root
    for step in path[:-1]:
        parent = parent.right if step == "1" else parent.left
    new = Node(value, parent)
    if path[-1] == "1":
        parent.right = new
    else:
        parent.left = new
    node = new
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return Insertion(root, node)


def from_values(values: Iterable[int]) -> Node | None:
    """Build a heap by inserting the values in order."""
    root: Node | None = None
    for value in values:
        root = insert(root, value).root
    return root


def _last_node(root: Node) -> Node:
    """The rightmost node on the deepest level."""
    level = [root]
    while True:
        below = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        if not below:
            return level[-1]
        level = below


def _sift_down(root: Node) -> None:
    node = root
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def extract(root: Node | None) -> Extraction:
    """Remove the largest value from the heap.

    Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.left is None and root.right is None:
        return Extraction(value, None)
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    if parent.right is not None:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return Extraction(value, root)


def to_sorted_list(root: Node | None) -> list[int]:
    """Empty the heap, returning its values from largest to smallest."""
    values: list[int] = []
    while root is not None:
        value, root = extract(root)
        values.append(value)
    return values