"""Binary search trees with strictly increasing in-order values."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import NamedTuple

from bintrees.node import Node


class Insertion(NamedTuple):
    """Result of an insertion: the tree's root afterwards and the new node."""

    root: Node
    node: Node


def is_bst(tree: Node | None) -> bool:
    """True if the tree is a binary search tree without duplicate values."""
    if tree is None:
        return False
    stack: list[tuple[Node, float, float]] = [(tree, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if not low < node.value < high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def insert(root: Node | None, value: int) -> Insertion:
    """Insert a value as a new leaf.

    With no root, the new node becomes the root. Raises ValueError if the
    value is already in the tree.
    """
    if root is None:
        node = Node(value)
        return Insertion(node, node)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return Insertion(root, current.left)
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return Insertion(root, current.right)
            current = current.right
        else:
            raise ValueError(f"{value} is already in the tree")


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


def search(tree: Node | None, value: int) -> Node | None:
    """The node holding the value, or None if it is not in the tree."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


def remove(root: Node | None, value: int) -> Node | None:
    """Remove the value and return the tree's new root.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. Raises KeyError if the value is absent.
    """
    node = search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    if parent is None:
        new_root = child
    else:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
        new_root = root
    node.parent = node.left = node.right = None
    return new_root