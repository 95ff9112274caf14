"""Ancestry, completeness and rotations of binary trees."""

from __future__ import annotations

from collections import deque

from bintrees.node import Node


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """The deepest node that is an ancestor of both (a node counts as its own).

    Returns None if either node is missing or they share no root.
    """
    if first is None or second is None:
        return None
    ancestors: set[Node] = set()
    node: Node | None = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None


def is_complete(tree: Node | None) -> bool:
    """True if every level is full except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True


def _replace_in_parent(parent: Node | None, old: Node, new: Node) -> None:
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Node | None) -> Node | None:
    """Rotate the subtree left and return its new root.

    Returns None, changing nothing, if there is no tree or it has no right child.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    inner = pivot.left
    parent = tree.parent
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    pivot.left = tree
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Node | None) -> Node | None:
    """Rotate the subtree right and return its new root.

    Returns None, changing nothing, if there is no tree or it has no left child.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    inner = pivot.right
    parent = tree.parent
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    pivot.right = tree
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot