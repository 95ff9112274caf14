"""Binary tree nodes and measurements over them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent records the parent link only; the parent's
    child slots are left untouched.
    """

    value: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves under it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves under it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(_children(node))
            node.parent = node.left = node.right = None


def _children(node: Node) -> tuple[Node, ...]:
    return tuple(child for child in (node.left, node.right) if child is not None)


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(_children(node)))


def _levels(tree: Node | None) -> int:
    """Number of levels in the tree: 0 for no tree, 1 for a lone node."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [child for node in level for child in _children(node)]
    return count


def is_leaf(node: Node | None) -> bool:
    """True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """True if the node exists and has no parent."""
    return node is not None and node.parent is None


def height(tree: Node | None) -> int:
    """Number of edges on the longest downward path; 0 for no tree or a leaf."""
    return max(_levels(tree) - 1, 0)


def depth(tree: Node | None) -> int:
    """Number of edges from the node up to its root; 0 for no node."""
    count = 0
    node = tree.parent if tree is not None else None
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def count_leaves(tree: Node | None) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def count_internal(tree: Node | None) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Node | None) -> int:
    """Level count of the left subtree minus that of the right; 0 for no tree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """True if every node has either no children or two."""
    if tree is None:
        return False
    return all(len(_children(node)) != 1 for node in _walk(tree))


def is_perfect(tree: Node | None) -> bool:
    """True if every inner node has two children and all leaves share a depth."""
    if tree is None:
        return False
    leaf_depths = set()
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        kids = _children(node)
        if not kids:
            leaf_depths.add(level)
        elif len(kids) == 1:
            return False
        stack.extend((child, level + 1) for child in kids)
    return len(leaf_depths) == 1


def sibling(node: Node | None) -> Node | None:
    """The other child of the node's parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Node | None) -> Node | None:
    """The sibling of the node's parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)