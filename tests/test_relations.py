from hypothesis import given
from hypothesis import strategies as st

from bintrees.node import Node, size
from bintrees.relations import (
    is_complete,
    lowest_common_ancestor,
    rotate_left,
    rotate_right,
)
from bintrees.walk import inorder, levelorder


def _level_tree(count):
    nodes = []
    for index in range(count):
        parent = nodes[(index - 1) // 2] if index else None
        node = Node(index, parent)
        if parent is not None:
            if index % 2:
                parent.left = node
            else:
                parent.right = node
        nodes.append(node)
    return (nodes[0] if nodes else None), nodes


def _ancestors(node):
    chain = []
    while node is not None:
        chain.append(node)
        node = node.parent
    return chain


def _is_ancestor(candidate, node):
    return any(a is candidate for a in _ancestors(node))


def _check_links(tree):
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)


def test_lca_of_siblings_is_parent():
    root, nodes = _level_tree(7)
    assert lowest_common_ancestor(nodes[3], nodes[4]) is nodes[1]
    assert lowest_common_ancestor(nodes[3], nodes[6]) is root


def test_lca_of_node_and_its_descendant_is_node():
    _, nodes = _level_tree(7)
    assert lowest_common_ancestor(nodes[1], nodes[4]) is nodes[1]
    assert lowest_common_ancestor(nodes[5], nodes[2]) is nodes[2]


def test_lca_of_node_with_itself():
    _, nodes = _level_tree(3)
    assert lowest_common_ancestor(nodes[2], nodes[2]) is nodes[2]


def test_lca_missing_or_unrelated():
    _, nodes = _level_tree(3)
    assert lowest_common_ancestor(None, nodes[0]) is None
    assert lowest_common_ancestor(nodes[0], None) is None
    assert lowest_common_ancestor(nodes[1], Node(9)) is None


@given(st.integers(min_value=1, max_value=60), st.data())
def test_lca_is_deepest_common_ancestor(count, data):
    _, nodes = _level_tree(count)
    first = nodes[data.draw(st.integers(0, count - 1))]
    second = nodes[data.draw(st.integers(0, count - 1))]
    found = lowest_common_ancestor(first, second)
    assert _is_ancestor(found, first)
    assert _is_ancestor(found, second)
    for child in (found.left, found.right):
        if child is not None:
            assert not (_is_ancestor(child, first) and _is_ancestor(child, second))
    assert lowest_common_ancestor(second, first) is found


def test_is_complete_none_is_false():
    assert is_complete(None) is False


@given(st.integers(min_value=1, max_value=80))
def test_level_built_trees_are_complete(count):
    root, _ = _level_tree(count)
    assert is_complete(root) is True


def test_right_child_without_left_is_not_complete():
    root = Node(1)
    root.insert_right(2)
    assert is_complete(root) is False


def test_gap_in_middle_of_level_is_not_complete():
    root, nodes = _level_tree(7)
    nodes[2].left = None
    assert is_complete(root) is False


def test_missing_last_slot_only_is_complete():
    root, nodes = _level_tree(7)
    nodes[2].right = None
    assert is_complete(root) is True


def test_rotate_left_chain():
    root = Node(1)
    middle = root.insert_right(2)
    bottom = middle.insert_right(3)
    new_root = rotate_left(root)
    assert new_root is middle
    assert middle.parent is None
    assert middle.left is root
    assert middle.right is bottom
    assert root.parent is middle
    assert root.right is None


def test_rotate_right_chain():
    root = Node(3)
    middle = root.insert_left(2)
    bottom = middle.insert_left(1)
    new_root = rotate_right(root)
    assert new_root is middle
    assert middle.parent is None
    assert middle.right is root
    assert middle.left is bottom
    assert root.left is None


def test_rotation_without_child_returns_none():
    node = Node(5)
    assert rotate_left(node) is None
    assert rotate_right(node) is None
    assert rotate_left(None) is None
    assert rotate_right(None) is None


def test_rotation_updates_grandparent_link():
    root, nodes = _level_tree(15)
    pivot = rotate_left(nodes[2])
    assert pivot is nodes[6]
    assert root.right is pivot
    assert pivot.parent is root
    pivot = rotate_right(nodes[1])
    assert pivot is nodes[3]
    assert root.left is pivot
    _check_links(root)


@given(st.integers(min_value=2, max_value=60))
def test_rotations_preserve_inorder_and_invert(count):
    root, _ = _level_tree(count)
    before = list(inorder(root))
    levels = list(levelorder(root))
    rotated = rotate_right(root)
    assert list(inorder(rotated)) == before
    assert size(rotated) == count
    _check_links(rotated)
    restored = rotate_left(rotated)
    assert restored is root
    assert list(levelorder(restored)) == levels