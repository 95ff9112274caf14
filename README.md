# bintrees

A small library of binary trees whose nodes hold integers and keep a link to their parent.

It covers:

- building trees by hand and measuring them;
- walking them in several orders;
- relations between nodes, completeness and rotations;
- binary search trees, AVL trees and max binary heaps;
- drawing a tree as text.

It is a library only. It has no command-line program, and it does not save trees to or load them from files.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Building and measuring trees

`bintrees.node.Node` is a dataclass with the fields `value`, `parent`, `left` and `right`. If you create a node with a parent, only the parent link is set. The parent's child slots are not changed. To attach a new child, use `insert_left` or `insert_right`. If the slot already holds a child, that child moves down under the new node.

```python
from bintrees.node import Node, height, size, count_leaves, is_full, is_perfect

root = Node(98)
left = root.insert_left(12)
root.insert_right(402)
left.insert_left(6)
left.insert_right(56)

height(root)        # 2
size(root)          # 5
count_leaves(root)  # 3
is_full(root)       # True
is_perfect(root)    # False
```

`Node.delete()` detaches a subtree from its parent and unlinks every node in it.

The `bintrees.node` module also has these functions:

- `depth(node)` gives the number of edges from the node up to its root.
- `count_internal(tree)` counts the nodes that have at least one child.
- `balance(tree)` gives the number of levels in the left subtree minus the number in the right subtree.
- `is_leaf(node)` and `is_root(node)` test a single node.
- `sibling(node)` and `uncle(node)` find related nodes, or return `None` if there is none.

Passing `None` as the tree gives 0 for the measurements and `False` for the checks.

## Traversals

The functions in `bintrees.walk` are generators. Each one yields node values in a different order:

```python
from bintrees.walk import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 6, 56, 402]
list(inorder(root))     # [6, 12, 56, 98, 402]
list(postorder(root))   # [6, 56, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 6, 56]
```

## Relations and rotations

`bintrees.relations` provides these functions:

- `lowest_common_ancestor(first, second)` returns the deepest node that is an ancestor of both. A node counts as its own ancestor. It returns `None` if either node is missing or the two nodes are in different trees.
- `is_complete(tree)` checks that every level is full except possibly the last, and that the last level is filled from the left.
- `rotate_left(tree)` and `rotate_right(tree)` rotate a subtree in place and return its new root. Parent links are updated, including the link from the node above the subtree. If there is no child to rotate, they return `None` and change nothing.

## Binary search trees

`bintrees.bst` keeps values in strictly increasing in-order.

- `insert(root, value)` returns an `Insertion` named tuple `(root, node)`. It raises `ValueError` if the value is already present.
- `from_values(values)` inserts the values in order and skips repeats.
- `search(tree, value)` returns the node that holds the value, or `None`.
- `remove(root, value)` returns the new root. It raises `KeyError` if the value is absent. A node with two children takes the value of its in-order successor, and the successor is removed instead.
- `is_bst(tree)` checks the ordering.

## AVL trees

`bintrees.avl` provides functions for height-balanced search trees:

- `insert(root, value)` rebalances the tree on the way back to the root. It returns an `Insertion` with the new root, and raises `ValueError` on a duplicate.
- `from_values(values)` builds a tree by insertion and skips repeats.
- `from_sorted(values)` builds a balanced tree directly from an ascending sequence.
- `remove(root, value)` removes the value if it is present, rebalances the tree and returns the new root.
- `is_avl(tree)` checks both the ordering and the balance.

```python
from bintrees import avl

tree = avl.from_values([98, 402, 12, 46, 128, 256, 512, 50])
avl.is_avl(tree)  # True
```

## Max binary heaps

`bintrees.heap` stores a max heap as a complete tree of linked nodes.

- `insert(root, value)` puts the value in the first free slot and sifts it up. It returns an `Insertion` whose `node` is where the value ended up.
- `from_values(values)` inserts each value in turn.
- `extract(root)` returns an `Extraction` named tuple `(value, root)` that holds the largest value. It raises `IndexError` on an empty heap.
- `to_sorted_list(root)` empties the heap and returns its values from largest to smallest.
- `is_heap(tree)` checks that the tree is complete and that every node is greater than its children.

```python
from bintrees import heap

h = heap.from_values([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
heap.to_sorted_list(h)  # [91, 87, 84, 79, 68, 47, 34, 32, 21, 2]
```

## Drawing

```python
from bintrees.display import render, print_tree

text = render(root)  # one line per level; "" for no tree
print_tree(root)     # writes the same text to standard output
```

`print_tree` also accepts a `file` argument to write to another stream. Each value is drawn zero-padded in parentheses, such as `(098)`. Dashes and dots on the line above a level connect each child to its parent.