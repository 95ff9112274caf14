"""Binary trees with parent links: measurements, traversals, rotations, BST, AVL, heaps and drawing."""

__version__ = "0.1.0"

__all__ = ["node", "display", "walk", "relations", "bst", "avl", "heap"]