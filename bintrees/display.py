"""Text drawing of a binary tree."""

from __future__ import annotations

import sys
from typing import TextIO

from bintrees.node import Node, height


def _put(row: list[str], column: int, text: str) -> None:
    end = column + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    for offset, char in enumerate(text):
        if column + offset >= 0:
            row[column + offset] = char


def _draw(node: Node | None, offset: int, level: int, grid: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, level + 1, grid)
    right = _draw(node.right, offset + left + width, level + 1, grid)
    _put(grid[level], offset + left, label)
    if level and is_left:
        _put(grid[level - 1], offset + left + width // 2, "-" * (width + right))
        _put(grid[level - 1], offset + left + width // 2, ".")
    elif level:
        _put(grid[level - 1], offset - width // 2, "-" * (left + width))
        _put(grid[level - 1], offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Draw the tree as text, one line per level; empty for no tree."""
    if tree is None:
        return ""
    grid: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, grid)
    lines = []
    for row in grid:
        line = "".join(row)
        stripped = line.rstrip(" ")
        lines.append(stripped if len(stripped) >= 2 else line[:2])
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))