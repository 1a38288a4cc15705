"""Binary trees built from sentinel-terminated integer sequences, with traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

SENTINEL = -1


@dataclass(slots=True)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _next_value(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough values to build the tree") from None


def _build_preorder(values: Iterator[int]) -> Optional[Node]:
    data = _next_value(values)
    if data == SENTINEL:
        return None
    node = Node(data)
    node.left = _build_preorder(values)
    node.right = _build_preorder(values)
    return node


def build_tree(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values in pre-order, where -1 marks a missing child.

    Raises ValueError when the values run out before the tree is complete.
    """
    return _build_preorder(iter(values))


def build_from_level_order(values: Iterable[int]) -> Node:
    """Build a tree from values in level order, where -1 marks a missing child.

    The first value is always the root. Raises ValueError when the values
    run out before every node has been given its children.
    """
    it = iter(values)
    root = Node(_next_value(it))
    pending: deque[Node] = deque([root])
    while pending:
        node = pending.popleft()
        left = _next_value(it)
        if left != SENTINEL:
            node.left = Node(left)
            pending.append(node.left)
        right = _next_value(it)
        if right != SENTINEL:
            node.right = Node(right)
            pending.append(node.right)
    return root


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Return the values of the tree level by level."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, node, right order."""
    result: list[int] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _line(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Optional[list[str]] = None) -> int:
    """Read a level-order tree from standard input and print its traversals."""
    parser = argparse.ArgumentParser(
        description="Read integers in level order (-1 for no child) and print traversals."
    )
    parser.parse_args(argv)
    try:
        values = [int(token) for token in sys.stdin.read().split()]
        root = build_from_level_order(values)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Level Order Traversal: ")
    for level in level_order(root):
        print(_line(level))
    print("InOrder Traversal: ")
    print(_line(inorder(root)))
    print("PreOrder Traversal: ")
    print(_line(preorder(root)))
    print("PostOrder Traversal: ")
    print(_line(postorder(root)))
    return 0


if __name__ == "__main__":
    sys.exit(main())