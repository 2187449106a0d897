"""Iterative walks over a tree of nodes.

Each walk is a generator of nodes, so trees of any depth can be traversed
without hitting the recursion limit. None of them may be used while the
tree is being modified.
"""
from collections import deque
from typing import Iterator, Optional

from .node import Node


def pre_order(root: Optional[Node]) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        # right goes on first so the left subtree is visited first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def in_order(root: Optional[Node]) -> Iterator[Node]:
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def post_order(root: Optional[Node]) -> Iterator[Node]:
    stack = []
    last = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        peek = stack[-1]
        # descend right only once, on the way back up from the left subtree
        if peek.right is not None and last is not peek.right:
            node = peek.right
        else:
            yield peek
            last = stack.pop()


def breadth_first(root: Optional[Node]) -> Iterator[Node]:
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def depth(root: Optional[Node]) -> int:
    """Returns the 0-based depth of the deepest node, or -1 for an empty tree"""
    deepest = -1
    level = [root] if root is not None else []
    while level:
        deepest += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return deepest
