"""Per-subtree values kept up to date by the tree.

A tree built with an aggregate calls `refresh(node)` on every node whose
children changed, deepest first, after each add, remove, rotation and
zig-zag. An implementation must only combine the node's own contribution
with the `aggregate` fields already stored on its children.
"""
from typing import Callable

from .node import Node


class NodeAggregate:

    def refresh(self, node: Node):
        raise NotImplementedError


class SubtreeSum(NodeAggregate):
    """Keeps the total of `weight(item)` over each subtree in `node.aggregate`"""

    def __init__(self, weight: Callable = None):
        self.weight = weight or (lambda item: item)

    def refresh(self, node: Node):
        total = self.weight(node.item)
        if node.left is not None:
            total += node.left.aggregate
        if node.right is not None:
            total += node.right.aggregate
        node.aggregate = total

    def left_total(self, node: Node):
        """Total over the node's left subtree, 0 when there is none"""
        return node.left.aggregate if node.left is not None else 0

    def right_total(self, node: Node):
        return node.right.aggregate if node.right is not None else 0
