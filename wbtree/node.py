import enum
from typing import Optional


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1

    def opposite(self) -> "Direction":
        return Direction(1 - self)


class Node:

    def __init__(self, item):
        self.parent: Optional[Node] = None
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.item = item
        # number of nodes in each subtree, not counting this one
        self.left_size = 0
        self.right_size = 0
        # per-subtree value maintained by a NodeAggregate, if the tree has one
        self.aggregate = None

    @property
    def size(self) -> int:
        """Number of nodes in the subtree rooted at this node"""
        return self.left_size + self.right_size + 1

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node
        if node is not None:
            node.parent = self

    def get_size(self, direction: Direction) -> int:
        if direction == Direction.LEFT:
            return self.left_size
        return self.right_size

    def add_size(self, direction: Direction, delta: int):
        if direction == Direction.LEFT:
            self.left_size += delta
        else:
            self.right_size += delta

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def refresh_sizes(self):
        """Recompute both size fields from the current children"""
        self.left_size = self.left.size if self.left is not None else 0
        self.right_size = self.right.size if self.right is not None else 0

    def __repr__(self):
        return f"Node({self.item!r}, left_size={self.left_size}, right_size={self.right_size})"
