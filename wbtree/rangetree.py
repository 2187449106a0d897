"""A set of disjoint integer ranges which can be indexed as one sequence.

Each node's aggregate holds the total length of the ranges in its subtree,
so `locate` finds the n-th integer covered by the set in O(height) without
expanding any range.
"""
import logging
from typing import Iterator

from .aggregate import SubtreeSum
from .tree import WeightBalancedTree, natural_order

logger = logging.getLogger(__name__)


class IntegerRange:

    def __init__(self, start: int, length: int):
        if length < 1:
            raise ValueError(f"range length must be positive, got {length}")
        self.start = start
        self.length = length

    @property
    def end(self) -> int:
        """Last integer in the range"""
        return self.start + self.length - 1

    def __eq__(self, other):
        if not isinstance(other, IntegerRange):
            return NotImplemented
        return self.start == other.start and self.length == other.length

    def __hash__(self):
        return hash((self.start, self.length))

    def __repr__(self):
        return f"IntegerRange({self.start}, {self.length})"


def compare_start(a: IntegerRange, b: IntegerRange) -> int:
    return natural_order(a.start, b.start)


class RangeTree:

    def __init__(self, maintain_balance: bool = True):
        self._lengths = SubtreeSum(lambda r: r.length)
        self.tree = WeightBalancedTree(
            maintain_balance=maintain_balance,
            compare=compare_start,
            aggregate=self._lengths,
        )

    def __len__(self):
        return len(self.tree)

    def __iter__(self) -> Iterator[IntegerRange]:
        return iter(self.tree)

    @property
    def total_length(self) -> int:
        if self.tree.root is None:
            return 0
        return self.tree.root.aggregate

    def add_range(self, start: int, length: int) -> IntegerRange:
        new = IntegerRange(start, length)
        # a range can only collide with its immediate neighbours
        found, below = self.tree.get_next_less_than(new)
        if found and below.end >= new.start:
            raise ValueError(f"{new!r} overlaps {below!r}")
        found, above = self.tree.get_next_greater_than(new)
        if found and new.end >= above.start:
            raise ValueError(f"{new!r} overlaps {above!r}")
        self.tree.add(new)
        return new

    def remove_range(self, start: int) -> IntegerRange:
        """Removes and returns the range beginning at `start`"""
        existing = self.tree.get(IntegerRange(start, 1))
        self.tree.remove(existing)
        return existing

    def locate(self, offset: int) -> int:
        """Returns the integer at `offset` when all ranges are laid end to end in order"""
        if not 0 <= offset < self.total_length:
            raise IndexError(f"offset {offset} out of range for a total length of {self.total_length}")

        node = self.tree.root
        while True:
            left = self._lengths.left_total(node)
            if offset < left:
                node = node.left
                continue
            offset -= left
            if offset < node.item.length:
                logger.debug("offset falls in %r", node.item)
                return node.item.start + offset
            offset -= node.item.length
            node = node.right
