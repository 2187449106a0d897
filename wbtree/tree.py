import logging
import random
from typing import Callable, Iterable, Iterator, Optional, Tuple

from . import traversal
from .aggregate import NodeAggregate
from .errors import DuplicateItemError, EmptyTreeError, InvalidOperationError, ItemNotFoundError
from .node import Direction, Node

logger = logging.getLogger(__name__)


def natural_order(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class WeightBalancedTree:
    """Binary search tree where every node knows the size of both its subtrees.

    When `maintain_balance` is set, every add and remove is followed by a walk
    towards the root that applies any rotation or zig-zag which would reduce
    the difference between a node's left and right subtree sizes.
    """

    def __init__(self, items: Iterable = None, *, maintain_balance: bool = True,
                 compare: Callable = None, aggregate: NodeAggregate = None):
        self.root: Optional[Node] = None
        self.maintain_balance = maintain_balance
        self.aggregate = aggregate
        self._compare = compare or natural_order
        # None once the cached value can no longer be kept up to date
        self._depth: Optional[int] = -1

        if items is not None:
            for item in items:
                self.add(item)

    @property
    def count(self) -> int:
        if self.root is None:
            return 0
        return self.root.size

    def __len__(self):
        return self.count

    def __contains__(self, item):
        return self.contains(item)

    def __iter__(self) -> Iterator:
        return (node.item for node in traversal.in_order(self.root))

    def is_empty(self):
        return self.root is None

    @property
    def depth(self) -> int:
        """0-based depth of the deepest node, -1 when the tree is empty.

        O(1) only until the first remove, rotation or zig-zag; after that every
        read walks the whole tree until `clear()`.
        """
        if self._depth is None:
            return traversal.depth(self.root)
        return self._depth

    def _invalidate_depth(self):
        if self._depth is not None:
            logger.debug("depth cache invalidated at %d", self._depth)
        self._depth = None

    def clear(self):
        self.root = None
        self._depth = -1

    # search

    def _find(self, item) -> Optional[Node]:
        node = self.root
        while node is not None:
            cmp = self._compare(item, node.item)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    def contains(self, item) -> bool:
        return self._find(item) is not None

    def get(self, item):
        """Returns the stored item which compares equal to `item`"""
        node = self._find(item)
        if node is None:
            raise ItemNotFoundError(item)
        return node.item

    @staticmethod
    def _extreme(node: Node, direction: Direction) -> Node:
        child = node.get_child(direction)
        while child is not None:
            node = child
            child = node.get_child(direction)
        return node

    def min(self):
        if self.root is None:
            raise EmptyTreeError()
        return self._extreme(self.root, Direction.LEFT).item

    def max(self):
        if self.root is None:
            raise EmptyTreeError()
        return self._extreme(self.root, Direction.RIGHT).item

    # mutation

    def add(self, item):
        if self.root is None:
            self.root = Node(item)
            self._refresh_aggregates_upwards(self.root)
            if self._depth is not None:
                self._depth = 0
            return

        parent = self.root
        level = 1
        while True:
            cmp = self._compare(item, parent.item)
            if cmp == 0:
                raise DuplicateItemError(item)
            direction = Direction.LEFT if cmp < 0 else Direction.RIGHT
            child = parent.get_child(direction)
            if child is None:
                break
            parent = child
            level += 1

        leaf = Node(item)
        parent.set_child(direction, leaf)

        node = leaf
        while node.parent is not None:
            node.parent.add_size(node.get_direction(), 1)
            node = node.parent
        self._refresh_aggregates_upwards(leaf)

        if self._depth is not None:
            self._depth = max(self._depth, level)

        if self.maintain_balance:
            self.balance_tree_up_from_node(leaf)

    def remove(self, item):
        node = self._find(item)
        if node is None:
            raise ItemNotFoundError(item)

        # with two children, take the neighbouring item from the heavier side
        # and physically remove the node that held it instead
        if node.left is not None and node.right is not None:
            if node.left_size > node.right_size:
                replacement = self._extreme(node.left, Direction.RIGHT)
            else:
                replacement = self._extreme(node.right, Direction.LEFT)
            logger.debug("replacing %r with %r before removal", node.item, replacement.item)
            node.item = replacement.item
            node = replacement

        self._detach(node)

    def _detach(self, node: Node):
        """Unlinks a node with at most one child"""
        child = node.left if node.left is not None else node.right
        parent = node.parent

        current = node
        while current.parent is not None:
            current.parent.add_size(current.get_direction(), -1)
            current = current.parent

        self._replace_in_parent(node, child)
        node.parent = node.left = node.right = None
        self._invalidate_depth()

        if parent is not None:
            self._refresh_aggregates_upwards(parent)

        if not self.maintain_balance:
            return
        if child is not None:
            self.balance_tree_up_from_node(child)
        elif parent is not None:
            # the sibling of the removed leaf, or the parent itself if none
            self.balance_tree_up_from_node(parent.left or parent.right or parent)

    def _replace_in_parent(self, old: Node, new: Optional[Node]):
        parent = old.parent
        if parent is None:
            self.root = new
            if new is not None:
                new.parent = None
        else:
            parent.set_child(old.get_direction(), new)

    def _refresh(self, node: Node):
        node.refresh_sizes()
        if self.aggregate is not None:
            self.aggregate.refresh(node)

    def _refresh_aggregates_upwards(self, node: Optional[Node]):
        if self.aggregate is None:
            return
        while node is not None:
            self.aggregate.refresh(node)
            node = node.parent

    # rotations

    def rotate_left(self, node: Node) -> Node:
        """Moves `node` down to the left, returning its right child which takes its place"""
        if node.right is None:
            raise InvalidOperationError(
                node.item,
                f"The node containing item '{node.item}' cannot be left-rotated as its right child is None."
            )
        return self._rotate(node, Direction.LEFT)

    def rotate_right(self, node: Node) -> Node:
        """Moves `node` down to the right, returning its left child which takes its place"""
        if node.left is None:
            raise InvalidOperationError(
                node.item,
                f"The node containing item '{node.item}' cannot be right-rotated as its left child is None."
            )
        return self._rotate(node, Direction.RIGHT)

    def _rotate(self, node: Node, direction: Direction) -> Node:
        promoted = node.get_child(direction.opposite())
        self._replace_in_parent(node, promoted)
        node.set_child(direction.opposite(), promoted.get_child(direction))
        promoted.set_child(direction, node)

        self._refresh(node)
        self._refresh(promoted)
        self._invalidate_depth()
        logger.debug("rotated %r %s, %r promoted", node.item, direction.name.lower(), promoted.item)
        return promoted

    def zig_zag_left(self, node: Node) -> Node:
        """Promotes a left child of a right child past both its parent and grandparent.

        The parent becomes the node's right child and the grandparent its left
        child. The node's former subtrees are handed to them in order.
        """
        self._check_zig_zag(node, Direction.LEFT)
        return self._zig_zag(node, Direction.LEFT)

    def zig_zag_right(self, node: Node) -> Node:
        """Promotes a right child of a left child past both its parent and grandparent"""
        self._check_zig_zag(node, Direction.RIGHT)
        return self._zig_zag(node, Direction.RIGHT)

    def _check_zig_zag(self, node: Node, direction: Direction):
        prefix = f"The node containing item '{node.item}' cannot have a {direction.name.lower()} " \
                 "zig-zag operation applied as"
        # the node sits on the far side of its parent, which sits on the near
        # side of the grandparent
        side = direction.opposite()
        node_side = node.get_direction()
        if node_side == Direction.ROOT:
            raise InvalidOperationError(node.item, f"{prefix} it has no parent.")
        if node_side == side:
            raise InvalidOperationError(
                node.item, f"{prefix} it is a {side.name.lower()} child of its parent."
            )
        parent_side = node.parent.get_direction()
        if parent_side == Direction.ROOT:
            raise InvalidOperationError(node.item, f"{prefix} it has no grandparent.")
        if parent_side == direction:
            raise InvalidOperationError(
                node.item, f"{prefix} its parent is a {direction.name.lower()} child of its grandparent."
            )

    def _zig_zag(self, node: Node, direction: Direction) -> Node:
        # zig_zag_right: node is a right child of a left child, so the
        # grandparent ends up on the node's right and the parent on its left
        parent = node.parent
        grandparent = parent.parent
        to_parent = node.get_child(direction.opposite())
        to_grandparent = node.get_child(direction)

        self._replace_in_parent(grandparent, node)
        parent.set_child(direction, to_parent)
        grandparent.set_child(direction.opposite(), to_grandparent)
        node.set_child(direction.opposite(), parent)
        node.set_child(direction, grandparent)

        self._refresh(parent)
        self._refresh(grandparent)
        self._refresh(node)
        self._invalidate_depth()
        logger.debug("zig-zagged %r %s past %r and %r", node.item, direction.name.lower(),
                     parent.item, grandparent.item)
        return node

    # balancing

    def _will_rotation_improve_balance(self, node: Node, direction: Direction) -> bool:
        promoted = node.get_child(direction.opposite())
        if promoted is None:
            return False
        current = abs(node.left_size - node.right_size)
        # sizes either side of the promoted node once the rotation is done
        near = node.get_size(direction) + 1 + promoted.get_size(direction)
        far = promoted.get_size(direction.opposite())
        return abs(near - far) < current

    def will_left_rotation_improve_balance(self, node: Node) -> bool:
        return self._will_rotation_improve_balance(node, Direction.LEFT)

    def will_right_rotation_improve_balance(self, node: Node) -> bool:
        return self._will_rotation_improve_balance(node, Direction.RIGHT)

    def _will_zig_zag_improve_balance(self, grandparent: Node, direction: Direction) -> bool:
        parent = grandparent.get_child(direction.opposite())
        if parent is None:
            return False
        node = parent.get_child(direction)
        if node is None:
            return False
        # only worth it when the parent leans towards the inner grandchild
        if parent.get_size(direction) <= parent.get_size(direction.opposite()):
            return False
        current = abs(grandparent.left_size - grandparent.right_size)
        near = grandparent.get_size(direction) + 1 + node.get_size(direction)
        far = node.get_size(direction.opposite()) + 1 + parent.get_size(direction.opposite())
        return abs(near - far) < current

    def will_left_zig_zag_improve_balance(self, node: Node) -> bool:
        """Whether zig-zagging the left child of `node`'s right child would balance `node` better"""
        return self._will_zig_zag_improve_balance(node, Direction.LEFT)

    def will_right_zig_zag_improve_balance(self, node: Node) -> bool:
        return self._will_zig_zag_improve_balance(node, Direction.RIGHT)

    def balance_tree_up_from_node(self, node: Node):
        """Walks from `node` to the root, rebalancing where a transform helps.

        Rotations of the parent are tried before zig-zags of the node itself.
        After a transform the walk carries on from whichever node took the
        rotated subtree's place, so it always moves up.
        Nodes demoted by a transform are not visited again, so a rotation may
        still improve balance below the path once the walk returns.
        """
        while node.parent is not None:
            parent = node.parent
            if self.will_left_rotation_improve_balance(parent):
                node = self.rotate_left(parent)
                continue
            if self.will_right_rotation_improve_balance(parent):
                node = self.rotate_right(parent)
                continue

            grandparent = parent.parent
            if grandparent is not None:
                node_side = node.get_direction()
                parent_side = parent.get_direction()
                if (node_side == Direction.RIGHT and parent_side == Direction.LEFT
                        and self.will_right_zig_zag_improve_balance(grandparent)):
                    self.zig_zag_right(node)
                    continue
                if (node_side == Direction.LEFT and parent_side == Direction.RIGHT
                        and self.will_left_zig_zag_improve_balance(grandparent)):
                    self.zig_zag_left(node)
                    continue

            node = parent

    # order statistics

    def get_count_less_than(self, key) -> int:
        count = 0
        node = self.root
        while node is not None:
            cmp = self._compare(node.item, key)
            if cmp < 0:
                count += node.left_size + 1
                node = node.right
            elif cmp > 0:
                node = node.left
            else:
                count += node.left_size
                break
        return count

    def get_count_greater_than(self, key) -> int:
        count = 0
        node = self.root
        while node is not None:
            cmp = self._compare(node.item, key)
            if cmp > 0:
                count += node.right_size + 1
                node = node.left
            elif cmp < 0:
                node = node.right
            else:
                count += node.right_size
                break
        return count

    def get_next_less_than(self, key) -> Tuple[bool, object]:
        """Returns (True, item) for the largest item below `key`, or (False, None)"""
        found, best = False, None
        node = self.root
        while node is not None:
            if self._compare(node.item, key) < 0:
                found, best = True, node.item
                node = node.right
            else:
                node = node.left
        return found, best

    def get_next_greater_than(self, key) -> Tuple[bool, object]:
        found, best = False, None
        node = self.root
        while node is not None:
            if self._compare(node.item, key) > 0:
                found, best = True, node.item
                node = node.left
            else:
                node = node.right
        return found, best

    def get_all_less_than(self, key) -> Iterator:
        """Yields every item below `key`, largest first"""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                if self._compare(node.item, key) < 0:
                    stack.append(node)
                    node = node.right
                else:
                    node = node.left
            node = stack.pop()
            yield node.item
            node = node.left

    def get_all_greater_than(self, key) -> Iterator:
        """Yields every item above `key`, smallest first"""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                if self._compare(node.item, key) > 0:
                    stack.append(node)
                    node = node.left
                else:
                    node = node.right
            node = stack.pop()
            yield node.item
            node = node.right

    def item_at(self, index: int):
        """Returns the item with exactly `index` smaller items in the tree"""
        count = self.count
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"index {index} out of range for a tree of {count} items")

        node = self.root
        while True:
            if index < node.left_size:
                node = node.left
            elif index == node.left_size:
                return node.item
            else:
                index -= node.left_size + 1
                node = node.right

    def random_item(self, rng: random.Random = None):
        if self.root is None:
            raise EmptyTreeError()
        rng = rng or random
        return self.item_at(rng.randrange(self.count))

    # traversal

    def pre_order(self, visitor: Callable[[Node], None]):
        for node in traversal.pre_order(self.root):
            visitor(node)

    def in_order(self, visitor: Callable[[Node], None]):
        for node in traversal.in_order(self.root):
            visitor(node)

    def post_order(self, visitor: Callable[[Node], None]):
        for node in traversal.post_order(self.root):
            visitor(node)

    def breadth_first(self, visitor: Callable[[Node], None]):
        for node in traversal.breadth_first(self.root):
            visitor(node)

    def pprint(self, node: Optional[Node], depth=0) -> str:
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.item} ({node.left_size}, {node.right_size})\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))
