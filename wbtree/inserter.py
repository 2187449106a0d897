import logging
from typing import Sequence

from .errors import TreeError
from .tree import WeightBalancedTree

logger = logging.getLogger(__name__)


def median_order(elements: Sequence, start: int = 0, end: int = None) -> list:
    """Orders sorted elements so each one precedes everything on either side of it

    Args:
        elements (Sequence): sorted elements
        start (int): first index of the segment to order
        end (int): index one past the end of the segment

    Returns:
        list: the segment's median, then the ordering of its lower half,
            then the ordering of its upper half
    """
    if end is None:
        end = len(elements)
    if start >= end:
        return []

    mid = start + (end - start) // 2
    return [elements[mid]] + median_order(elements, start, mid) + median_order(elements, mid + 1, end)


def insert_balanced(tree: WeightBalancedTree, elements: Sequence):
    """Clears the tree and fills it with `elements` at minimum depth

    Medians are inserted first, so a tree which does not maintain its own
    balance still ends up as shallow as possible.
    """
    if len(elements) == 0:
        raise ValueError("The specified array of elements is empty.")

    tree.clear()
    ordered = median_order(sorted(elements))
    logger.debug("inserting %d elements median first", len(ordered))
    for item in ordered:
        try:
            tree.add(item)
        except TreeError as e:
            raise TreeError(f"Error encountered when adding item '{item}' to the tree.") from e
