from .aggregate import NodeAggregate, SubtreeSum
from .errors import DuplicateItemError, EmptyTreeError, InvalidOperationError, ItemNotFoundError, TreeError
from .export import to_graph
from .inserter import insert_balanced
from .node import Direction, Node
from .rangetree import IntegerRange, RangeTree
from .tree import WeightBalancedTree
