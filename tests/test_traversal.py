import pytest

from wbtree import WeightBalancedTree, traversal

ITEMS = [4, 2, 6, 1, 3, 5, 7]


@pytest.fixture
def tree():
    yield WeightBalancedTree(ITEMS, maintain_balance=False)


@pytest.mark.parametrize(
        "method,expected", [
            ("pre_order", [4, 2, 1, 3, 6, 5, 7]),
            ("in_order", [1, 2, 3, 4, 5, 6, 7]),
            ("post_order", [1, 3, 2, 5, 7, 6, 4]),
            ("breadth_first", [4, 2, 6, 1, 3, 5, 7]),
        ]
)
def test_traversal(tree: WeightBalancedTree, method, expected):
    visited = []
    getattr(tree, method)(lambda node: visited.append(node.item))
    assert visited == expected


@pytest.mark.parametrize("method", ["pre_order", "in_order", "post_order", "breadth_first"])
def test_traversal_empty(method):
    visited = []
    getattr(WeightBalancedTree(), method)(visited.append)
    assert visited == []


def test_visitor_sees_sizes(tree: WeightBalancedTree):
    sizes = {}
    tree.pre_order(lambda node: sizes.update({node.item: (node.left_size, node.right_size)}))

    assert sizes[4] == (3, 3)
    assert sizes[2] == (1, 1)
    assert sizes[7] == (0, 0)


def test_uneven_shape():
    tree = WeightBalancedTree([5, 1, 4, 2, 3, 8, 6], maintain_balance=False)

    assert [n.item for n in traversal.pre_order(tree.root)] == [5, 1, 4, 2, 3, 8, 6]
    assert [n.item for n in traversal.post_order(tree.root)] == [3, 2, 4, 1, 6, 8, 5]
    assert [n.item for n in traversal.breadth_first(tree.root)] == [5, 1, 8, 4, 6, 2, 3]


@pytest.mark.parametrize(
        "items,expected", [
            ([], -1),
            ([1], 0),
            (ITEMS, 2),
            ([5, 1, 4, 2, 3, 8, 6], 4),
        ]
)
def test_depth(items, expected):
    tree = WeightBalancedTree(items, maintain_balance=False)
    assert traversal.depth(tree.root) == expected


def test_deep_tree_does_not_recurse():
    tree = WeightBalancedTree(range(2000), maintain_balance=False)

    assert sum(1 for _ in traversal.post_order(tree.root)) == 2000
    assert traversal.depth(tree.root) == 1999
    assert list(tree) == list(range(2000))
