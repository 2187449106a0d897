import random

import pytest

from wbtree import RangeTree, WeightBalancedTree

ITEMS = random.Random(0).sample(range(1000000), 5000)


@pytest.fixture(scope="session")
def filled():
    yield WeightBalancedTree(ITEMS)


def fill(items, maintain_balance):
    return WeightBalancedTree(items, maintain_balance=maintain_balance)


@pytest.mark.benchmark
@pytest.mark.parametrize("maintain_balance", [True, False], ids=["balanced", "unbalanced"])
def test_add(benchmark, maintain_balance):
    benchmark(fill, ITEMS, maintain_balance)


@pytest.mark.benchmark
def test_add_ascending(benchmark):
    benchmark(fill, range(5000), True)


@pytest.mark.benchmark
def test_count_less_than(benchmark, filled: WeightBalancedTree):
    benchmark(lambda: [filled.get_count_less_than(key) for key in range(0, 1000000, 1000)])


@pytest.mark.benchmark
def test_item_at(benchmark, filled: WeightBalancedTree):
    benchmark(lambda: [filled.item_at(i) for i in range(len(filled))])


@pytest.mark.benchmark
def test_locate(benchmark):
    ranges = RangeTree()
    for start in range(0, 100000, 10):
        ranges.add_range(start, 5)
    benchmark(lambda: [ranges.locate(offset) for offset in range(0, ranges.total_length, 7)])
