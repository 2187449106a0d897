import networkx as nx

from wbtree import WeightBalancedTree, to_graph


def test_to_graph():
    tree = WeightBalancedTree([4, 2, 6, 1, 3, 5, 7], maintain_balance=False)

    graph = to_graph(tree)

    assert graph.number_of_nodes() == 7
    assert graph.number_of_edges() == 6
    assert nx.is_arborescence(graph)
    assert graph.nodes[4] == {"left_size": 3, "right_size": 3}
    assert graph.edges[4, 2]["direction"] == "left"
    assert graph.edges[6, 7]["direction"] == "right"
    assert set(graph.successors(2)) == {1, 3}


def test_to_graph_depth_matches():
    tree = WeightBalancedTree(range(50))

    graph = to_graph(tree)

    lengths = nx.single_source_shortest_path_length(graph, tree.root.item)
    assert max(lengths.values()) == tree.depth
    assert sorted(graph.nodes) == list(range(50))


def test_to_graph_empty():
    assert to_graph(WeightBalancedTree()).number_of_nodes() == 0
