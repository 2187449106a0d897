import networkx as nx

from . import traversal
from .tree import WeightBalancedTree


def to_graph(tree: WeightBalancedTree) -> nx.DiGraph:
    """Builds a directed graph with an edge from every node's item to each child's item"""
    graph = nx.DiGraph()
    for node in traversal.breadth_first(tree.root):
        graph.add_node(node.item, left_size=node.left_size, right_size=node.right_size)
        if node.parent is not None:
            graph.add_edge(node.parent.item, node.item, direction=node.get_direction().name.lower())
    return graph
