from wbtree import WeightBalancedTree, traversal


def render(node) -> str:
    """Compact shape of a subtree, e.g. 3(1(,2),5(4,7(6)))"""
    if node is None:
        return ""
    if node.left is None and node.right is None:
        return str(node.item)
    if node.right is None:
        return f"{node.item}({render(node.left)})"
    return f"{node.item}({render(node.left)},{render(node.right)})"


def check_tree(tree: WeightBalancedTree):
    """Asserts ordering, size fields and parent links hold for every node"""
    if tree.root is None:
        assert len(tree) == 0
        return
    assert tree.root.parent is None

    # children are visited first, so their sizes are already known good
    for node in traversal.post_order(tree.root):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
        assert node.left_size == (node.left.size if node.left is not None else 0)
        assert node.right_size == (node.right.size if node.right is not None else 0)

    items = list(tree)
    assert all(a < b for a, b in zip(items, items[1:]))
    assert len(items) == len(tree)
