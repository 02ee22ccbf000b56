"""Tests for the four traversal orders and their iterator contract."""

import pytest

from orderedtree import (
    OrderedTree,
    TraversalOrder,
    TreeConfig,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    build_tree,
)


EXAMPLE_VALUES = [5, 3, 8, 1, 4, 7, 9]

EXPECTED_ORDERS = {
    TraversalOrder.PRE_ORDER: [5, 3, 1, 4, 8, 7, 9],
    TraversalOrder.IN_ORDER: [1, 3, 4, 5, 7, 8, 9],
    TraversalOrder.POST_ORDER: [1, 4, 3, 7, 9, 8, 5],
    TraversalOrder.LEVEL_ORDER: [5, 3, 8, 1, 4, 7, 9],
}


@pytest.fixture
def example_tree():
    """Balanced tree of height 3.

             5
           /   \\
          3     8
         / \\   / \\
        1   4 7   9
    """
    return build_tree(EXAMPLE_VALUES)


@pytest.fixture
def lopsided_tree():
    """Unbalanced tree with one-child nodes on both sides.

            10
           /  \\
          4    20
           \\   /
            6 15
           /    \\
          5      17
    """
    return build_tree([10, 4, 20, 6, 15, 5, 17])


@pytest.mark.parametrize("order", list(TraversalOrder))
def test_example_tree_orders(example_tree, order):
    assert list(example_tree.traverse(order)) == EXPECTED_ORDERS[order]


@pytest.mark.parametrize("order,expected", [
    (TraversalOrder.PRE_ORDER, [10, 4, 6, 5, 20, 15, 17]),
    (TraversalOrder.IN_ORDER, [4, 5, 6, 10, 15, 17, 20]),
    (TraversalOrder.POST_ORDER, [5, 6, 4, 17, 15, 20, 10]),
    (TraversalOrder.LEVEL_ORDER, [10, 4, 20, 6, 15, 5, 17]),
])
def test_lopsided_tree_orders(lopsided_tree, order, expected):
    assert list(lopsided_tree.traverse(order)) == expected


def test_order_names_are_accepted(example_tree):
    assert list(example_tree.traverse("pre_order")) == EXPECTED_ORDERS[TraversalOrder.PRE_ORDER]
    assert list(example_tree.traverse("level")) == EXPECTED_ORDERS[TraversalOrder.LEVEL_ORDER]
    assert list(example_tree.traverse("Post-Order")) == EXPECTED_ORDERS[TraversalOrder.POST_ORDER]


def test_unknown_order_name_raises(example_tree):
    with pytest.raises(ValueError, match="Unknown traversal order"):
        example_tree.traverse("zigzag")


def test_default_order_comes_from_config():
    tree = build_tree(EXAMPLE_VALUES, config=TreeConfig(default_order=TraversalOrder.LEVEL_ORDER))
    assert list(tree.traverse()) == EXPECTED_ORDERS[TraversalOrder.LEVEL_ORDER]
    # Plain iteration stays ascending regardless of the default
    assert list(tree) == EXPECTED_ORDERS[TraversalOrder.IN_ORDER]


def test_traversal_is_lazy(example_tree):
    """Values are produced one at a time."""
    iterator = example_tree.traverse(TraversalOrder.IN_ORDER)
    assert next(iterator) == 1
    assert next(iterator) == 3
    # Abandoning the iterator leaves the tree untouched
    del iterator
    assert example_tree.size() == 7


def test_traversal_is_single_use(example_tree):
    iterator = example_tree.traverse(TraversalOrder.PRE_ORDER)
    assert list(iterator) == EXPECTED_ORDERS[TraversalOrder.PRE_ORDER]
    assert list(iterator) == []
    # A fresh call starts over
    assert list(example_tree.traverse(TraversalOrder.PRE_ORDER)) == EXPECTED_ORDERS[TraversalOrder.PRE_ORDER]


def test_traversal_captures_root_at_call_time():
    tree = build_tree([2, 1, 3])
    iterator = tree.traverse(TraversalOrder.PRE_ORDER)
    tree.clear()
    assert list(iterator) == [2, 1, 3]


def test_traverse_with_depth(example_tree):
    pairs = list(example_tree.traverse_with_depth(TraversalOrder.LEVEL_ORDER))
    assert pairs == [(5, 0), (3, 1), (8, 1), (1, 2), (4, 2), (7, 2), (9, 2)]


@pytest.mark.parametrize("traverser_class,order", [
    (PreOrderTraverser, TraversalOrder.PRE_ORDER),
    (InOrderTraverser, TraversalOrder.IN_ORDER),
    (PostOrderTraverser, TraversalOrder.POST_ORDER),
    (LevelOrderTraverser, TraversalOrder.LEVEL_ORDER),
])
class TestTraverserClasses:
    """Traversers used directly on nodes."""

    def test_factory_returns_matching_class(self, traverser_class, order):
        traverser = create_traverser(order)
        assert isinstance(traverser, traverser_class)
        assert traverser.order is order

    def test_none_root_yields_nothing(self, traverser_class, order):
        assert list(traverser_class().traverse(None)) == []

    def test_yields_nodes_with_depths(self, traverser_class, order, example_tree):
        pairs = list(traverser_class().traverse(example_tree.root))
        assert [node.value for node, _ in pairs] == EXPECTED_ORDERS[order]
        depths = {node.value: depth for node, depth in pairs}
        assert depths == {5: 0, 3: 1, 8: 1, 1: 2, 4: 2, 7: 2, 9: 2}

    def test_subtree_traversal(self, traverser_class, order, example_tree):
        subtree = example_tree.root.right
        values = [node.value for node, _ in traverser_class().traverse(subtree)]
        assert sorted(values) == [7, 8, 9]


def test_create_traverser_rejects_unknown_order():
    with pytest.raises(ValueError):
        create_traverser("in_order")


def test_descending_tree_in_order():
    tree = OrderedTree(config=TreeConfig.reversed())
    for value in EXAMPLE_VALUES:
        tree.insert(value)
    assert list(tree) == [9, 8, 7, 5, 4, 3, 1]
    assert list(tree.traverse(TraversalOrder.LEVEL_ORDER)) == [5, 8, 3, 9, 7, 4, 1]
