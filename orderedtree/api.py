"""High-level API for OrderedTree.

This module provides simple, functional interfaces for common operations.
These functions wrap the OrderedTree class for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from .config import TraversalOrder, TreeConfig, parse_order
from .core.traverser import LevelOrderTraverser
from .core.tree import OrderedTree


def build_tree(
    values: Iterable[Any],
    compare: Optional[Callable[[Any, Any], int]] = None,
    config: Optional[TreeConfig] = None,
) -> OrderedTree:
    """Build a tree by inserting values in the given order.

    The shape of the result depends on insertion order; duplicates are
    skipped silently.

    Args:
        values: Values to insert
        compare: Three-way comparison (default: values' own operators)
        config: Full tree configuration

    Returns:
        OrderedTree holding the distinct values

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4, 7, 9])
        >>> collect_values(tree, "level_order")
        [5, 3, 8, 1, 4, 7, 9]
    """
    tree: OrderedTree = OrderedTree(compare=compare, config=config)
    for value in values:
        tree.insert(value)
    return tree


def traverse_tree(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[Any]:
    """Simple interface for lazy traversal.

    The order is parsed and the root captured when this function is called,
    not on the first next().

    Args:
        tree: Tree to traverse
        order: Traversal order (pre_order, in_order, post_order, level_order)

    Returns:
        Iterator over stored values in the requested order

    Raises:
        ValueError: If the order name is not recognized
    """
    return tree.traverse(parse_order(order))


def collect_values(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> List[Any]:
    """Eager variant of traverse_tree returning a list."""
    return list(tree.traverse(parse_order(order)))


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Compute statistics about the shape of a tree.

    Args:
        tree: Tree to analyse

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['height'], stats['leaf_nodes']
        (2, 2)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {}
    }

    for node, depth in LevelOrderTraverser().traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )
    # Every level holds exactly one node
    stats['is_degenerate'] = (
        stats['total_nodes'] > 2 and stats['height'] == stats['total_nodes']
    )

    return stats
