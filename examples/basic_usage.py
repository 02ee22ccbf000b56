#!/usr/bin/env python3
"""
Basic OrderedTree example.

This example demonstrates:
- Building a tree from values given on the command line
- The four traversal orders
- Removal of a node with two children under both successor policies
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtree import (
    SuccessorPolicy,
    TraversalOrder,
    TreeConfig,
    build_tree,
    get_tree_stats,
)


def main():
    """Build a tree, print its traversals, then remove the root."""
    values = [int(arg) for arg in sys.argv[1:]] or [5, 3, 8, 1, 4, 7, 9]

    tree = build_tree(values)
    print(f"Inserted: {values}")
    print("-" * 50)

    for order in TraversalOrder:
        print(f"  {order.value:<12} {list(tree.traverse(order))}")

    stats = get_tree_stats(tree)
    print(f"\nTree Summary:")
    print(f"  Size: {tree.size()}")
    print(f"  Height: {stats['height']}")
    print(f"  Leaves: {stats['leaf_nodes']}")
    print(f"  Degenerate: {stats['is_degenerate']}")

    root_value = values[0]
    print(f"\nRemoving root value {root_value}:")
    for policy in SuccessorPolicy:
        tree = build_tree(values, config=TreeConfig(successor_policy=policy))
        tree.remove(root_value)
        level = list(tree.traverse(TraversalOrder.LEVEL_ORDER))
        print(f"  {policy.value:<14} level order {level}")


if __name__ == "__main__":
    main()
