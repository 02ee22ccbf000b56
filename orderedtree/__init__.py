"""OrderedTree - ordered set container backed by a binary search tree.

OrderedTree stores distinct values under a caller-supplied total order and
offers insertion, removal, membership tests, height and four lazy
traversal orders:

    from orderedtree import OrderedTree, TraversalOrder

    tree = OrderedTree()
    for value in (5, 3, 8, 1, 4, 7, 9):
        tree.insert(value)
    list(tree.traverse(TraversalOrder.LEVEL_ORDER))   # [5, 3, 8, 1, 4, 7, 9]

The tree is not self-balancing and not thread-safe.
"""

__version__ = "0.1.0"

from .config import (
    InvalidConfigError,
    SuccessorPolicy,
    TraversalOrder,
    TreeConfig,
    parse_order,
)
from .core import (
    Node,
    OrderedTree,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    natural_order,
    reversed_order,
    key_order,
)
from .api import (
    build_tree,
    traverse_tree,
    collect_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Config
    "InvalidConfigError",
    "SuccessorPolicy",
    "TraversalOrder",
    "TreeConfig",
    "parse_order",
    # Core
    "Node",
    "OrderedTree",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "natural_order",
    "reversed_order",
    "key_order",
    # API
    "build_tree",
    "traverse_tree",
    "collect_values",
    "get_tree_stats",
]
