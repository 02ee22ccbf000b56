"""Core building blocks for OrderedTree.

This package contains the node representation, the comparison helpers,
the traversal strategies and the container itself.
"""

from .node import Node
from .ordering import natural_order, reversed_order, key_order
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .tree import OrderedTree

__all__ = [
    "Node",
    "natural_order",
    "reversed_order",
    "key_order",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "OrderedTree",
]
