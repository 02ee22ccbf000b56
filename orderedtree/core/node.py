"""Node representation for OrderedTree.

A Node is a plain data container: one value and two child slots. Each node
is owned by exactly one parent slot (or by the tree, for the root) and
holds no reference back to its parent.
"""

from typing import Any, Optional


class Node:
    """A single element of the tree.

    The value is only rewritten in place when a node with two children is
    removed and its successor's value is spliced in.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value: Any = value
        self.left: Optional['Node'] = None
        self.right: Optional['Node'] = None

    def is_leaf(self) -> bool:
        """True if the node has neither a left nor a right child."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value!r})"
