"""Test fixtures for OrderedTree consumers.

These fixtures provide controlled access to the node structure for testing
purposes without making node-level details part of the container API.
"""

from typing import Any, List, Optional, Tuple

from ..core.node import Node
from ..core.traverser import InOrderTraverser, PreOrderTraverser
from ..core.tree import OrderedTree


class TreeInspector:
    """Public test fixture for structural verification.

    Example:
        tree = build_tree([5, 3, 8])
        inspector = TreeInspector(tree)

        inspector.assert_valid()
        assert inspector.shape() == (5, (3, None, None), (8, None, None))
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree to inspect.

        Args:
            tree: The OrderedTree under test
        """
        self._tree = tree

    def check_invariants(self) -> List[str]:
        """Check every structural invariant of the tree.

        Checks that each value lies strictly between the bounds set by its
        ancestors (which also rules out duplicates), that the stored count
        matches the number of reachable nodes, and that emptiness agrees
        between root and count.

        Returns:
            List of violations (empty if the tree is valid)
        """
        errors = []
        compare = self._tree._compare
        reachable = 0

        # (node, lower bound, upper bound); None means unbounded
        stack: List[Tuple[Node, Optional[Node], Optional[Node]]] = []
        if self._tree.root is not None:
            stack.append((self._tree.root, None, None))

        while stack:
            node, low, high = stack.pop()
            reachable += 1
            if low is not None and compare(node.value, low.value) <= 0:
                errors.append(
                    f"{node.value!r} is not greater than ancestor {low.value!r}"
                )
            if high is not None and compare(node.value, high.value) >= 0:
                errors.append(
                    f"{node.value!r} is not less than ancestor {high.value!r}"
                )
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))

        if reachable != self._tree.size():
            errors.append(
                f"size() is {self._tree.size()} but {reachable} nodes are reachable"
            )
        if (self._tree.root is None) != (self._tree.size() == 0):
            errors.append("root presence disagrees with size()")

        return errors

    def assert_valid(self) -> None:
        """Raise AssertionError listing every invariant violation."""
        errors = self.check_invariants()
        if errors:
            raise AssertionError("; ".join(errors))

    def shape(self) -> Any:
        """Nested ``(value, left, right)`` tuples describing the tree.

        Absent subtrees are None, so an empty tree has shape None.
        """
        built = {}
        # Children appear after their parent in pre-order, so build in reverse
        nodes = [node for node, _ in PreOrderTraverser().traverse(self._tree.root)]
        for node in reversed(nodes):
            built[id(node)] = (
                node.value,
                built.pop(id(node.left)) if node.left is not None else None,
                built.pop(id(node.right)) if node.right is not None else None,
            )
        if self._tree.root is None:
            return None
        return built[id(self._tree.root)]

    def root_value(self) -> Any:
        """Value held by the root node, or None for an empty tree."""
        root = self._tree.root
        return root.value if root is not None else None

    def leaf_values(self) -> List[Any]:
        """Values held by leaf nodes, in ascending order."""
        return [
            node.value
            for node, _ in InOrderTraverser().traverse(self._tree.root)
            if node.is_leaf()
        ]
