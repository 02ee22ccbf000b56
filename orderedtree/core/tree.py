"""OrderedTree: an ordered set backed by an unbalanced binary search tree.

Values are kept in a chain of Nodes where every value in a node's left
subtree sorts strictly before the node's value and every value in its
right subtree sorts strictly after it. Duplicates are never stored.

The tree does no rebalancing. Inserting already-sorted values produces a
linked-list shaped tree with O(n) operations, so every walk below is
iterative rather than recursive.

Not thread-safe. Mutating a tree while one of its traversal iterators is
being consumed is undefined behaviour and is not detected.
"""

import dataclasses
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar, Union

from .node import Node
from .ordering import natural_order
from .traverser import LevelOrderTraverser, create_traverser
from ..config import (
    InvalidConfigError,
    SuccessorPolicy,
    TraversalOrder,
    TreeConfig,
    parse_order,
)

T = TypeVar('T')


class OrderedTree(Generic[T]):
    """Ordered set container over caller-ordered values.

    Example:
        >>> tree = OrderedTree()
        >>> for value in (5, 3, 8, 1, 4, 7, 9):
        ...     tree.insert(value)
        >>> list(tree)
        [1, 3, 4, 5, 7, 8, 9]
        >>> tree.height()
        3
    """

    def __init__(self,
                 compare: Optional[Callable[[T, T], int]] = None,
                 config: Optional[TreeConfig] = None) -> None:
        """Create an empty tree.

        Args:
            compare: Three-way comparison (default: values' own operators)
            config: Full tree configuration

        Raises:
            InvalidConfigError: If the configuration is invalid, or if a
                comparison is given both directly and through config
        """
        if config is None:
            config = TreeConfig(compare=compare)
        elif compare is not None:
            if config.compare is not None:
                raise InvalidConfigError(
                    "compare given both as an argument and in config"
                )
            config = dataclasses.replace(config, compare=compare)

        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self._compare = config.compare if config.compare is not None else natural_order
        self._root: Optional[Node] = None
        self._count = 0

    @property
    def root(self) -> Optional[Node]:
        """Root node, or None for an empty tree.

        Exposed for inspection. Rewiring nodes directly bypasses the count
        and may break the ordering invariant.
        """
        return self._root

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains(self, value: T) -> bool:
        """Check whether a value equal to ``value`` is stored."""
        node, _, _ = self._locate(value)
        return node is not None

    def insert(self, value: T) -> bool:
        """Add a value to the tree.

        Args:
            value: Value to add

        Returns:
            True if the value was added, False if an equal value was
            already present (the tree is left unchanged)
        """
        if self.config.check_before_mutation and self.contains(value):
            return False

        node, parent, side = self._locate(value)
        if node is not None:
            return False

        self._set_child(parent, side, Node(value))
        self._count += 1
        return True

    def remove(self, value: T) -> bool:
        """Remove the value equal to ``value``.

        A node with at most one child is replaced by that child. A node
        with two children takes over its successor's value (chosen by
        ``config.successor_policy``) and the successor's node is spliced
        out instead, so exactly one node leaves the tree.

        Args:
            value: Value to remove

        Returns:
            True if a value was removed, False if none was present (the
            tree is left unchanged)
        """
        if self.config.check_before_mutation and not self.contains(value):
            return False

        node, parent, side = self._locate(value)
        if node is None:
            return False

        self._remove_node(node, parent, side)
        self._count -= 1
        return True

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path.

        An empty tree has height 0 and a single node has height 1.
        """
        height = 0
        for _, depth in LevelOrderTraverser().traverse(self._root):
            height = max(height, depth + 1)
        return height

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def copy(self) -> 'OrderedTree[T]':
        """Return a new tree with the same config, values and shape."""
        clone: OrderedTree[T] = OrderedTree(config=self.config)
        for value in self.traverse(TraversalOrder.PRE_ORDER):
            clone.insert(value)
        return clone

    def traverse(self, order: Union[TraversalOrder, str, None] = None) -> Iterator[T]:
        """Lazily yield the stored values in the given order.

        The root is captured when this method is called. The returned
        iterator is single-use; call traverse() again to start over.

        Args:
            order: TraversalOrder or its name (default: config.default_order)

        Returns:
            Iterator over values
        """
        return (node.value for node, _ in self._walk(order))

    def traverse_with_depth(self,
                            order: Union[TraversalOrder, str, None] = None
                            ) -> Iterator[Tuple[T, int]]:
        """Like traverse(), but yields (value, depth) with the root at 0."""
        return ((node.value, depth) for node, depth in self._walk(order))

    def _walk(self, order: Union[TraversalOrder, str, None]) -> Iterator[Tuple[Node, int]]:
        if order is None:
            order = self.config.default_order
        traverser = create_traverser(parse_order(order))
        return traverser.traverse(self._root)

    def _locate(self, value: Any) -> Tuple[Optional[Node], Optional[Node], Optional[str]]:
        """Walk from the root towards ``value``.

        Returns:
            Tuple of (node, parent, side). ``node`` is the node holding a
            value equal to ``value``, or None if there is none; ``parent``
            and ``side`` name the slot where that node is or would be
            attached (parent None means the root slot).
        """
        parent: Optional[Node] = None
        side: Optional[str] = None
        node = self._root
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                break
            parent = node
            if cmp < 0:
                side = 'left'
                node = node.left
            else:
                side = 'right'
                node = node.right
        return node, parent, side

    def _set_child(self, parent: Optional[Node], side: Optional[str],
                   child: Optional[Node]) -> None:
        if parent is None:
            self._root = child
        elif side == 'left':
            parent.left = child
        else:
            parent.right = child

    def _remove_node(self, node: Node, parent: Optional[Node], side: Optional[str]) -> None:
        # Covers the leaf case too: the slot becomes empty
        if node.left is None:
            self._set_child(parent, side, node.right)
            return
        if node.right is None:
            self._set_child(parent, side, node.left)
            return

        if self.config.successor_policy is SuccessorPolicy.RIGHT_MINIMUM:
            # Leftmost node of the right subtree; it has no left child
            succ_parent, succ_side, succ = node, 'right', node.right
            while succ.left is not None:
                succ_parent, succ_side, succ = succ, 'left', succ.left
            node.value = succ.value
            self._set_child(succ_parent, succ_side, succ.right)
        else:
            # Rightmost node of the left subtree; it has no right child
            pred_parent, pred_side, pred = node, 'left', node.left
            while pred.right is not None:
                pred_parent, pred_side, pred = pred, 'right', pred.right
            node.value = pred.value
            self._set_child(pred_parent, pred_side, pred.left)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        """Iterate values in ascending order."""
        return self.traverse(TraversalOrder.IN_ORDER)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(size={self._count})"
