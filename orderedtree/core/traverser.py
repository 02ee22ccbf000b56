"""Tree traversal strategies for OrderedTree.

Traversers implement the four visiting orders over a chain of Nodes. Each
one is a generator driven by its own explicit stack or queue rather than
by recursion, so a traversal can suspend between elements and degenerate
trees deeper than the interpreter's recursion limit can still be walked.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Tuple, Type

from .node import Node
from ..config import TraversalOrder


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    The iterator returned by ``traverse`` is single-use. It reads child
    slots as it goes, so inserting into or removing from the tree while it
    is being consumed is undefined behaviour.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree starting at root.

        Args:
            root: Starting node for traversal (None yields nothing)

        Yields:
            Tuples of (node, depth) where depth is 0 at root
        """
        pass


class PreOrderTraverser(TreeTraverser):
    """Visits a node, then its left subtree, then its right subtree."""

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)
            # Right goes first so left is popped first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Visits the left subtree, then the node, then the right subtree.

    On a valid tree this yields values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node = root
        depth = 0
        while stack or node is not None:
            # Descend as far left as possible, remembering the path
            while node is not None:
                stack.append((node, depth))
                node = node.left
                depth += 1
            node, depth = stack.pop()
            yield (node, depth)
            node = node.right
            depth += 1


class PostOrderTraverser(TreeTraverser):
    """Visits the left subtree, then the right subtree, then the node.

    Each stack entry carries a flag telling whether its children have
    already been scheduled; a node is yielded the second time it is popped.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue
            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first traversal.

    Visits all nodes at depth N before any node at depth N+1. Siblings are
    visited left before right and keep the order of their parents.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            if node.left is not None:
                queue.append((node.left, depth + 1))
            if node.right is not None:
                queue.append((node.right, depth + 1))


_TRAVERSERS: Dict[TraversalOrder, Type[TreeTraverser]] = {
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(order: TraversalOrder) -> TreeTraverser:
    """Create a traverser instance for a traversal order.

    Args:
        order: TraversalOrder member

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order is not a TraversalOrder
    """
    if order not in _TRAVERSERS:
        raise ValueError(
            f"Unknown traversal order: {order!r}. "
            f"Choose from: {', '.join(o.value for o in TraversalOrder)}"
        )
    return _TRAVERSERS[order]()
