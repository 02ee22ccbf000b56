"""Configuration system for OrderedTree.

This module defines how callers describe the tree they want: which total
order to use, which successor to splice in when removing a node with two
children, and which traversal order to use when none is given.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Callable, Any, List, Union


class InvalidConfigError(ValueError):
    """Raised when a TreeConfig can't be used to build a tree."""
    pass


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of the tree."""
    PRE_ORDER = "pre_order"       # Node, left subtree, right subtree
    IN_ORDER = "in_order"         # Left subtree, node, right subtree (ascending)
    POST_ORDER = "post_order"     # Left subtree, right subtree, node
    LEVEL_ORDER = "level_order"   # Breadth-first, left before right


class SuccessorPolicy(Enum):
    """Which value replaces a removed node that has two children.

    Both policies preserve the ordering invariant; they only differ in the
    shape of the resulting tree.
    """
    RIGHT_MINIMUM = "right_minimum"   # Smallest value of the right subtree
    LEFT_MAXIMUM = "left_maximum"     # Largest value of the left subtree


@dataclass
class TreeConfig:
    """Complete configuration for an OrderedTree.

    ``compare`` is a three-way comparison returning a negative number, zero
    or a positive number. When it is None the values' own ``<`` and ``>``
    operators define the order.
    """

    # Ordering
    compare: Optional[Callable[[Any, Any], int]] = None

    # Two-child removal
    successor_policy: SuccessorPolicy = SuccessorPolicy.RIGHT_MINIMUM

    # Used by traverse() when no order is passed
    default_order: TraversalOrder = TraversalOrder.IN_ORDER

    # Run a contains() walk before insert/remove walks
    check_before_mutation: bool = True

    # Convenience constructors for common configurations

    @classmethod
    def reversed(cls, compare: Optional[Callable[[Any, Any], int]] = None) -> 'TreeConfig':
        """Create config that stores values in descending order.

        Args:
            compare: Order to reverse (default: natural order)

        Returns:
            TreeConfig whose in-order traversal is descending
        """
        from .core.ordering import reversed_order
        return cls(compare=reversed_order(compare))

    @classmethod
    def by_key(cls, key: Callable[[Any], Any]) -> 'TreeConfig':
        """Create config that orders values by ``key(value)``.

        Values whose keys compare equal count as duplicates.

        Args:
            key: Function extracting the comparison key

        Returns:
            TreeConfig ordering by key
        """
        from .core.ordering import key_order
        return cls(compare=key_order(key))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.compare is not None and not callable(self.compare):
            errors.append("compare must be callable")

        if not isinstance(self.successor_policy, SuccessorPolicy):
            errors.append(
                f"successor_policy must be a SuccessorPolicy, "
                f"got {self.successor_policy!r}"
            )

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(
                f"default_order must be a TraversalOrder, "
                f"got {self.default_order!r}"
            )

        if not isinstance(self.check_before_mutation, bool):
            errors.append("check_before_mutation must be a bool")

        return errors


# Helper functions

_ORDER_NAMES = {
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'levelorder': TraversalOrder.LEVEL_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    # Generic tree-walker strategy names
    'bfs': TraversalOrder.LEVEL_ORDER,
    'dfs_pre': TraversalOrder.PRE_ORDER,
    'dfs_post': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Args:
        order: Order as enum, enum value or name (case-insensitive)

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    if isinstance(order, str):
        name = order.strip().lower().replace('-', '_')
        if name in _ORDER_NAMES:
            return _ORDER_NAMES[name]

    raise ValueError(
        f"Unknown traversal order: {order!r}. "
        f"Choose from: {', '.join(o.value for o in TraversalOrder)}"
    )
