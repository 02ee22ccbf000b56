"""Three-way comparison helpers.

Every comparison function here follows the same contract: ``compare(a, b)``
returns a negative number if ``a`` sorts before ``b``, zero if they are
equal, and a positive number if ``a`` sorts after ``b``.
"""

from typing import Any, Callable, Optional

Compare = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two values using their own ``<`` and ``>`` operators.

    Raises:
        TypeError: If the values are not comparable with each other
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reversed_order(compare: Optional[Compare] = None) -> Compare:
    """Return the reverse of ``compare`` (natural order if None)."""
    base = compare if compare is not None else natural_order

    def _reversed(a: Any, b: Any) -> int:
        return base(b, a)

    return _reversed


def key_order(key: Callable[[Any], Any]) -> Compare:
    """Return a comparison that orders values by ``key(value)``."""

    def _by_key(a: Any, b: Any) -> int:
        return natural_order(key(a), key(b))

    return _by_key
