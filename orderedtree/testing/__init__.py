"""Testing utilities for OrderedTree."""

from .fixtures import TreeInspector

__all__ = ['TreeInspector']
