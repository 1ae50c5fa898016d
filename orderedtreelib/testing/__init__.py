"""Testing utilities for OrderedTreeLib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
