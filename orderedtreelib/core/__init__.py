"""Core data structures: nodes, the ordered tree, and traversers."""

from .node import TreeNode
from .tree import OrderedTree
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    'TreeNode',
    'OrderedTree',
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
]
