"""OrderedTreeLib - Unbalanced Binary Search Tree.

OrderedTreeLib provides a textbook binary search tree over unique,
totally-ordered keys with insert, contains, delete and in-order traversal,
plus traversal strategies, statistics helpers and a small demonstration.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree([5, 3, 8, 1, 4])
    list(tree.traverse())   # [1, 3, 4, 5, 8]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode
from .core.tree import OrderedTree
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

# Configuration
from .config import TraversalOrder, DemoConfig, ConfigError

# High-level API
from .api import (
    build_tree,
    traverse_tree,
    count_nodes,
    get_leaf_keys,
    get_tree_stats,
    format_keys,
)
from .demo import run_demo

__all__ = [
    "__version__",
    # Core
    'TreeNode',
    'OrderedTree',
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    # Config
    'TraversalOrder',
    'DemoConfig',
    'ConfigError',
    # API
    'build_tree',
    'traverse_tree',
    'count_nodes',
    'get_leaf_keys',
    'get_tree_stats',
    'format_keys',
    'run_demo',
]
