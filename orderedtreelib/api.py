"""High-level API for OrderedTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap OrderedTree and the traversers for ease
of use in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Union

from .config import TraversalOrder
from .core.tree import OrderedTree
from .core.traverser import TreeTraverser, create_traverser


def build_tree(keys: Iterable[Any]) -> OrderedTree:
    """Build a tree by inserting keys in the given order.
    
    Args:
        keys: Keys to insert; duplicates are dropped
        
    Returns:
        New OrderedTree
        
    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> list(tree)
        [3, 5, 8]
    """
    return OrderedTree(keys)


def traverse_tree(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[Any]:
    """Yield the tree's keys in the requested order.
    
    Args:
        tree: Tree to walk
        order: Traversal order as enum or name (in_order, pre_order,
            post_order, level_order)
        
    Yields:
        Keys in traversal order
        
    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4])
        >>> list(traverse_tree(tree, "pre_order"))
        [5, 3, 1, 4, 8]
    """
    yield from _get_traverser(order).keys(tree.root)


def count_nodes(tree: OrderedTree) -> int:
    """Count nodes in a tree.
    
    Args:
        tree: Tree to count
        
    Returns:
        Number of keys stored
    """
    return sum(1 for _ in tree.traverse())


def get_leaf_keys(tree: OrderedTree) -> List[Any]:
    """Collect the keys of all leaf nodes, smallest first.
    
    Args:
        tree: Tree to inspect
        
    Returns:
        List of leaf keys in ascending order
    """
    traverser = create_traverser('in_order')
    return [node.key for node, _ in traverser.traverse(tree.root) if node.is_leaf()]


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.
    
    Args:
        tree: Tree to inspect
        
    Returns:
        Dictionary with tree statistics. ``height`` counts edges on the
        longest root-to-leaf path and is -1 for an empty tree.
        
    Example:
        >>> stats = get_tree_stats(build_tree([5, 3, 8, 1, 4]))
        >>> stats['height'], stats['leaf_nodes']
        (2, 3)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
        'min_key': None,
        'max_key': None,
    }
    
    traverser = create_traverser('in_order')
    for node, depth in traverser.traverse(tree.root):
        stats['total_nodes'] += 1
        
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        
        stats['height'] = max(stats['height'], depth)
        
        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1
        
        # In-order: first key seen is the minimum, last is the maximum
        if stats['min_key'] is None:
            stats['min_key'] = node.key
        stats['max_key'] = node.key
    
    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    
    return stats


def format_keys(keys: Iterable[Any]) -> str:
    """Render keys the way the demonstration prints them.
    
    Each key is followed by a single space.
    
    Args:
        keys: Keys to render
        
    Returns:
        Rendered line without a trailing newline
    """
    return "".join(f"{key} " for key in keys)


# Helper functions

def _get_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser from an order enum or name.
    
    Raises:
        ValueError: If the order name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return create_traverser(order.value)
    return create_traverser(order)
