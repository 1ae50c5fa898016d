#!/usr/bin/env python3
"""
Basic usage example for OrderedTreeLib.

This example demonstrates:
- Building a tree and walking it in every order
- The three deletion cases
- Tree statistics
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree, TraversalOrder, get_tree_stats, traverse_tree


def main():
    """Demonstrate insert, contains, delete and traversal."""
    keys = [int(arg) for arg in sys.argv[1:]] or [50, 30, 70, 20, 40, 60, 80]
    tree = OrderedTree(keys)
    
    print(f"Inserted: {keys}")
    print("-" * 50)
    for order in TraversalOrder:
        print(f"  {order.value:<12} {list(traverse_tree(tree, order))}")
    
    stats = get_tree_stats(tree)
    print(f"\nTree Summary:")
    print(f"  Nodes:  {stats['total_nodes']}")
    print(f"  Leaves: {stats['leaf_nodes']}")
    print(f"  Height: {stats['height']}")
    
    print(f"\nContains {keys[0]}? {tree.contains(keys[0])}")
    
    # Deleting the root of a full tree exercises the two-child case
    tree.delete(keys[0])
    print(f"After deleting {keys[0]}: {list(tree)}")
    if tree.root is not None:
        print(f"New root key: {tree.root.key}")


if __name__ == "__main__":
    main()
