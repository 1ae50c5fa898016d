"""Test fixtures for OrderedTreeLib consumers.

These fixtures provide controlled access to tree structure for testing
purposes without making node layout part of the public API.
"""

from typing import Any, List, Optional, Tuple

from ..core.node import TreeNode
from ..core.tree import OrderedTree


class TreeTestHelper:
    """Public test fixture for structural verification.
    
    Example:
        tree = OrderedTree([5, 3, 8])
        helper = TreeTestHelper(tree)
        
        helper.assert_valid()
        assert helper.shape() == (5, (3, None, None), (8, None, None))
    """
    
    def __init__(self, tree: OrderedTree):
        """Initialize with the tree under test.
        
        Args:
            tree: The OrderedTree to inspect
        """
        self._tree = tree
    
    def _first_violation(self) -> Optional[TreeNode]:
        """Return the first node outside its allowed key bounds, if any."""
        if self._tree.root is None:
            return None
        # Each entry: (node, exclusive lower bound, exclusive upper bound)
        stack: List[Tuple[TreeNode, Any, Any]] = [(self._tree.root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if low is not None and not node.key > low:
                return node
            if high is not None and not node.key < high:
                return node
            if node.left is not None:
                stack.append((node.left, low, node.key))
            if node.right is not None:
                stack.append((node.right, node.key, high))
        return None
    
    def is_valid(self) -> bool:
        """Check the ordering invariant over every node.
        
        Returns:
            True if all left keys are smaller and all right keys larger
        """
        return self._first_violation() is None
    
    def assert_valid(self) -> None:
        """Raise AssertionError naming the first misplaced key."""
        node = self._first_violation()
        if node is not None:
            raise AssertionError(f"Key {node.key!r} violates the ordering invariant")
    
    def keys(self) -> List[Any]:
        """Return all keys in ascending order."""
        return list(self._tree.traverse())
    
    def shape(self) -> Optional[Tuple]:
        """Return the tree as nested ``(key, left, right)`` tuples.
        
        Empty subtrees are None. Built bottom-up without recursion.
        """
        root = self._tree.root
        if root is None:
            return None
        built = {}
        stack: List[Tuple[TreeNode, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                built[id(node)] = (
                    node.key,
                    built.pop(id(node.left)) if node.left is not None else None,
                    built.pop(id(node.right)) if node.right is not None else None,
                )
                continue
            stack.append((node, True))
            for child in node.children():
                stack.append((child, False))
        return built[id(root)]
    
    def depth_of(self, key: Any) -> Optional[int]:
        """Return the depth of the node holding key, or None if absent."""
        node = self._tree.root
        depth = 0
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return depth
            depth += 1
        return None
