"""TreeNode for OrderedTreeLib.

The TreeNode is intentionally kept simple - it's primarily a data container.
Ordering logic lives in OrderedTree, and walking logic lives in the
traversers, so a node only knows its key and its two children.
"""

from typing import Any, Iterator, Optional


class TreeNode:
    """A single node of a binary search tree.
    
    Each node owns at most two children. A node is reachable from exactly
    one place: its parent's ``left``/``right`` link, or the tree's root.
    """
    
    __slots__ = ("key", "left", "right")
    
    def __init__(self,
                 key: Any,
                 left: Optional["TreeNode"] = None,
                 right: Optional["TreeNode"] = None):
        """Create a node.
        
        Args:
            key: Ordered scalar stored in this node
            left: Subtree of strictly smaller keys
            right: Subtree of strictly greater keys
        """
        self.key = key
        self.left = left
        self.right = right
    
    def is_leaf(self) -> bool:
        """Check if this node has no children.
        
        Returns:
            bool: True if both child links are empty
        """
        return self.left is None and self.right is None
    
    def children(self) -> Iterator["TreeNode"]:
        """Yield present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right
    
    def child_count(self) -> int:
        """Number of present children (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)
    
    def __str__(self) -> str:
        """String representation defaults to the key."""
        return str(self.key)
    
    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(key={self.key!r})"
