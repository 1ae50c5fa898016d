"""Tree traversal strategies for OrderedTreeLib.

Traversers implement different orders for walking a tree of TreeNodes.
Every strategy uses an explicit stack or queue instead of recursion, so a
degenerate tree of any depth can be walked.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.
    
    Traversers walk from a root node and yield each node together with
    its depth. They never modify the tree.
    """
    
    #: Short name used by create_traverser and in reports
    name: str = ""
    
    @abstractmethod
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.
        
        Args:
            root: Starting node for traversal, or None for an empty tree
            
        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass
    
    def keys(self, root: Optional[TreeNode]) -> Iterator:
        """Yield only the keys, in this traverser's order."""
        for node, _ in self.traverse(root):
            yield node.key


class InOrderTraverser(TreeTraverser):
    """In-order traversal strategy.
    
    Visits the left subtree, then the node, then the right subtree.
    On a binary search tree this yields keys in ascending order.
    """
    
    name = "in_order"
    
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []
        node = root
        depth = 0
        while stack or node is not None:
            # Walk down the left spine
            while node is not None:
                stack.append((node, depth))
                node = node.left
                depth += 1
            node, depth = stack.pop()
            yield (node, depth)
            node = node.right
            depth += 1


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal strategy.
    
    Visits parent before children. Re-inserting keys in this order into an
    empty tree rebuilds the same shape.
    """
    
    name = "pre_order"
    
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)
            # Right pushed first so left is visited first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal strategy.
    
    Visits children before parent. Good for teardown or for aggregating
    subtree values bottom-up.
    """
    
    name = "post_order"
    
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        # Each entry carries a flag telling whether its children were pushed
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue
            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.
    
    Visits all nodes at depth N before nodes at depth N+1, left to right
    within a level.
    """
    
    name = "level_order"
    
    def traverse(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            for child in node.children():
                queue.append((child, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.
    
    Args:
        strategy: Name of traversal strategy (in_order, pre_order,
            post_order, level_order, or a short alias)
        
    Returns:
        TreeTraverser instance
        
    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in': InOrderTraverser,
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'pre': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'preorder': PreOrderTraverser,
        'post': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'postorder': PostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
        'bfs': LevelOrderTraverser,
    }
    
    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )
    
    return strategies[strategy_lower]()
