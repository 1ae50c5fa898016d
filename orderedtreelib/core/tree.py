"""Unbalanced binary search tree for OrderedTreeLib.

OrderedTree stores unique, totally-ordered keys. Tree shape is purely a
function of insertion order; nothing is ever rebalanced. Every walk is
iterative so degenerate trees (depth == size) stay within the interpreter's
recursion limit.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .node import TreeNode

logger = logging.getLogger(__name__)


class OrderedTree:
    """Mutable binary search tree over unique keys.
    
    For every node N, keys in N's left subtree are strictly less than
    N's key and keys in N's right subtree are strictly greater. All four
    operations are total: there is no key or tree state they reject.
    
    Example:
        >>> tree = OrderedTree([5, 3, 8, 1, 4])
        >>> list(tree.traverse())
        [1, 3, 4, 5, 8]
        >>> tree.delete(5)
        >>> list(tree.traverse())
        [1, 3, 4, 8]
    """
    
    def __init__(self, keys: Optional[Iterable[Any]] = None):
        """Create a tree, optionally inserting keys in the given order.
        
        Args:
            keys: Keys to insert, duplicates are dropped
        """
        self._root: Optional[TreeNode] = None
        if keys is not None:
            for key in keys:
                self.insert(key)
    
    @property
    def root(self) -> Optional[TreeNode]:
        """Root node, or None for an empty tree."""
        return self._root
    
    def insert(self, key: Any) -> None:
        """Insert a key, keeping the ordering invariant.
        
        Inserting a key that is already present does nothing.
        
        Args:
            key: The key to insert
        """
        if self._root is None:
            self._root = TreeNode(key)
            logger.debug("Inserted %r as root", key)
            return
        
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = TreeNode(key)
                    logger.debug("Inserted %r left of %r", key, node.key)
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = TreeNode(key)
                    logger.debug("Inserted %r right of %r", key, node.key)
                    return
                node = node.right
            else:
                logger.debug("Ignored duplicate key %r", key)
                return
    
    def contains(self, key: Any) -> bool:
        """Check whether a node holding exactly this key exists.
        
        Args:
            key: The key to find
            
        Returns:
            True if the key is in the tree
        """
        _, node = self._locate(self._root, key)
        return node is not None
    
    def delete(self, key: Any) -> None:
        """Remove a key from the tree if present.
        
        A node with two children takes the key of its in-order successor
        (the minimum of its right subtree), and the successor node is
        removed instead.
        
        Args:
            key: The key to remove
        """
        self._root = self._remove(self._root, key)
    
    def traverse(self) -> Iterator[Any]:
        """Yield all keys in ascending order.
        
        Each call returns a fresh iterator, so traversal can be repeated.
        The tree must not be modified while an iterator is being consumed.
        
        Yields:
            Keys, smallest first
        """
        stack: List[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right
    
    # Internal helpers
    
    @staticmethod
    def _locate(subtree: Optional[TreeNode],
                key: Any) -> Tuple[Optional[TreeNode], Optional[TreeNode]]:
        """Find the node holding key within a subtree.
        
        Returns:
            Tuple of (parent, node). node is None when key is absent;
            parent is None when node is the subtree root.
        """
        parent = None
        node = subtree
        while node is not None:
            if key < node.key:
                parent, node = node, node.left
            elif key > node.key:
                parent, node = node, node.right
            else:
                break
        return parent, node
    
    @staticmethod
    def _find_min(subtree: TreeNode) -> TreeNode:
        """Return the leftmost node of a non-empty subtree."""
        node = subtree
        while node.left is not None:
            node = node.left
        return node
    
    def _remove(self, subtree: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
        """Remove key from a subtree and return the subtree's new root."""
        parent, node = self._locate(subtree, key)
        if node is None:
            logger.debug("Delete of %r ignored, key not present", key)
            return subtree
        
        if node.left is not None and node.right is not None:
            # Successor has no left child, so the nested removal is a
            # leaf or single-child case.
            successor = self._find_min(node.right)
            logger.debug("Replacing %r with successor %r", node.key, successor.key)
            node.key = successor.key
            node.right = self._remove(node.right, successor.key)
            return subtree
        
        replacement = node.left if node.left is not None else node.right
        logger.debug(
            "Detached %r (%s)", key,
            "leaf" if replacement is None else "single child spliced"
        )
        if parent is None:
            return replacement
        if parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        return subtree
    
    # Python protocol support
    
    def __contains__(self, key: Any) -> bool:
        return self.contains(key)
    
    def __iter__(self) -> Iterator[Any]:
        return self.traverse()
    
    def __len__(self) -> int:
        # Size is not tracked; count by walking.
        return sum(1 for _ in self.traverse())
    
    def __bool__(self) -> bool:
        return self._root is not None
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.traverse())!r})"
