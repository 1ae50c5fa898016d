"""Unit tests for OrderedTree insert, contains, delete and traverse.

Each deletion case (leaf, single child, two children) is checked against
the exact tree shape, not just the resulting key order.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree
from orderedtreelib.testing import TreeTestHelper


class TestEmptyTree(unittest.TestCase):
    """Operations on a freshly constructed tree."""
    
    def setUp(self):
        self.tree = OrderedTree()
    
    def test_traverse_is_empty(self):
        self.assertEqual(list(self.tree.traverse()), [])
    
    def test_contains_is_false(self):
        for key in (-1, 0, 5, 10 ** 12):
            self.assertFalse(self.tree.contains(key))
    
    def test_delete_is_noop(self):
        self.tree.delete(5)
        self.assertIsNone(self.tree.root)
        self.assertEqual(list(self.tree.traverse()), [])
    
    def test_len_and_bool(self):
        self.assertEqual(len(self.tree), 0)
        self.assertFalse(self.tree)


class TestInsert(unittest.TestCase):
    """Insertion and duplicate rejection."""
    
    def test_first_key_becomes_root(self):
        tree = OrderedTree()
        tree.insert(7)
        self.assertEqual(tree.root.key, 7)
        self.assertTrue(tree.root.is_leaf())
    
    def test_shape_follows_insertion_order(self):
        tree = OrderedTree([5, 3, 8, 1, 4])
        self.assertEqual(
            TreeTestHelper(tree).shape(),
            (5, (3, (1, None, None), (4, None, None)), (8, None, None)),
        )
    
    def test_sorted_insertion_builds_right_chain(self):
        tree = OrderedTree([1, 2, 3])
        self.assertEqual(TreeTestHelper(tree).shape(), (1, None, (2, None, (3, None, None))))
    
    def test_duplicate_insert_is_ignored(self):
        tree = OrderedTree([5, 3, 8])
        before = TreeTestHelper(tree).shape()
        tree.insert(3)
        tree.insert(5)
        self.assertEqual(TreeTestHelper(tree).shape(), before)
        self.assertEqual(list(tree.traverse()), [3, 5, 8])
    
    def test_constructor_drops_duplicates(self):
        tree = OrderedTree([4, 4, 2, 2, 9, 4])
        self.assertEqual(list(tree), [2, 4, 9])
        self.assertEqual(len(tree), 3)
    
    def test_negative_and_large_keys(self):
        tree = OrderedTree([0, -5, 2 ** 40, -(2 ** 40), 3])
        self.assertEqual(list(tree), [-(2 ** 40), -5, 0, 3, 2 ** 40])


class TestContains(unittest.TestCase):
    """Membership search."""
    
    def setUp(self):
        self.tree = OrderedTree([5, 3, 8, 1, 4])
    
    def test_present_keys(self):
        for key in (1, 3, 4, 5, 8):
            self.assertTrue(self.tree.contains(key), key)
    
    def test_absent_keys(self):
        for key in (0, 2, 6, 9, 100):
            self.assertFalse(self.tree.contains(key), key)
    
    def test_in_operator(self):
        self.assertIn(4, self.tree)
        self.assertNotIn(9, self.tree)
    
    def test_contains_does_not_mutate(self):
        before = TreeTestHelper(self.tree).shape()
        self.tree.contains(4)
        self.tree.contains(9)
        self.assertEqual(TreeTestHelper(self.tree).shape(), before)


class TestDelete(unittest.TestCase):
    """Deletion cases."""
    
    def setUp(self):
        self.tree = OrderedTree([5, 3, 8, 1, 4])
        self.helper = TreeTestHelper(self.tree)
    
    def test_delete_leaf(self):
        self.tree.delete(1)
        self.assertEqual(
            self.helper.shape(),
            (5, (3, None, (4, None, None)), (8, None, None)),
        )
    
    def test_delete_single_child_splices_child(self):
        tree = OrderedTree([5, 3, 1])
        tree.delete(3)
        self.assertEqual(TreeTestHelper(tree).shape(), (5, (1, None, None), None))
    
    def test_delete_two_children_uses_successor(self):
        self.tree.delete(3)
        # Successor of 3 is 4, the minimum of its right subtree
        self.assertEqual(
            self.helper.shape(),
            (5, (4, (1, None, None), None), (8, None, None)),
        )
    
    def test_delete_root_with_two_children(self):
        root = self.tree.root
        self.tree.delete(5)
        # The root node keeps its identity and takes the successor's key
        self.assertIs(self.tree.root, root)
        self.assertEqual(self.tree.root.key, 8)
        self.assertEqual(
            self.helper.shape(),
            (8, (3, (1, None, None), (4, None, None)), None),
        )
    
    def test_successor_with_right_child(self):
        tree = OrderedTree([10, 5, 20, 15, 30, 17])
        tree.delete(10)
        # 15 is the successor; its right child 17 moves up into its place
        self.assertEqual(
            TreeTestHelper(tree).shape(),
            (15, (5, None, None), (20, (17, None, None), (30, None, None))),
        )
    
    def test_delete_only_node(self):
        tree = OrderedTree([42])
        tree.delete(42)
        self.assertIsNone(tree.root)
        self.assertEqual(list(tree), [])
    
    def test_delete_root_with_one_child(self):
        tree = OrderedTree([1, 2, 3])
        tree.delete(1)
        self.assertEqual(tree.root.key, 2)
        self.assertEqual(list(tree), [2, 3])
    
    def test_delete_absent_key_is_noop(self):
        before = self.helper.shape()
        self.tree.delete(100)
        self.tree.delete(2)
        self.assertEqual(self.helper.shape(), before)
    
    def test_delete_twice(self):
        self.tree.delete(4)
        self.tree.delete(4)
        self.assertEqual(list(self.tree), [1, 3, 5, 8])
    
    def test_reinsert_after_delete(self):
        self.tree.delete(5)
        self.assertFalse(self.tree.contains(5))
        self.tree.insert(5)
        self.assertTrue(self.tree.contains(5))
        self.assertEqual(list(self.tree), [1, 3, 4, 5, 8])
        self.helper.assert_valid()


class TestTraverse(unittest.TestCase):
    """In-order traversal."""
    
    def test_ascending_order(self):
        tree = OrderedTree([50, 20, 70, 10, 30, 60, 80, 25])
        self.assertEqual(list(tree.traverse()), [10, 20, 25, 30, 50, 60, 70, 80])
    
    def test_traversal_is_restartable(self):
        tree = OrderedTree([2, 1, 3])
        first = tree.traverse()
        second = tree.traverse()
        self.assertEqual(list(first), [1, 2, 3])
        self.assertEqual(list(second), [1, 2, 3])
        self.assertEqual(list(tree.traverse()), [1, 2, 3])
    
    def test_iter_matches_traverse(self):
        tree = OrderedTree([9, 4, 12])
        self.assertEqual(list(iter(tree)), list(tree.traverse()))
    
    def test_repr_lists_keys(self):
        self.assertEqual(repr(OrderedTree([2, 1])), "OrderedTree([1, 2])")


def test_reference_scenario():
    """Walk through the documented insert/contains/delete scenario."""
    tree = OrderedTree()
    for key in (5, 3, 8, 1, 4):
        tree.insert(key)
    assert list(tree.traverse()) == [1, 3, 4, 5, 8]
    assert tree.contains(4) is True
    assert tree.contains(9) is False
    
    tree.delete(5)
    assert tree.root.key == 8
    assert list(tree.traverse()) == [1, 3, 4, 8]
    
    tree.delete(1)
    assert list(tree.traverse()) == [3, 4, 8]
    
    tree.delete(100)
    assert list(tree.traverse()) == [3, 4, 8]


def test_string_keys():
    """Any totally ordered key type works."""
    tree = OrderedTree(["m", "c", "x", "a"])
    tree.delete("m")
    assert list(tree) == ["a", "c", "x"]
    assert "c" in tree


if __name__ == "__main__":
    unittest.main()
