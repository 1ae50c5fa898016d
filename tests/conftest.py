"""Shared pytest configuration for the OrderedTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large degenerate-tree tests")


@pytest.fixture
def sample_tree():
    """Tree built from 5, 3, 8, 1, 4.

    Structure:
            5
           / \\
          3   8
         / \\
        1   4
    """
    return OrderedTree([5, 3, 8, 1, 4])
