#!/usr/bin/env python3
"""
Insertion order benchmark for OrderedTreeLib.

The tree never rebalances, so its height (and the cost of every
operation) depends on the order keys arrive in. This benchmark compares:
1. Shuffled keys (expected height ~ 2.99 * log2(n))
2. Sorted keys (height n - 1, a linked list)
3. Median-first keys (perfectly balanced)
"""

import random
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree, get_tree_stats


def median_first(keys: List[int]) -> List[int]:
    """Reorder sorted keys so each subtree's median is inserted first."""
    result = []
    ranges = [(0, len(keys))]
    while ranges:
        low, high = ranges.pop(0)
        if low >= high:
            continue
        mid = (low + high) // 2
        result.append(keys[mid])
        ranges.append((low, mid))
        ranges.append((mid + 1, high))
    return result


class InsertionBenchmark:
    """Time building, searching and emptying trees of a given size."""
    
    def __init__(self, size: int, iterations: int = 3, seed: int = 0):
        self.size = size
        self.iterations = iterations
        self.seed = seed
    
    def orderings(self) -> Dict[str, Callable[[], List[int]]]:
        keys = list(range(self.size))
        
        def shuffled():
            rng = random.Random(self.seed)
            data = keys[:]
            rng.shuffle(data)
            return data
        
        return {
            "shuffled": shuffled,
            "sorted": lambda: keys[:],
            "median_first": lambda: median_first(keys),
        }
    
    def run_one(self, keys: List[int]) -> Dict[str, float]:
        start = time.perf_counter()
        tree = OrderedTree(keys)
        built = time.perf_counter()
        for key in keys:
            tree.contains(key)
        searched = time.perf_counter()
        height = get_tree_stats(tree)['height']
        for key in keys:
            tree.delete(key)
        emptied = time.perf_counter()
        return {
            "build": built - start,
            "search": searched - built,
            "delete": emptied - searched,
            "height": height,
        }
    
    def run(self) -> None:
        print(f"Tree size: {self.size:,} keys, {self.iterations} iterations")
        print("-" * 60)
        print(f"{'ordering':<14}{'height':>8}{'build':>12}{'search':>12}{'delete':>12}")
        for name, make_keys in self.orderings().items():
            keys = make_keys()
            runs = [self.run_one(keys) for _ in range(self.iterations)]
            print(
                f"{name:<14}{int(runs[0]['height']):>8}"
                f"{statistics.mean(r['build'] for r in runs):>11.4f}s"
                f"{statistics.mean(r['search'] for r in runs):>11.4f}s"
                f"{statistics.mean(r['delete'] for r in runs):>11.4f}s"
            )


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 2000
    InsertionBenchmark(size).run()


if __name__ == "__main__":
    main()
