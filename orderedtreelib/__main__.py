#!/usr/bin/env python
"""
Command line entry point for the OrderedTreeLib demonstration.

Usage:
    python -m orderedtreelib                    # Reference run, random keys
    python -m orderedtreelib --seed 42          # Reproducible random keys
    python -m orderedtreelib --keys 5 3 8 1 4   # Literal keys
    python -m orderedtreelib --order level      # Print level-order
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ConfigError, DemoConfig, TraversalOrder
from .core.traverser import create_traverser
from .demo import run_demo


def parse_order(value: str) -> TraversalOrder:
    """argparse type converting an order name or alias to TraversalOrder."""
    try:
        return TraversalOrder(create_traverser(value).name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderedtree-demo",
        description="Insert keys into a binary search tree, probe one, delete it",
    )
    parser.add_argument("--count", type=int, default=10,
                        help="Number of random keys to insert (default: 10)")
    parser.add_argument("--low", type=int, default=1,
                        help="Smallest random key, inclusive (default: 1)")
    parser.add_argument("--high", type=int, default=10,
                        help="Largest random key, inclusive (default: 10)")
    parser.add_argument("--probe", type=int, default=5,
                        help="Key to search for and delete (default: 5)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible runs")
    parser.add_argument("--order", type=parse_order, default=TraversalOrder.IN_ORDER,
                        help="Traversal order: in, pre, post or level (default: in)")
    parser.add_argument("--keys", type=int, nargs="+", default=None,
                        help="Insert these keys instead of random ones")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log tree operations at DEBUG level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo from command line arguments and return the exit code."""
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    if args.keys is not None:
        config = DemoConfig.fixed(args.keys, probe=args.probe)
        config.order = args.order
    else:
        config = DemoConfig(
            count=args.count,
            low=args.low,
            high=args.high,
            probe=args.probe,
            seed=args.seed,
            order=args.order,
        )
    
    try:
        run_demo(config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
