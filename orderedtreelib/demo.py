"""Demonstration driver for OrderedTreeLib.

Builds a tree from random (or literal) keys, prints it, probes for one
key, deletes that key and prints the tree again.
"""

import logging
import random
import sys
from typing import List, Optional, TextIO

from .api import format_keys, traverse_tree
from .config import ConfigError, DemoConfig, TraversalOrder
from .core.tree import OrderedTree

logger = logging.getLogger(__name__)

_ORDER_LABELS = {
    TraversalOrder.IN_ORDER: "In-order",
    TraversalOrder.PRE_ORDER: "Pre-order",
    TraversalOrder.POST_ORDER: "Post-order",
    TraversalOrder.LEVEL_ORDER: "Level-order",
}


def generate_keys(config: DemoConfig) -> List[int]:
    """Produce the keys a demo run inserts.
    
    Literal keys win over random generation. Random keys are drawn
    uniformly from ``[low, high]`` and may repeat.
    """
    if config.keys is not None:
        return list(config.keys)
    rng = random.Random(config.seed)
    return [rng.randint(config.low, config.high) for _ in range(config.count)]


def run_demo(config: Optional[DemoConfig] = None, out: Optional[TextIO] = None) -> bool:
    """Run the demonstration and print its report.
    
    Args:
        config: Demo settings (defaults to the reference run)
        out: Stream to print to (defaults to stdout)
        
    Returns:
        True if the probe key was found before deletion
        
    Raises:
        ConfigError: If the configuration is invalid
    """
    config = config or DemoConfig.reference()
    out = out or sys.stdout
    
    errors = config.validate()
    if errors:
        raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")
    
    keys = generate_keys(config)
    logger.debug("Demo keys: %s", keys)
    label = _ORDER_LABELS[config.order]
    
    if config.keys is not None:
        print(f"Inserting values {format_keys(keys).rstrip()} into the tree...", file=out)
    else:
        print(f"Inserting unique values between {config.low} and {config.high} "
              f"into the tree...", file=out)
    tree = OrderedTree()
    for key in keys:
        tree.insert(key)
    
    print(f"{label} traversal of the tree:", file=out)
    print(format_keys(traverse_tree(tree, config.order)), file=out)
    
    print(f"Checking if the tree contains the value {config.probe}:", file=out)
    found = tree.contains(config.probe)
    if found:
        print(f"Value {config.probe} was found.", file=out)
    else:
        print(f"Value {config.probe} was not found.", file=out)
    
    print(f"Deleting the value {config.probe} from the tree...", file=out)
    tree.delete(config.probe)
    print(f"{label} traversal after deletion:", file=out)
    print(format_keys(traverse_tree(tree, config.order)), file=out)
    
    return found
