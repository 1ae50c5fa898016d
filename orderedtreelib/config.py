"""Configuration system for OrderedTreeLib.

This module defines how users choose a traversal order and how the
demonstration driver is parameterized.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TraversalOrder(Enum):
    """Order in which tree nodes are visited."""
    IN_ORDER = "in_order"         # Left, node, right (ascending keys)
    PRE_ORDER = "pre_order"       # Node before children
    POST_ORDER = "post_order"     # Children before node
    LEVEL_ORDER = "level_order"   # Breadth-first, level by level


class ConfigError(ValueError):
    """Raised when a configuration fails validation."""
    pass


@dataclass
class DemoConfig:
    """Settings for the demonstration driver.
    
    The driver inserts ``count`` keys drawn from ``[low, high]`` (or the
    literal ``keys`` when given), prints the tree, probes for ``probe``,
    deletes it, and prints the tree again.
    """
    
    count: int = 10                        # Number of keys to draw
    low: int = 1                           # Smallest key (inclusive)
    high: int = 10                         # Largest key (inclusive)
    probe: int = 5                         # Key searched for and deleted
    seed: Optional[int] = None             # Random seed, None = unseeded
    order: TraversalOrder = TraversalOrder.IN_ORDER
    keys: Optional[List[int]] = None       # Literal keys instead of random ones
    
    @classmethod
    def reference(cls, seed: Optional[int] = None) -> 'DemoConfig':
        """Create the reference run: ten keys in 1..10, probing 5.
        
        Args:
            seed: Optional seed for reproducible output
            
        Returns:
            DemoConfig with the reference settings
        """
        return cls(count=10, low=1, high=10, probe=5, seed=seed)
    
    @classmethod
    def fixed(cls, keys: List[int], probe: int = 5) -> 'DemoConfig':
        """Create a deterministic run over literal keys.
        
        Args:
            keys: Keys to insert, in order
            probe: Key to search for and delete
            
        Returns:
            DemoConfig that ignores random generation
        """
        return cls(count=len(keys), probe=probe, keys=list(keys))
    
    def validate(self) -> List[str]:
        """Validate configuration for consistency.
        
        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        
        if self.keys is None:
            if self.count < 0:
                errors.append("count cannot be negative")
            if self.low > self.high:
                errors.append("low cannot be greater than high")
        
        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")
        
        return errors
