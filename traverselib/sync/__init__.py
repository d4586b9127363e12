"""Synchronous implementation of traverselib.

This package contains the blocking, iterator-based traversal engines.
Expand functions return ordinary iterables (lists, tuples, generators).
"""

# Core components
from .core.adapter import TreeAdapter, FunctionAdapter
from .core.traverser import (
    Traversal,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)

# Configuration and errors
from .config import (
    TraversalConfig,
    TraversalStrategy,
    TraversalError,
    InvalidArgumentError,
    SingleUseError,
)

# High-level API
from .api import (
    breadth_first,
    breadth_first_many,
    depth_first,
    depth_first_many,
    along,
    traverse,
    traverse_many,
    count_nodes,
    find_nodes,
)

__all__ = [
    # Core
    'TreeAdapter',
    'FunctionAdapter',
    'Traversal',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'TraversalError',
    'InvalidArgumentError',
    'SingleUseError',
    # API
    'breadth_first',
    'breadth_first_many',
    'depth_first',
    'depth_first_many',
    'along',
    'traverse',
    'traverse_many',
    'count_nodes',
    'find_nodes',
]
