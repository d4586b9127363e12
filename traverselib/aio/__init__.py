"""Asynchronous implementation of traverselib.

Native async/await versions of the traversal engines. Expand functions may
be coroutines, async generators, or plain functions; roots may be sync or
async iterables. Traversals run on the caller's event loop.
"""

# Core abstractions
from .core import (
    AsyncTreeAdapter,
    AsyncTraversal,
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
)

# Configuration and errors (re-exported from _common)
from .._common import (
    TraversalConfig,
    TraversalStrategy,
    TraversalError,
    InvalidArgumentError,
    SingleUseError,
)

__all__ = [
    # Core
    'AsyncTreeAdapter',
    'AsyncTraversal',
    # API
    'breadth_first',
    'breadth_first_many',
    'depth_first',
    'depth_first_many',
    'along',
    'traverse',
    'traverse_many',
    'count_nodes',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'TraversalError',
    'InvalidArgumentError',
    'SingleUseError',
]
