"""traverselib - lazy traversal of implicit trees.

Give traverselib one or more roots and a function returning the children of
any node, and it enumerates every reachable node lazily, in breadth-first,
depth-first pre-order, or depth-first post-order. The tree is never
materialized, so it may be infinite.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from traverselib.sync import depth_first

Asynchronous:
    from traverselib.aio import depth_first
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations share the same semantics: children keep their order,
expand() is never called early, and every child iterator opened during a
traversal is closed exactly once.
"""

__version__ = "0.1.0"

from . import sync
from . import aio

__all__ = [
    "__version__",
    "sync",
    "aio",
]
