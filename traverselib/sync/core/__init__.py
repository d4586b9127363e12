"""Core abstractions for the synchronous engines.

This module contains the expansion contract and the traversal engines
that every public entry point is built on.
"""

from .adapter import TreeAdapter, FunctionAdapter, resolve_expand
from .traverser import (
    Traversal,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
    iter_breadth_first,
    iter_depth_first,
    release,
    release_frames,
)

__all__ = [
    "TreeAdapter",
    "FunctionAdapter",
    "resolve_expand",
    "Traversal",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    "iter_breadth_first",
    "iter_depth_first",
    "release",
    "release_frames",
]
