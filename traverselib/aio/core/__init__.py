"""Core abstractions for the async engines."""

from .adapter import AsyncTreeAdapter, resolve_expand, open_children, open_iterator, arelease
from .traverser import (
    AsyncTraversal,
    aiter_breadth_first,
    aiter_depth_first,
    arelease_frames,
)

__all__ = [
    "AsyncTreeAdapter",
    "resolve_expand",
    "open_children",
    "open_iterator",
    "arelease",
    "AsyncTraversal",
    "aiter_breadth_first",
    "aiter_depth_first",
    "arelease_frames",
]
