"""High-level async API for traverselib.

Async counterparts of traverselib.sync.api. Arguments are validated when
the function is called, before any awaiting happens.

Example:
    async def links(url):
        async with session.get(url) as response:
            for link in parse_links(await response.text()):
                yield link

    async with breadth_first(start_url, links) as pages:
        async for page in pages:
            ...
"""

import inspect
from typing import Any, AsyncIterator, Callable, Optional, Union

from .._common.config import TraversalConfig, TraversalStrategy
from .._common.errors import InvalidArgumentError, require
from .._common.single import SingleRoot
from .core.adapter import AsyncExpand, AsyncTreeAdapter, Children, resolve_expand
from .core.traverser import AsyncTraversal, aiter_breadth_first, aiter_depth_first
from ..sync.core.adapter import TreeAdapter

AsyncExpandLike = Union[AsyncExpand, TreeAdapter, AsyncTreeAdapter]

_NOTHING = object()


def breadth_first(root: Any, expand: AsyncExpandLike) -> AsyncTraversal:
    """Async breadth-first traversal from a single root.

    Raises:
        InvalidArgumentError: If expand is None
    """
    expand = resolve_expand(expand)
    return AsyncTraversal(aiter_breadth_first(SingleRoot(root), expand))


def breadth_first_many(roots: Children, expand: AsyncExpandLike) -> AsyncTraversal:
    """Async breadth-first traversal from several roots (sync or async iterable).

    Raises:
        InvalidArgumentError: If roots or expand is None
    """
    require(roots, "roots")
    expand = resolve_expand(expand)
    return AsyncTraversal(aiter_breadth_first(roots, expand))


def depth_first(root: Any, expand: AsyncExpandLike, post_order: bool = False) -> AsyncTraversal:
    """Async depth-first traversal from a single root.

    Args:
        root: Starting node for traversal
        expand: Function or adapter producing children, possibly asynchronously
        post_order: Yield each node after its descendants

    Raises:
        InvalidArgumentError: If expand is None
    """
    expand = resolve_expand(expand)
    return AsyncTraversal(aiter_depth_first(SingleRoot(root), expand, post_order))


def depth_first_many(roots: Children, expand: AsyncExpandLike,
                     post_order: bool = False) -> AsyncTraversal:
    """Async depth-first traversal of each root in turn.

    Raises:
        InvalidArgumentError: If roots or expand is None
    """
    require(roots, "roots")
    expand = resolve_expand(expand)
    return AsyncTraversal(aiter_depth_first(roots, expand, post_order))


def along(root: Optional[Any], next_node: Callable[[Any], Any]) -> AsyncTraversal:
    """Follow a chain of next_node() calls (sync or async) until it gives None.

    Raises:
        InvalidArgumentError: If next_node is None
    """
    require(next_node, "next_node")
    return AsyncTraversal(_aiter_along(root, next_node))


async def _aiter_along(node: Optional[Any], next_node: Callable[[Any], Any]) -> AsyncIterator[Any]:
    while node is not None:
        yield node
        node = next_node(node)
        if inspect.isawaitable(node):
            node = await node


def traverse(
    root: Any,
    expand: AsyncExpandLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> AsyncTraversal:
    """Strategy-driven async traversal.

    Raises:
        InvalidArgumentError: If expand is None or the options are invalid
        ValueError: If strategy name is not recognized
    """
    return _start(SingleRoot(root), expand, strategy, max_nodes)


def traverse_many(
    roots: Children,
    expand: AsyncExpandLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> AsyncTraversal:
    """Multi-root version of traverse()."""
    require(roots, "roots")
    return _start(roots, expand, strategy, max_nodes)


async def count_nodes(
    root: Any,
    expand: AsyncExpandLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> int:
    """Count the nodes reachable from root."""
    count = 0
    async with traverse(root, expand, strategy, max_nodes) as nodes:
        async for _ in nodes:
            count += 1
    return count


def _start(roots: Children, expand: AsyncExpandLike,
           strategy: Union[TraversalStrategy, str],
           max_nodes: Optional[int]) -> AsyncTraversal:
    config = TraversalConfig.from_options(strategy=strategy, max_nodes=max_nodes)
    errors = config.validate()
    if errors:
        raise InvalidArgumentError(f"Invalid configuration: {'; '.join(errors)}")

    expand = resolve_expand(expand)
    if config.strategy is TraversalStrategy.BREADTH_FIRST:
        nodes = AsyncTraversal(aiter_breadth_first(roots, expand))
    else:
        nodes = AsyncTraversal(aiter_depth_first(roots, expand, config.post_order))

    if config.max_nodes is None:
        return nodes
    return AsyncTraversal(_take(nodes, config.max_nodes))


async def _take(nodes: AsyncTraversal, limit: int) -> AsyncIterator[Any]:
    """Yield at most limit nodes, releasing the traversal before the last one."""
    last = _NOTHING
    async with nodes:
        if limit == 0:
            return
        count = 0
        async for node in nodes:
            count += 1
            if count == limit:
                last = node
                break
            yield node
    if last is not _NOTHING:
        yield last
