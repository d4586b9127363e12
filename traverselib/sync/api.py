"""High-level API for traverselib.

This module provides the functional entry points. Each one validates its
arguments immediately, then returns a lazy Traversal; no expand() call and
no iteration of the roots happens until the first node is requested.
"""

from typing import Any, Callable, Iterable, Iterator, Optional, Union

from .._common.config import TraversalConfig, TraversalStrategy
from .._common.errors import InvalidArgumentError, require
from .._common.single import SingleRoot
from .core.adapter import Expand, TreeAdapter, resolve_expand
from .core.traverser import Traversal, iter_breadth_first, iter_depth_first

ExpandLike = Union[Expand, TreeAdapter]

_NOTHING = object()


def breadth_first(root: Any, expand: ExpandLike) -> Traversal:
    """Enumerate the implicit tree below root in breadth-first order.

    The root comes first, then its children in order, then its
    grandchildren, and so on. For example, every exception inside nested
    exception groups:

        >>> errors = breadth_first(group, lambda e: getattr(e, "exceptions", ()))

    Args:
        root: Starting node for traversal
        expand: Function (or TreeAdapter) returning the children of a node

    Returns:
        Lazy Traversal over the tree

    Raises:
        InvalidArgumentError: If expand is None
    """
    expand = resolve_expand(expand)
    return Traversal(iter_breadth_first(SingleRoot(root), expand))


def breadth_first_many(roots: Iterable[Any], expand: ExpandLike) -> Traversal:
    """Enumerate the implicit forest below roots in breadth-first order.

    All roots come first (the roots iterable is consumed lazily), then all
    of their children in root order, and so on.

    Args:
        roots: Iterable of starting nodes
        expand: Function (or TreeAdapter) returning the children of a node

    Returns:
        Lazy Traversal over the forest

    Raises:
        InvalidArgumentError: If roots or expand is None
    """
    require(roots, "roots")
    expand = resolve_expand(expand)
    return Traversal(iter_breadth_first(roots, expand))


def depth_first(root: Any, expand: ExpandLike, post_order: bool = False) -> Traversal:
    """Enumerate the implicit tree below root in depth-first order.

    By default a pre-order traversal is used (parent before its children);
    post_order=True yields children before their parent, so the root comes
    last.

    Args:
        root: Starting node for traversal
        expand: Function (or TreeAdapter) returning the children of a node
        post_order: Yield each node after its descendants

    Returns:
        Lazy Traversal over the tree

    Raises:
        InvalidArgumentError: If expand is None

    Example:
        >>> split = lambda s: [s[:-1], s[1:]] if len(s) >= 2 else []
        >>> list(depth_first("abc", split))
        ['abc', 'ab', 'a', 'b', 'bc', 'b', 'c']
    """
    expand = resolve_expand(expand)
    return Traversal(iter_depth_first(SingleRoot(root), expand, post_order))


def depth_first_many(roots: Iterable[Any], expand: ExpandLike,
                     post_order: bool = False) -> Traversal:
    """Depth-first traversal of each root in turn.

    Equivalent to chaining depth_first() over every root, in root order.

    Args:
        roots: Iterable of starting nodes, consumed lazily
        expand: Function (or TreeAdapter) returning the children of a node
        post_order: Yield each node after its descendants

    Returns:
        Lazy Traversal over the forest

    Raises:
        InvalidArgumentError: If roots or expand is None
    """
    require(roots, "roots")
    expand = resolve_expand(expand)
    return Traversal(iter_depth_first(roots, expand, post_order))


def along(root: Optional[Any], next_node: Callable[[Any], Optional[Any]]) -> Traversal:
    """Follow a chain of next_node() calls until it returns None.

    Example:
        >>> chain = along(error, lambda e: e.__cause__)

    Args:
        root: First node of the chain; None gives an empty chain
        next_node: Function returning the successor of a node, or None

    Returns:
        Lazy Traversal over the chain

    Raises:
        InvalidArgumentError: If next_node is None
    """
    require(next_node, "next_node")
    return Traversal(_iter_along(root, next_node))


def _iter_along(node: Optional[Any], next_node: Callable[[Any], Optional[Any]]) -> Iterator[Any]:
    while node is not None:
        yield node
        node = next_node(node)


def traverse(
    root: Any,
    expand: ExpandLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> Traversal:
    """Simple strategy-driven interface for tree traversal.

    Args:
        root: Starting node for traversal
        expand: Function (or TreeAdapter) returning the children of a node
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)
        max_nodes: Stop after this many nodes (None = unlimited)

    Returns:
        Lazy Traversal over the tree

    Raises:
        InvalidArgumentError: If expand is None or the options are invalid
        ValueError: If strategy name is not recognized
    """
    return _start(SingleRoot(root), expand, strategy, max_nodes)


def traverse_many(
    roots: Iterable[Any],
    expand: ExpandLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> Traversal:
    """Multi-root version of traverse().

    Raises:
        InvalidArgumentError: If roots or expand is None or the options are invalid
    """
    require(roots, "roots")
    return _start(roots, expand, strategy, max_nodes)


def count_nodes(
    root: Any,
    expand: ExpandLike,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> int:
    """Count the nodes reachable from root.

    The tree must be finite unless max_nodes is given.

    Returns:
        Number of nodes visited
    """
    count = 0
    with traverse(root, expand, strategy, max_nodes) as nodes:
        for _ in nodes:
            count += 1
    return count


def find_nodes(
    root: Any,
    expand: ExpandLike,
    predicate: Callable[[Any], bool],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
) -> Traversal:
    """Find nodes that match a predicate.

    Args:
        root: Starting node for traversal
        expand: Function (or TreeAdapter) returning the children of a node
        predicate: Function that returns True for matching nodes
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)
        max_nodes: Examine at most this many nodes (None = unlimited)

    Returns:
        Lazy Traversal over the matching nodes

    Example:
        >>> evens = find_nodes(1, lambda i: [2 * i, 2 * i + 1], lambda i: i % 2 == 0,
        ...                    max_nodes=7)
        >>> list(evens)
        [2, 4, 6]
    """
    require(predicate, "predicate")
    nodes = traverse(root, expand, strategy, max_nodes)
    return Traversal(_matching(nodes, predicate))


def _start(roots: Iterable[Any], expand: ExpandLike,
           strategy: Union[TraversalStrategy, str],
           max_nodes: Optional[int]) -> Traversal:
    config = TraversalConfig.from_options(strategy=strategy, max_nodes=max_nodes)
    errors = config.validate()
    if errors:
        raise InvalidArgumentError(f"Invalid configuration: {'; '.join(errors)}")

    expand = resolve_expand(expand)
    if config.strategy is TraversalStrategy.BREADTH_FIRST:
        nodes = Traversal(iter_breadth_first(roots, expand))
    else:
        nodes = Traversal(iter_depth_first(roots, expand, config.post_order))

    if config.max_nodes is None:
        return nodes
    return Traversal(_take(nodes, config.max_nodes))


def _take(nodes: Traversal, limit: int) -> Iterator[Any]:
    """Yield at most limit nodes, releasing the traversal before the last one."""
    last = _NOTHING
    with nodes:
        if limit == 0:
            return
        for count, node in enumerate(nodes, 1):
            if count == limit:
                last = node
                break
            yield node
    if last is not _NOTHING:
        yield last


def _matching(nodes: Traversal, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    with nodes:
        for node in nodes:
            if predicate(node):
                yield node
