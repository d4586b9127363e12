"""Tree traversal engines for traverselib.

Both engines walk an implicit tree described by a set of roots and an
expand function. They are fully lazy: expand() is only called for a node
once the consumer asks for something past that node, and child iterators
are only advanced on demand. Every child iterator the engines open is
released (close() is called, when it has one) exactly once, whether the
traversal is exhausted, abandoned via Traversal.close(), or aborted by a
fault.

A single Traversal must not be advanced from more than one consumer at a
time. Separate calls produce fully independent traversals.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional, Union

from ..._common.config import TraversalStrategy, parse_strategy
from ..._common.errors import require
from ..._common.single import SingleRoot
from .adapter import Expand, FunctionAdapter, TreeAdapter, resolve_expand

logger = logging.getLogger(__name__)

# Owner of the bottom depth-first frame, which iterates the roots
_ROOTS = object()


class Traversal(Iterator[Any]):
    """Handle on one in-progress traversal.

    Iterating requests the next node; close() releases every iterator the
    traversal still holds open. Also usable as a context manager:

        with depth_first(root, expand) as nodes:
            first = next(nodes)
    """

    def __init__(self, nodes: Iterator[Any]):
        self._nodes = nodes

    def __iter__(self) -> 'Traversal':
        return self

    def __next__(self) -> Any:
        return next(self._nodes)

    def close(self) -> None:
        """Release the traversal. Raises the outermost release failure, if any."""
        release(self._nodes)

    def __enter__(self) -> 'Traversal':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False


class _Frame:
    """One open child iterator together with the node that produced it."""

    __slots__ = ("node", "children")

    def __init__(self, node: Any, children: Iterator[Any]):
        self.node = node
        self.children = children


def release(iterator: Any) -> None:
    """Release an iterator by calling its close() method, if it has one."""
    close = getattr(iterator, "close", None)
    if close is not None:
        close()


def release_frames(stack: List[_Frame]) -> None:
    """Pop and release every frame, innermost first.

    All frames are released even if some releases fail. Only the last
    failure (the outermost frame's) is raised, once every frame has been
    attempted; the same thing nested ``with`` blocks would surface.
    """
    last_error: Optional[BaseException] = None
    while stack:
        frame = stack.pop()
        try:
            release(frame.children)
        except BaseException as error:
            if last_error is not None:
                logger.debug("Discarding release failure superseded by an outer frame: %r",
                             last_error)
            last_error = error

    if last_error is not None:
        raise last_error


def iter_breadth_first(roots: Iterable[Any], expand: Expand) -> Iterator[Any]:
    """Yield roots, then their children, then grandchildren, and so on.

    Nodes wait in the queue unexpanded; expand() runs only when a node
    reaches the head of the queue, so at most one child iterator is ever
    open.
    """
    pending: Deque[Any] = deque()
    children: Optional[Iterator[Any]] = iter(roots)
    try:
        while True:
            for node in children:
                yield node
                pending.append(node)

            exhausted, children = children, None
            release(exhausted)
            if not pending:
                return
            children = iter(expand(pending.popleft()))
    finally:
        if children is not None:
            release(children)


def iter_depth_first(roots: Iterable[Any], expand: Expand, post_order: bool = False) -> Iterator[Any]:
    """Walk each root's subtree depth-first, in root order.

    The stack holds one frame per open ancestor. Each frame keeps the node
    whose children it is iterating, which is what post-order yields once the
    frame runs dry.
    """
    stack: List[_Frame] = [_Frame(_ROOTS, iter(roots))]
    try:
        while stack:
            frame = stack[-1]
            try:
                node = next(frame.children)
            except StopIteration:
                # pop first so a failing release is not retried below
                stack.pop()
                release(frame.children)
                if post_order and frame.node is not _ROOTS:
                    yield frame.node
                continue

            if not post_order:
                yield node
            stack.append(_Frame(node, iter(expand(node))))
    finally:
        release_frames(stack)


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers bind an expand function (or TreeAdapter) to one traversal
    order. They keep no per-traversal state, so one traverser can run any
    number of independent traversals.
    """

    def __init__(self, adapter: Union[Expand, TreeAdapter]):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter or expand function for navigating the tree
        """
        resolve_expand(adapter, "adapter")
        self.adapter = adapter if isinstance(adapter, TreeAdapter) else FunctionAdapter(adapter)

    @abstractmethod
    def _iterate(self, roots: Iterable[Any]) -> Iterator[Any]:
        pass

    def traverse(self, root: Any) -> Traversal:
        """Traverse the tree starting from a single root.

        Args:
            root: Starting node for traversal

        Returns:
            Traversal yielding nodes in this traverser's order
        """
        return Traversal(self._iterate(SingleRoot(root)))

    def traverse_many(self, roots: Iterable[Any]) -> Traversal:
        """Traverse the trees starting from each of several roots.

        Args:
            roots: Iterable of starting nodes, consumed lazily

        Returns:
            Traversal yielding nodes in this traverser's order

        Raises:
            InvalidArgumentError: If roots is None
        """
        require(roots, "roots")
        return Traversal(self._iterate(roots))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    Within a level, nodes come out in discovery order.
    """

    def _iterate(self, roots: Iterable[Any]) -> Iterator[Any]:
        return iter_breadth_first(roots, self.adapter.get_children)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Processes nodes as soon as they're
    discovered.
    """

    def _iterate(self, roots: Iterable[Any]) -> Iterator[Any]:
        return iter_depth_first(roots, self.adapter.get_children)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Processes nodes after their entire
    subtree has been processed. Good for deletion or calculating
    aggregate values (like folder sizes).
    """

    def _iterate(self, roots: Iterable[Any]) -> Iterator[Any]:
        return iter_depth_first(roots, self.adapter.get_children, post_order=True)


_TRAVERSERS = {
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: Union[Expand, TreeAdapter]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (bfs, dfs_pre, dfs_post, ...)
        adapter: TreeAdapter or expand function for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)](adapter)
