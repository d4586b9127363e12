"""Async tree traversal engines.

Same orders, laziness and release guarantees as the sync engines, but
children may arrive from async iterables and expand() may be a coroutine.
The engines run on the caller's event loop and never schedule tasks of
their own.
"""

import logging
from collections import deque
from typing import Any, AsyncIterator, Deque, List, Optional

from .adapter import AsyncExpand, Children, arelease, open_children, open_iterator

logger = logging.getLogger(__name__)

_ROOTS = object()


class AsyncTraversal(AsyncIterator[Any]):
    """Handle on one in-progress async traversal.

    Supports ``async for``, aclose() and ``async with``:

        async with depth_first(root, expand) as nodes:
            async for node in nodes:
                ...
    """

    def __init__(self, nodes: AsyncIterator[Any]):
        self._nodes = nodes

    def __aiter__(self) -> 'AsyncTraversal':
        return self

    async def __anext__(self) -> Any:
        return await self._nodes.__anext__()

    async def aclose(self) -> None:
        """Release the traversal. Raises the outermost release failure, if any."""
        await arelease(self._nodes)

    async def __aenter__(self) -> 'AsyncTraversal':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.aclose()
        return False


class _Frame:
    """One open child iterator together with the node that produced it."""

    __slots__ = ("node", "children")

    def __init__(self, node: Any, children: AsyncIterator[Any]):
        self.node = node
        self.children = children


async def arelease_frames(stack: List[_Frame]) -> None:
    """Pop and release every frame, innermost first, raising the outermost failure."""
    last_error: Optional[BaseException] = None
    while stack:
        frame = stack.pop()
        try:
            await arelease(frame.children)
        except BaseException as error:
            if last_error is not None:
                logger.debug("Discarding release failure superseded by an outer frame: %r",
                             last_error)
            last_error = error

    if last_error is not None:
        raise last_error


async def aiter_breadth_first(roots: Children, expand: AsyncExpand) -> AsyncIterator[Any]:
    """Async breadth-first traversal; expansion is deferred until dequeue."""
    pending: Deque[Any] = deque()
    children: Optional[AsyncIterator[Any]] = open_iterator(roots)
    try:
        while True:
            async for node in children:
                yield node
                pending.append(node)

            exhausted, children = children, None
            await arelease(exhausted)
            if not pending:
                return
            children = await open_children(expand, pending.popleft())
    finally:
        if children is not None:
            await arelease(children)


async def aiter_depth_first(roots: Children, expand: AsyncExpand,
                            post_order: bool = False) -> AsyncIterator[Any]:
    """Async depth-first traversal over each root in turn."""
    stack: List[_Frame] = [_Frame(_ROOTS, open_iterator(roots))]
    try:
        while stack:
            frame = stack[-1]
            try:
                node = await frame.children.__anext__()
            except StopAsyncIteration:
                stack.pop()
                await arelease(frame.children)
                if post_order and frame.node is not _ROOTS:
                    yield frame.node
                continue

            if not post_order:
                yield node
            stack.append(_Frame(node, await open_children(expand, node)))
    finally:
        await arelease_frames(stack)
