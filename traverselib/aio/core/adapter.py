"""Async expansion contract.

Async expansion is deliberately loose: expand(node) may return a plain
iterable, an async iterable, or an awaitable resolving to either. Everything
is normalized to an async iterator by open_children() so the engines only
deal with one shape.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Union

from ..._common.errors import require
from ...sync.core.adapter import TreeAdapter
from ...sync.core.traverser import release

Children = Union[Iterable[Any], AsyncIterable[Any]]
AsyncExpand = Callable[[Any], Union[Children, Awaitable[Children]]]


class AsyncTreeAdapter(ABC):
    """Abstract adapter for navigating trees whose children arrive asynchronously.

    get_children() is usually written as an async generator:

        class PageAdapter(AsyncTreeAdapter):
            async def get_children(self, page):
                for link in await fetch_links(page):
                    yield link
    """

    @abstractmethod
    def get_children(self, node: Any) -> Union[Children, Awaitable[Children]]:
        """Get the children of the given node, in order.

        Args:
            node: The parent node

        Returns:
            Async iterable (or iterable, or awaitable of either) of children
        """
        pass


class _SyncChildren:
    """Async iterator view over a synchronous iterator."""

    __slots__ = ("_iterator",)

    def __init__(self, iterable: Iterable[Any]):
        self._iterator = iter(iterable)

    def __aiter__(self) -> '_SyncChildren':
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration from None

    async def aclose(self) -> None:
        release(self._iterator)


def resolve_expand(expand: Union[AsyncExpand, TreeAdapter, AsyncTreeAdapter, None],
                   name: str = "expand") -> AsyncExpand:
    """Normalize an async expand argument into a callable.

    Raises:
        InvalidArgumentError: If expand is None
        TypeError: If expand is neither callable nor an adapter
    """
    require(expand, name)
    if isinstance(expand, (TreeAdapter, AsyncTreeAdapter)):
        return expand.get_children
    if not callable(expand):
        raise TypeError(
            f"{name} must be callable or a tree adapter, got {type(expand).__name__}"
        )
    return expand


def open_iterator(source: Children) -> AsyncIterator[Any]:
    """Open an async iterator over a sync or async iterable."""
    if hasattr(source, '__aiter__'):
        return source.__aiter__()
    return _SyncChildren(source)


async def open_children(expand: AsyncExpand, node: Any) -> AsyncIterator[Any]:
    """Call expand(node), awaiting it if needed, and open its children."""
    children = expand(node)
    if inspect.isawaitable(children):
        children = await children
    return open_iterator(children)


async def arelease(iterator: Any) -> None:
    """Release an iterator via aclose(), falling back to close()."""
    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()
    else:
        release(iterator)
