"""Expansion contract for traverselib.

An expansion is anything that, given a node, produces that node's children.
Most callers pass a plain function or lambda. Callers that already model
their structure as an object can implement TreeAdapter instead; both are
normalized by resolve_expand() before a traversal starts.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Union

from ..._common.errors import require

Expand = Callable[[Any], Iterable[Any]]


class TreeAdapter(ABC):
    """Abstract adapter describing how to find the children of a node.

    The adapter is the single-method form of an expand function. It carries
    no state the engines rely on; engines call get_children() at most once
    per node, and only when that node's children are about to be explored.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterable[Any]:
        """Get the children of the given node, in order.

        This method should be lazy when possible - return a generator
        that yields children on demand rather than materializing all
        children at once. If the returned iterator has a close() method,
        the engines call it exactly once when they are done with it.

        Args:
            node: The parent node

        Returns:
            Iterable yielding child nodes

        Example:
            for child in adapter.get_children(parent_node):
                process(child)
        """
        pass

    def __call__(self, node: Any) -> Iterable[Any]:
        return self.get_children(node)


class FunctionAdapter(TreeAdapter):
    """TreeAdapter backed by a plain expand function."""

    def __init__(self, expand: Expand):
        self.expand = expand

    def get_children(self, node: Any) -> Iterable[Any]:
        return self.expand(node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.expand!r})"


def resolve_expand(expand: Union[Expand, TreeAdapter, None], name: str = "expand") -> Expand:
    """Normalize an expand argument into a callable.

    Args:
        expand: Function or TreeAdapter producing children
        name: Parameter name used in error messages

    Returns:
        A callable mapping a node to an iterable of children

    Raises:
        InvalidArgumentError: If expand is None
        TypeError: If expand is neither callable nor a TreeAdapter
    """
    require(expand, name)
    if isinstance(expand, TreeAdapter):
        return expand.get_children
    if not callable(expand):
        raise TypeError(
            f"{name} must be callable or a TreeAdapter, got {type(expand).__name__}"
        )
    return expand
