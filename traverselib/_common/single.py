"""Single-root adapter.

Lifts one root value into the multi-root form both engines consume, so the
single-root and multi-root entry points share one implementation.
"""

from typing import Generic, Iterator, TypeVar

from .errors import SingleUseError

T = TypeVar("T")


class SingleRoot(Generic[T]):
    """One-shot sequence holding exactly one value.

    Engines never restart their root sequence, so asking for a second
    iterator is a bug and fails loudly instead of silently yielding nothing.

    Example:
        >>> roots = SingleRoot("a")
        >>> list(roots)
        ['a']
        >>> iter(roots)
        Traceback (most recent call last):
        ...
        traverselib._common.errors.SingleUseError: SingleRoot('a') can only be iterated once
    """

    __slots__ = ("_value", "_iterated")

    def __init__(self, value: T):
        self._value = value
        self._iterated = False

    def __iter__(self) -> Iterator[T]:
        if self._iterated:
            raise SingleUseError(f"{self!r} can only be iterated once")
        self._iterated = True
        return iter((self._value,))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
