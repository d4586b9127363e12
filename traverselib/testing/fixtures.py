"""Test fixtures for traverselib consumers.

These fixtures make the laziness and release guarantees of the engines
observable, so test suites (ours and those of projects building on
traverselib) can assert on them without poking at engine internals.
"""

import asyncio
from typing import Any, AsyncIterator, Iterator, Optional


class ExpansionTracker:
    """Builds child generators and records their lifecycle.

    Each generator returned by children() counts when it starts running,
    every element it produces, and when its finally block runs. Python
    generators that are never started never run their finally block, so
    ``start_count == end_count`` means every generator the traversal
    actually opened was released.

    Example:
        tracker = ExpansionTracker()
        with depth_first(10, lambda i: tracker.children(i - 1)) as nodes:
            next(nodes)
        assert tracker.all_released
    """

    def __init__(self):
        self.expand_calls = 0
        self.start_count = 0
        self.end_count = 0
        self.iterate_count = 0

    def children(self, count: int) -> Iterator[int]:
        """Return a generator yielding ``count`` copies of ``count``."""
        self.expand_calls += 1
        return self._generate(count)

    def _generate(self, count: int) -> Iterator[int]:
        self.start_count += 1
        try:
            for _ in range(count):
                self.iterate_count += 1
                yield count
        finally:
            self.end_count += 1

    @property
    def all_released(self) -> bool:
        return self.start_count == self.end_count


class AsyncExpansionTracker(ExpansionTracker):
    """ExpansionTracker whose children arrive from async generators."""

    def children(self, count: int) -> AsyncIterator[int]:
        self.expand_calls += 1
        return self._agenerate(count)

    async def _agenerate(self, count: int) -> AsyncIterator[int]:
        self.start_count += 1
        try:
            for _ in range(count):
                self.iterate_count += 1
                await asyncio.sleep(0)
                yield count
        finally:
            self.end_count += 1


class FailingCloseChildren:
    """Single-element child iterator whose close() always raises.

    With ``value=None`` the first next() raises instead of producing a
    child, which simulates a fault inside a child sequence.
    """

    def __init__(self, value: Optional[Any] = None):
        self.value = value
        self.started = False
        self.close_count = 0

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    def __iter__(self) -> 'FailingCloseChildren':
        return self

    def __next__(self) -> Any:
        if self.started:
            raise StopIteration
        self.started = True
        if self.value is None:
            raise LookupError("Throw from next")
        return self.value

    def close(self) -> None:
        self.close_count += 1
        raise RuntimeError(f"Throw from {self.value} close")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
