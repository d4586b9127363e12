"""Testing utilities for traverselib consumers."""

from .fixtures import ExpansionTracker, AsyncExpansionTracker, FailingCloseChildren

__all__ = ['ExpansionTracker', 'AsyncExpansionTracker', 'FailingCloseChildren']
