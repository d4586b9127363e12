#!/usr/bin/env python3
"""
Flatten nested exception groups and cause chains.

This example demonstrates:
- Breadth-first and depth-first traversal over an implicit tree
- Following a single chain with along()
- Traversing without building any tree structure up front
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from traverselib.sync import along, breadth_first, depth_first


class ErrorGroup(Exception):
    """Minimal stand-in for ExceptionGroup that works on any Python 3."""

    def __init__(self, message, exceptions):
        super().__init__(message)
        self.exceptions = list(exceptions)


def inner_errors(error):
    """Children of an error are the errors it groups."""
    return getattr(error, "exceptions", ())


def build_error():
    try:
        raise OSError("disk unplugged")
    except OSError as cause:
        io_error = IOError("write failed")
        io_error.__cause__ = cause

    return ErrorGroup("sync failed", [
        ErrorGroup("batch 1", [ValueError("bad row 3"), ValueError("bad row 9")]),
        io_error,
        KeyError("missing id"),
    ])


def main():
    error = build_error()

    print("Breadth-first:")
    for e in breadth_first(error, inner_errors):
        print(f"  {type(e).__name__}: {e}")

    print("\nDepth-first (post-order, leaves first):")
    for e in depth_first(error, inner_errors, post_order=True):
        print(f"  {type(e).__name__}: {e}")

    print("\nRoot causes of each leaf error:")
    for leaf in depth_first(error, inner_errors):
        if inner_errors(leaf):
            continue
        chain = " <- ".join(str(e) for e in along(leaf, lambda e: e.__cause__))
        print(f"  {chain}")


if __name__ == "__main__":
    main()
