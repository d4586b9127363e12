#!/usr/bin/env python3
"""
Walk a directory tree lazily, with sync and async expand functions.

This example demonstrates:
- Generator expand functions (directories are listed only when reached)
- Early termination releasing every open directory listing
- The same traversal driven from asyncio
"""

import asyncio
import itertools
import os
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from traverselib import aio, sync


def list_directory(path):
    """Yield the entries of a directory; files have no children."""
    if not os.path.isdir(path) or os.path.islink(path):
        return
    with os.scandir(path) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            yield entry.path


async def list_directory_async(path):
    """Async variant: hand the blocking listing to a worker thread."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: list(list_directory(path)))


def main():
    root = sys.argv[1] if len(sys.argv) > 1 else os.getcwd()
    limit = 20

    print(f"First {limit} entries under {root} (depth-first):")
    with sync.depth_first(root, list_directory) as paths:
        for path in itertools.islice(paths, limit):
            print(f"  {path}")

    print(f"\nEntries within {root} (breadth-first, counted):")
    print(f"  {sync.count_nodes(root, list_directory, max_nodes=10_000):,} (capped at 10,000)")

    async def count_async():
        return await aio.count_nodes(root, list_directory_async, max_nodes=10_000)

    print("\nSame count, async:")
    print(f"  {asyncio.run(count_async()):,}")


if __name__ == "__main__":
    main()
