"""Tests for the depth-first engine (pre-order and post-order)."""

import itertools
import math
from collections import Counter

import pytest

from traverselib.sync import (
    InvalidArgumentError,
    depth_first,
    depth_first_many,
)


def halves(i):
    return [] if i <= 1 else [math.ceil(i / 2), i // 2]


def split(s):
    return [s[:-1], s[1:]] if len(s) >= 2 else []


def binary_paths(path, depth=3):
    """Children of a path tuple, for a full binary tree of the given depth."""
    return [path + (0,), path + (1,)] if len(path) < depth else []


class TestPreOrder:
    """Test depth-first pre-order traversal."""

    def test_string_tree(self):
        """Test pre-order output for the string-splitting tree."""
        assert list(depth_first("abcd", split)) == [
            "abcd", "abc", "ab", "a", "b", "bc", "b", "c",
            "bcd", "bc", "b", "c", "cd", "c", "d",
        ]

    def test_root_first(self):
        """Test that the root is always the first node."""
        assert next(depth_first(7, halves)) == 7

    def test_parents_before_descendants(self):
        """Test that every node comes before all nodes in its subtree."""
        nodes = list(depth_first((), binary_paths))
        position = {node: index for index, node in enumerate(nodes)}

        assert len(nodes) == 15
        for node in nodes:
            for other in nodes:
                if other != node and other[:len(node)] == node:
                    assert position[node] < position[other]

    def test_multiple_roots(self):
        """Test multi-root pre-order traversal."""
        assert list(depth_first_many([3, 5, 4], halves)) == [
            3, 2, 1, 1, 1, 5, 3, 2, 1, 1, 1, 2, 1, 1, 4, 2, 1, 1, 2, 1, 1,
        ]

    def test_multiple_roots_equal_concatenation(self):
        """Test that multi-root traversal is the concatenation of single-root ones."""
        roots = [3, 5, 4]
        chained = list(itertools.chain.from_iterable(depth_first(r, halves) for r in roots))

        assert list(depth_first_many(roots, halves)) == chained

    def test_infinite_tree(self):
        """Test that the leftmost branch of an infinite tree can be followed."""
        with depth_first(1, lambda i: [2 * i, 2 * i + 1]) as nodes:
            assert list(itertools.islice(nodes, 5)) == [1, 2, 4, 8, 16]


class TestPostOrder:
    """Test depth-first post-order traversal."""

    def test_string_tree(self):
        """Test post-order output for the string-splitting tree."""
        assert list(depth_first("abcd", split, post_order=True)) == [
            "a", "b", "ab", "b", "c", "bc", "abc",
            "b", "c", "bc", "c", "d", "cd", "bcd", "abcd",
        ]

    def test_root_last(self):
        """Test that the root is always the last node."""
        assert list(depth_first(7, halves, post_order=True))[-1] == 7

    def test_descendants_before_parents(self):
        """Test that every node comes after all nodes in its subtree."""
        nodes = list(depth_first((), binary_paths, post_order=True))
        position = {node: index for index, node in enumerate(nodes)}

        assert len(nodes) == 15
        for node in nodes:
            for other in nodes:
                if other != node and other[:len(node)] == node:
                    assert position[node] > position[other]

    def test_same_nodes_as_pre_order(self):
        """Test that both orders visit the same multiset of nodes."""
        pre = Counter(depth_first("abcde", split))
        post = Counter(depth_first("abcde", split, post_order=True))

        assert pre == post

    def test_multiple_roots(self):
        """Test multi-root post-order traversal."""
        assert list(depth_first_many([3, 5, 4], halves, post_order=True)) == [
            1, 1, 2, 1, 3, 1, 1, 2, 1, 3, 1, 1, 2, 5, 1, 1, 2, 1, 1, 2, 4,
        ]

    def test_multiple_roots_equal_concatenation(self):
        """Test that multi-root post-order is the concatenation of single-root ones."""
        roots = [3, 5, 4]
        chained = list(itertools.chain.from_iterable(
            depth_first(r, halves, post_order=True) for r in roots
        ))

        assert list(depth_first_many(roots, halves, post_order=True)) == chained

    def test_parent_not_confused_with_last_child(self):
        """Test that backtracking yields the parent, not its last child."""
        tree = {"root": ["x", "y"], "x": ["x1"], "y": []}

        nodes = list(depth_first("root", lambda n: tree.get(n, []), post_order=True))

        assert nodes == ["x1", "x", "y", "root"]


class TestDepthFirstEdgeCases:
    """Test empty inputs, validation and faults."""

    def test_leaf_root(self):
        """Test that a root without children yields only itself in both orders."""
        assert list(depth_first(1, lambda _: [])) == [1]
        assert list(depth_first(1, lambda _: [], post_order=True)) == [1]

    def test_empty_roots_never_expand(self):
        """Test that no roots means no output and no expand calls."""
        def expand(_):
            raise AssertionError("should never get here")

        assert list(depth_first_many([], expand)) == []
        assert list(depth_first_many([], expand, post_order=True)) == []

    def test_missing_arguments(self):
        """Test that missing arguments are rejected at call time."""
        with pytest.raises(InvalidArgumentError):
            depth_first("a", None)
        with pytest.raises(InvalidArgumentError):
            depth_first_many(None, split)
        with pytest.raises(InvalidArgumentError):
            depth_first_many([], None, post_order=True)

    def test_expand_failure_propagates(self):
        """Test that an exception from expand reaches the consumer at the failing next()."""
        def expand(s):
            if s == "ab":
                raise ValueError("cannot split ab")
            return split(s)

        nodes = depth_first("abc", expand)

        assert next(nodes) == "abc"
        assert next(nodes) == "ab"
        with pytest.raises(ValueError, match="cannot split ab"):
            next(nodes)

    def test_child_iterator_failure_propagates(self):
        """Test that an exception raised while iterating children propagates."""
        def expand(i):
            if i < 3:
                yield i + 1
            raise OSError("lost connection")

        nodes = depth_first(0, expand, post_order=True)

        with pytest.raises(OSError, match="lost connection"):
            list(itertools.islice(nodes, 10))

    def test_traversal_is_single_pass(self):
        """Test that re-iterating a traversal continues rather than restarts it."""
        nodes = depth_first("abc", split)
        first = list(itertools.islice(nodes, 3))
        rest = list(nodes)

        assert first + rest == list(depth_first("abc", split))
        assert list(nodes) == []
