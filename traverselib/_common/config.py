"""Configuration system for traverselib.

This module defines how callers pick a traversal order and bound the
number of nodes a high-level traversal produces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


_STRATEGY_NAMES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string (case-insensitive)

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_NAMES:
        return _STRATEGY_NAMES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_NAMES)}"
    )


@dataclass
class TraversalConfig:
    """Complete configuration for a high-level traversal.

    The engines themselves take no configuration; this is consumed by the
    api layer to choose an engine and to bound its output.
    """

    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    max_nodes: Optional[int] = None   # Stop (and release) after N nodes

    @classmethod
    def from_options(cls,
                     strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
                     max_nodes: Optional[int] = None) -> 'TraversalConfig':
        """Build a config from loosely typed keyword options.

        Args:
            strategy: Strategy as enum or string name
            max_nodes: Maximum number of nodes to produce (None = unlimited)

        Returns:
            TraversalConfig instance
        """
        return cls(strategy=parse_strategy(strategy), max_nodes=max_nodes)

    @property
    def post_order(self) -> bool:
        return self.strategy is TraversalStrategy.DEPTH_FIRST_POST

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.max_nodes is not None:
            if isinstance(self.max_nodes, bool) or not isinstance(self.max_nodes, int):
                errors.append("max_nodes must be an integer")
            elif self.max_nodes < 0:
                errors.append("max_nodes cannot be negative")

        return errors
