"""Configuration re-export for the sync package.

Re-exports configuration and error types from the _common package so
callers only need to import from traverselib.sync.
"""

from .._common.config import (
    TraversalConfig,
    TraversalStrategy,
    parse_strategy,
)
from .._common.errors import (
    TraversalError,
    InvalidArgumentError,
    SingleUseError,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'parse_strategy',
    'TraversalError',
    'InvalidArgumentError',
    'SingleUseError',
]
