"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (TraversalConfig)
- The exception taxonomy
- The single-root adapter

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalStrategy,
    parse_strategy,
)
from .errors import (
    TraversalError,
    InvalidArgumentError,
    SingleUseError,
    require,
)
from .single import SingleRoot

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'parse_strategy',
    'TraversalError',
    'InvalidArgumentError',
    'SingleUseError',
    'require',
    'SingleRoot',
]
