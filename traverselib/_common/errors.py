"""Exception types shared by the sync and aio traversal engines.

Faults raised by expand functions or by child iterators are never wrapped;
they propagate unchanged. The classes here cover the errors the library
itself detects.
"""


class TraversalError(Exception):
    """Base class for errors raised by traverselib itself."""
    pass


class InvalidArgumentError(TraversalError, ValueError):
    """Raised eagerly when a required argument is missing or a configuration is invalid."""
    pass


class SingleUseError(TraversalError, RuntimeError):
    """Raised when a one-shot root iterator is iterated a second time."""
    pass


def require(value, name: str):
    """Return value, raising InvalidArgumentError if it is None.

    Args:
        value: Argument value supplied by the caller
        name: Parameter name used in the error message

    Returns:
        The unchanged value

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
