"""
Error types raised by the N-dimensional container.
"""


class TensorError(Exception):
    """Base class for container errors."""


class InvalidShapeError(TensorError, ValueError):
    """A shape contains an axis that is not a positive integer."""


class SizeMismatchError(TensorError, ValueError):
    """A flat initializer does not match the element count of the shape."""


class OutOfBoundsError(TensorError, IndexError):
    """A coordinate or linear index falls outside the array."""
