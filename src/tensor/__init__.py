"""
N-dimensional container module.

Provides a dense row-major array of arbitrary rank and Moore-neighborhood
enumeration over its coordinates.
"""
from .errors import (
    TensorError,
    InvalidShapeError,
    SizeMismatchError,
    OutOfBoundsError,
)
from .ndarray import (
    NDArray,
    Coordinate,
    Shape,
    in_bounds,
    validate_shape,
    element_count,
)
from .neighborhood import neighbors_of, are_neighbors

__all__ = [
    "TensorError",
    "InvalidShapeError",
    "SizeMismatchError",
    "OutOfBoundsError",
    "NDArray",
    "Coordinate",
    "Shape",
    "neighbors_of",
    "are_neighbors",
    "in_bounds",
    "validate_shape",
    "element_count",
]
