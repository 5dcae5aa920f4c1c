"""
Dense N-dimensional array module.

Stores elements of any type in a flat row-major sequence (the last axis
varies fastest) and addresses them through coordinate tuples of any rank,
including rank 0, which holds exactly one element.
"""
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np

from .errors import InvalidShapeError, OutOfBoundsError, SizeMismatchError


T = TypeVar("T")
R = TypeVar("R")

Coordinate = Tuple[int, ...]
Shape = Tuple[int, ...]


# ============================================================================
# Shape Utilities (Low-level)
# ============================================================================

def validate_shape(shape: Sequence[int]) -> Shape:
    """
    Normalise a shape to a tuple and check every axis.

    Raises:
        InvalidShapeError: If any axis is not a positive integer.
    """
    shape = tuple(shape)
    for axis in shape:
        if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
            raise InvalidShapeError(f"Axis size {axis!r} is not an integer")
        if axis < 1:
            raise InvalidShapeError(
                f"Axis sizes must be positive, got shape {shape}"
            )
    return tuple(int(axis) for axis in shape)


def element_count(shape: Sequence[int]) -> int:
    """Product of the axis sizes (1 for the empty shape)."""
    total = 1
    for axis in shape:
        total *= axis
    return total


def in_bounds(coord: Sequence[int], shape: Sequence[int]) -> bool:
    """Check rank and range of a coordinate against a shape."""
    if len(coord) != len(shape):
        return False
    return all(0 <= value < size for value, size in zip(coord, shape))


# ============================================================================
# NDArray Class
# ============================================================================

class NDArray(Generic[T]):
    """
    Fixed-shape N-dimensional array with mutable elements.

    The backing storage is a flat list in row-major order. The shape never
    changes after construction.

    Args:
        shape: Size of each axis. An empty shape gives a rank-0 array.
        init: None (every element is None), a zero-argument callable called
            once per element in row-major order, or a flat sequence consumed
            in row-major order.

    Raises:
        InvalidShapeError: If any axis is not a positive integer.
        SizeMismatchError: If a flat sequence has the wrong length.
    """

    def __init__(
        self,
        shape: Sequence[int],
        init: Union[None, Callable[[], T], Sequence[T]] = None,
    ) -> None:
        self._shape = validate_shape(shape)
        self._size = element_count(self._shape)

        if init is None:
            self._storage: List[Any] = [None] * self._size
        elif callable(init):
            self._storage = [init() for _ in range(self._size)]
        else:
            values = list(init)
            if len(values) != self._size:
                raise SizeMismatchError(
                    f"Initializer has {len(values)} elements, "
                    f"shape {self._shape} needs {self._size}"
                )
            self._storage = values

    @classmethod
    def full(cls, shape: Sequence[int], value: T) -> "NDArray[T]":
        """Create an array with every element set to the same value."""
        shape = validate_shape(shape)
        return cls(shape, [value] * element_count(shape))

    # ========================================================================
    # Shape Accessors
    # ========================================================================

    @property
    def shape(self) -> Shape:
        """Size of each axis."""
        return self._shape

    @property
    def rank(self) -> int:
        """Number of axes."""
        return len(self._shape)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"NDArray(shape={self._shape})"

    # ========================================================================
    # Index Arithmetic
    # ========================================================================

    def in_bounds(self, coord: Sequence[int]) -> bool:
        """Check whether a coordinate addresses an element. Never raises."""
        return in_bounds(coord, self._shape)

    def linear_index(self, coord: Sequence[int]) -> int:
        """
        Map a coordinate to its position in row-major storage.

        Raises:
            OutOfBoundsError: If the coordinate has the wrong rank or any
                component is out of range.
        """
        self._check_coordinate(coord)
        index = 0
        multiplier = 1
        for axis in range(self.rank - 1, -1, -1):
            index += coord[axis] * multiplier
            multiplier *= self._shape[axis]
        return index

    def coordinate_of(self, index: int) -> Coordinate:
        """
        Map a storage position back to its coordinate.

        Raises:
            OutOfBoundsError: If index is outside [0, size).
        """
        if not 0 <= index < self._size:
            raise OutOfBoundsError(
                f"Index {index} is out of bounds for {self._size} elements"
            )
        coord = [0] * self.rank
        for axis in range(self.rank - 1, -1, -1):
            coord[axis] = index % self._shape[axis]
            index //= self._shape[axis]
        return tuple(coord)

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for index in range(self._size):
            yield self.coordinate_of(index)

    def _check_coordinate(self, coord: Sequence[int]) -> None:
        if len(coord) != self.rank:
            raise OutOfBoundsError(
                f"Coordinate {tuple(coord)} has {len(coord)} axes, "
                f"array has {self.rank}"
            )
        if not self.in_bounds(coord):
            raise OutOfBoundsError(
                f"Coordinate {tuple(coord)} is out of bounds "
                f"for shape {self._shape}"
            )

    # ========================================================================
    # Element Access
    # ========================================================================

    def get(self, coord: Sequence[int]) -> T:
        """Get the element at a coordinate."""
        return self._storage[self.linear_index(coord)]

    def set(self, coord: Sequence[int], value: T) -> None:
        """Replace the element at a coordinate."""
        self._storage[self.linear_index(coord)] = value

    def __getitem__(self, coord: Union[int, Sequence[int]]) -> T:
        if isinstance(coord, (int, np.integer)):
            coord = (coord,)
        return self.get(coord)

    def __setitem__(self, coord: Union[int, Sequence[int]], value: T) -> None:
        if isinstance(coord, (int, np.integer)):
            coord = (coord,)
        self.set(coord, value)

    def __iter__(self) -> Iterator[T]:
        return iter(self._storage)

    # ========================================================================
    # Traversal
    # ========================================================================

    def map(self, fn: Callable[[T], R]) -> "NDArray[R]":
        """Apply fn to every element in row-major order, keeping the shape."""
        return NDArray(self._shape, [fn(value) for value in self._storage])

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Call fn on every element in storage order."""
        for value in self._storage:
            fn(value)

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[Coordinate]:
        """Return the first coordinate whose element satisfies predicate."""
        for index, value in enumerate(self._storage):
            if predicate(value):
                return self.coordinate_of(index)
        return None

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Copy the elements into a numpy array of the same shape."""
        return np.array(self._storage, dtype=dtype).reshape(self._shape)
