"""
Moore-neighborhood enumeration for coordinates of any rank.

A neighbor differs from the center by at most one along every axis.
The 3**rank candidate offsets are enumerated with a base-3 counter whose
most significant digit belongs to axis 0.
"""
from typing import Sequence, Set

from .ndarray import Coordinate, in_bounds


def neighbors_of(coord: Sequence[int], shape: Sequence[int]) -> Set[Coordinate]:
    """
    Get the in-bounds Moore neighbors of a coordinate.

    Args:
        coord: Center coordinate.
        shape: Bounds the neighbors must fall within.

    Returns:
        Set of neighbor coordinates, excluding coord itself. Empty for rank 0.
    """
    rank = len(shape)
    candidates = 3 ** rank
    # Counter value whose digits are all 1, i.e. offset zero on every axis.
    center = (candidates - 1) // 2

    neighbors = set()
    for counter in range(candidates):
        if counter == center:
            continue
        candidate = [0] * rank
        remaining = counter
        for axis in range(rank - 1, -1, -1):
            candidate[axis] = coord[axis] + remaining % 3 - 1
            remaining //= 3
        if in_bounds(candidate, shape):
            neighbors.add(tuple(candidate))
    return neighbors


def are_neighbors(first: Sequence[int], second: Sequence[int]) -> bool:
    """
    Check whether two same-rank coordinates are Moore neighbors.

    No bounds are applied. A coordinate is not its own neighbor.
    """
    if tuple(first) == tuple(second):
        return False
    return all(abs(a - b) <= 1 for a, b in zip(first, second))
