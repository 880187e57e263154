"""
Geometry helpers for line fitting over cyclic point paths.
"""

from typing import Sequence, Tuple
import math
import numpy as np


def distance(p1: Tuple[int, int], p2: Tuple[int, int]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def circular_index(index: int, size: int) -> int:
    """Wrap index onto a path of the given size."""
    return index % size


def indices_between(i: int, j: int, size: int) -> np.ndarray:
    """
    Indices strictly between i and j walking forward around a cyclic path.

    Wraps past the end when j < i. If i == j the walk goes all the way
    around, so every other index is returned.
    """
    i = circular_index(i, size)
    j = circular_index(j, size)
    count = (j - i - 1) % size
    if i == j:
        count = size - 1
    return (np.arange(i + 1, i + 1 + count) % size).astype(np.intp)


def perpendicular_distances(
    points: np.ndarray,
    p1: Tuple[int, int],
    p2: Tuple[int, int],
) -> np.ndarray:
    """
    Distance from each point to the infinite line through p1 and p2.

    Falls back to the distance to p1 when p1 and p2 coincide.

    Args:
        points: Nx2 array of (x, y)
        p1: First chord endpoint
        p2: Second chord endpoint
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    dx = float(p2[0] - p1[0])
    dy = float(p2[1] - p1[1])
    chord = math.hypot(dx, dy)

    rel_x = points[:, 0] - p1[0]
    rel_y = points[:, 1] - p1[1]

    if chord == 0:
        return np.hypot(rel_x, rel_y)

    return np.abs(dx * rel_y - dy * rel_x) / chord


def average(values: Sequence[float]) -> float:
    """Mean, or 0 for no values."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def stdev(values: Sequence[float]) -> float:
    """Population standard deviation, or 0 for no values."""
    if len(values) == 0:
        return 0.0
    return float(np.std(values))
