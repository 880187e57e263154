"""
Split a cyclic boundary path into straight line segments.

Two greedy, left-to-right search strategies are provided. Both prefer a
few long lines found early over many short ones:

- halving/extending: finds at most two lines, accepting a candidate with
  is_line() and growing it while it stays a line
- extending with decreasing error: accepts a candidate with line_error()
  and grows it while the error does not increase, then keeps segmenting
  the rest of the path

Path points are assumed to be about one pixel apart, so index distances
are roughly pixel lengths.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple
import math
import numpy as np

from .geometry import (
    average,
    circular_index,
    distance,
    indices_between,
    perpendicular_distances,
    stdev,
)
from .models import LineSegment

# Defaults for the two strategies
HALVING_MIN_LENGTH = 10
EXTENDING_MIN_LENGTH = 100
MAX_LOOK_AHEAD = 25


class SegmentationStrategy(Enum):
    """Available line search strategies."""
    HALVING_EXTENDING = "halving_extending"
    EXTENDING_DECREASING_ERROR = "extending_decreasing_error"


def _as_array(path) -> np.ndarray:
    return np.asarray(path, dtype=np.float64).reshape(-1, 2)


def _chord_distances(points: np.ndarray, i: int, j: int) -> np.ndarray:
    """Distances of the points strictly between i and j to the chord i-j."""
    between = indices_between(i, j, len(points))
    return perpendicular_distances(points[between], points[i], points[j])


def is_line(path: Sequence[Tuple[int, int]], i: int, j: int, max_error: float) -> bool:
    """
    Do the points between i and j lie close enough to the chord i-j.

    The path is treated as circular, so j < i wraps around the end.

    Both the mean and the standard deviation of the perpendicular distances
    must stay under a fraction of the chord length: the mean under
    max_error * chord and the standard deviation under half of that.
    Perfectly collinear points (all distances zero) are a line for any
    max_error >= 0.

    Returns False for indices outside the path and for zero-length chords.
    """
    points = _as_array(path)
    size = len(points)

    if i < 0 or j < 0 or i >= size or j >= size:
        return False

    chord = distance(points[i], points[j])
    if chord == 0:
        return False

    dist = _chord_distances(points, i, j)
    avg = average(dist)
    deviation = stdev(dist)

    # Threshold scales with the chord so there's no tendency toward short lines
    avg_thresh = chord * max_error
    stdev_thresh = avg_thresh / 2

    return (avg < avg_thresh or avg == 0) and (deviation < stdev_thresh or deviation == 0)


def line_error(path: Sequence[Tuple[int, int]], i: int, j: int) -> float:
    """
    Average distance of the points between i and j from the chord i-j,
    as a fraction of the chord length. Lower is straighter.

    Indices wrap around the path. Returns inf for an empty path or a
    zero-length chord.
    """
    points = _as_array(path)
    size = len(points)

    if size == 0:
        return math.inf

    i = circular_index(i, size)
    j = circular_index(j, size)

    chord = distance(points[i], points[j])
    if chord == 0:
        return math.inf

    return average(_chord_distances(points, i, j)) / chord


def _extend_while_line(
    path: np.ndarray,
    start: int,
    length: int,
    max_error: float,
) -> int:
    """Grow length one point at a time while start..start+length is a line."""
    size = len(path)
    while start + length + 1 < size and is_line(path, start, start + length + 1, max_error):
        length += 1
    return length


def find_lines_halving_extending(
    path: Sequence[Tuple[int, int]],
    max_error: float,
    min_length: int = HALVING_MIN_LENGTH,
) -> List[LineSegment]:
    """
    Halving and extending line search. Finds at most two lines.

    If the whole path is a line longer than min_length, that is the only
    line. Otherwise a window of half the path is slid over every start
    point. If no start gives a line the window is halved and the slide
    repeated, until a line is found or the window drops under min_length.
    That line is extended while it stays a line. A second line
    is then searched from its end with a min_length window.

    Args:
        path: Ordered, cyclic boundary points
        max_error: Maximum mean distance from the chord as a fraction of
            the chord length (e.g. 0.04)
        min_length: Minimum window length in points

    Returns:
        Zero, one or two non-overlapping LineSegments
    """
    points = _as_array(path)
    size = len(points)
    lines: List[LineSegment] = []

    if size == 0:
        return lines

    whole_length = distance(points[0], points[size - 1])
    if whole_length > min_length and is_line(points, 0, size - 1, max_error):
        lines.append(LineSegment.between(_point(points, 0), _point(points, size - 1)))
        return lines

    length = size // 2
    first_start = -1
    first_end = 0

    # Slide the window over every start; halve it only when none is a line
    while first_start == -1 and length >= min_length:
        for i in range(size):
            if is_line(points, i, i + length, max_error):
                larger_length = _extend_while_line(points, i, length, max_error)
                first_start = i
                first_end = circular_index(i + larger_length, size)
                lines.append(LineSegment.between(
                    _point(points, first_start),
                    _point(points, first_end),
                ))
                break
        else:
            length //= 2

    # No line at least min_length long
    if first_start == -1:
        return lines

    for i in range(first_end, size + first_start):
        if is_line(points, i, i + min_length, max_error):
            larger_length = _extend_while_line(points, i, min_length, max_error)
            lines.append(LineSegment.between(
                _point(points, i),
                _point(points, circular_index(i + larger_length, size)),
            ))
            break

    return lines


def find_larger_length(
    path: Sequence[Tuple[int, int]],
    current_error: float,
    start: int,
    current_length: int,
    max_look_ahead: int = MAX_LOOK_AHEAD,
    limit: Optional[int] = None,
) -> int:
    """
    Extend a line while its error keeps going down.

    The end is moved forward one point at a time. A longer line replaces
    the best one when its error is no higher. After max_look_ahead
    non-improving points in a row the search stops and the end rolls back
    to the best line found.

    Args:
        path: Ordered, cyclic boundary points
        current_error: line_error() of start..start+current_length
        start: Index of the line's first point
        current_length: Length (in points) of the line found so far
        max_look_ahead: Non-improving points tolerated before stopping
        limit: Largest index (unwrapped) the end may reach. Defaults to the
            point just before start, one full turn around the path.

    Returns:
        Best length found, at least current_length
    """
    points = _as_array(path)
    size = len(points)
    if limit is None:
        limit = start + size - 1

    best_length = current_length
    increasing = 0
    larger_length = current_length + 1

    while start + larger_length <= limit:
        new_error = line_error(points, start, start + larger_length)

        if new_error <= current_error:
            current_error = new_error
            best_length = larger_length
            increasing = 0
        elif increasing < max_look_ahead:
            increasing += 1
        else:
            break

        larger_length += 1

    return best_length


def find_lines_extending_decreasing_error(
    path: Sequence[Tuple[int, int]],
    max_error: float,
    min_length: int = EXTENDING_MIN_LENGTH,
    max_look_ahead: int = MAX_LOOK_AHEAD,
) -> List[LineSegment]:
    """
    Extending-while-decreasing-error line search.

    The first line is found with the same slide-then-halve window search
    as the halving strategy, but a window is
    accepted when line_error() < max_error, then extended with
    find_larger_length(). The window is then halved once more (the rest of
    the lines are probably about that long) and, if still at least
    min_length, the remainder of the path is segmented the same way. Each
    new line starts where the previous one ended.

    Args:
        path: Ordered, cyclic boundary points
        max_error: Maximum line_error() for a window to count as a line
        min_length: Minimum window length in points
        max_look_ahead: Non-improving points tolerated when extending

    Returns:
        LineSegments in path order, or an empty list if no line reaches
        min_length
    """
    points = _as_array(path)
    size = len(points)
    lines: List[LineSegment] = []

    if size == 0:
        return lines

    length = size // 2
    first_start = -1
    first_end = 0

    while first_start == -1 and length >= min_length:
        for i in range(size):
            current_error = line_error(points, i, i + length)

            if current_error < max_error:
                larger_length = find_larger_length(points, current_error, i, length, max_look_ahead)
                first_start = i
                first_end = circular_index(i + larger_length, size)
                lines.append(LineSegment.between(
                    _point(points, first_start),
                    _point(points, first_end),
                ))
                break
        else:
            length //= 2

    if first_start == -1:
        return lines

    length //= 2

    # Too short to look for more, keep just the longest line
    if length < min_length:
        return lines

    end = size + first_start
    if first_end < first_start:
        end = first_start

    i = first_end
    while i < end:
        if i + length > end:
            break

        current_error = line_error(points, i, i + length)

        if current_error < max_error:
            larger_length = find_larger_length(
                points, current_error, i, length, max_look_ahead, limit=end,
            )
            lines.append(LineSegment.between(
                _point(points, circular_index(i, size)),
                _point(points, circular_index(i + larger_length, size)),
            ))
            i += larger_length
        else:
            i += 1

    return lines


def find_lines(
    path: Sequence[Tuple[int, int]],
    max_error: float,
    strategy: SegmentationStrategy = SegmentationStrategy.EXTENDING_DECREASING_ERROR,
    **kwargs,
) -> List[LineSegment]:
    """
    Segment path into lines with the chosen strategy.

    Extra keyword arguments (min_length, max_look_ahead) are passed through.
    """
    strategy = SegmentationStrategy(strategy)

    if strategy == SegmentationStrategy.HALVING_EXTENDING:
        kwargs.pop("max_look_ahead", None)
        return find_lines_halving_extending(path, max_error, **kwargs)

    return find_lines_extending_decreasing_error(path, max_error, **kwargs)


def _point(points: np.ndarray, index: int) -> Tuple[int, int]:
    x, y = points[index]
    return (int(round(x)), int(round(y)))
