"""
Boundary tracing for labeled blobs.

Walks the outer contour of one labeled object with Moore-neighbor tracing,
clockwise in image coordinates (y pointing down), producing an ordered,
cyclic list of boundary pixels.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging

from ..blobs.labeler import Blobs, DEFAULT_LABEL
from ..blobs.models import Coord

logger = logging.getLogger(__name__)

# Clockwise ring of the 8 neighbors, starting west
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),   # W
    (-1, -1),  # NW
    (0, -1),   # N
    (1, -1),   # NE
    (1, 0),    # E
    (1, 1),    # SE
    (0, 1),    # S
    (-1, 1),   # SW
)

WEST = 0

_DIRECTION_OF: Dict[Tuple[int, int], int] = {
    offset: index for index, offset in enumerate(MOORE_OFFSETS)
}


def _step(point: Coord, direction: int) -> Coord:
    dx, dy = MOORE_OFFSETS[direction]
    return Coord(point.x + dx, point.y + dy)


def _find_start(blobs: Blobs, seed: Coord) -> Tuple[Optional[Coord], int]:
    """
    Pick a starting pixel on the outer contour near seed.

    Returns (start, label), or (None, DEFAULT_LABEL) if neither seed nor
    any of its neighbors is part of an object.
    """
    target = blobs.label(seed)
    start = Coord(*seed)

    if target == DEFAULT_LABEL:
        for direction in range(len(MOORE_OFFSETS)):
            neighbor = _step(start, direction)
            if blobs.label(neighbor) != DEFAULT_LABEL:
                start = neighbor
                target = blobs.label(neighbor)
                break
        else:
            return None, DEFAULT_LABEL

    # Slide to the left edge so the pixel to the west is known not to be the object
    while blobs.label(_step(start, WEST)) == target:
        start = _step(start, WEST)

    return start, target


def trace_boundary(
    blobs: Blobs,
    seed: Coord,
    max_length: int,
    log: Optional[logging.Logger] = None,
) -> List[Coord]:
    """
    Trace the outer boundary of the object at (or next to) seed.

    Args:
        blobs: Labeled image
        seed: Point on or adjacent to the object, usually its first point
        max_length: Maximum number of points in the path. Guards against
            traces that never close on noisy or degenerate objects.
        log: Diagnostic sink (module logger if omitted)

    Returns:
        Boundary points in clockwise order, starting at the object's left
        edge on the seed's row. The start is not repeated at the end. If the
        trace does not close within max_length, the partial path is returned.

    Example:
        >>> path = trace_boundary(blobs, pair.first, 2 * blobs.width * blobs.height)
    """
    log = log or logger

    if max_length < 1:
        return []

    start, target = _find_start(blobs, seed)
    if start is None:
        log.debug(f"No object at or next to {tuple(seed)}")
        return []

    path = [start]
    current = start
    backtrack = WEST
    first_move: Optional[int] = None

    while len(path) < max_length:
        # Search clockwise from the pixel we backtracked to
        move = None
        for k in range(1, len(MOORE_OFFSETS) + 1):
            direction = (backtrack + k) % len(MOORE_OFFSETS)
            if blobs.label(_step(current, direction)) == target:
                move = direction
                break

        # Isolated pixel
        if move is None:
            return path

        # Leaving the start the same way as the first time: closed
        if current == start and move == first_move:
            path.pop()
            return path

        if first_move is None:
            first_move = move

        # The last pixel checked before the move is outside the object
        outside = _step(current, (move - 1) % len(MOORE_OFFSETS))
        current = _step(current, move)
        backtrack = _DIRECTION_OF[(outside.x - current.x, outside.y - current.y)]
        path.append(current)

    log.debug(
        f"Boundary trace from {tuple(start)} did not close within {max_length} points"
    )
    return path


@dataclass
class Outline:
    """
    Boundary of one blob.

    Attributes:
        label: Resolved label of the traced object
        points: Ordered, cyclic boundary path
        closed: Whether the trace returned to its start within the bound
    """
    label: int
    points: List[Coord] = field(default_factory=list)
    closed: bool = False

    @classmethod
    def trace(
        cls,
        blobs: Blobs,
        seed: Coord,
        max_length: int,
        log: Optional[logging.Logger] = None,
    ) -> "Outline":
        """Trace the object at seed and wrap the path."""
        points = trace_boundary(blobs, seed, max_length, log=log)
        label = blobs.label(points[0]) if points else DEFAULT_LABEL
        closed = bool(points) and len(points) < max_length
        return cls(label=label, points=points, closed=closed)

    def __len__(self) -> int:
        return len(self.points)
