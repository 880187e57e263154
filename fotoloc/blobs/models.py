"""
Coordinate types shared by the labeler, tracer and line segmenter.
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple
import math


class Coord(NamedTuple):
    """Integer image coordinate, x to the right and y down."""
    x: int
    y: int

    def is_valid(self) -> bool:
        """True unless this is the INVALID_COORD sentinel."""
        return self != INVALID_COORD

    def to_dict(self) -> Dict[str, int]:
        """Convert to JSON-serializable dictionary."""
        return {"x": int(self.x), "y": int(self.y)}


# Denotes "not present"
INVALID_COORD = Coord(-1, -1)


@dataclass
class CoordPair:
    """
    First and last place an object was seen during the raster scan.

    Attributes:
        first: Earliest pixel of the object in row-major order
        last: Latest pixel of the object in row-major order
    """
    first: Coord = field(default=INVALID_COORD)
    last: Coord = field(default=INVALID_COORD)

    def is_empty(self) -> bool:
        """Check whether this is the empty (not found) pair."""
        return not self.first.is_valid() and not self.last.is_valid()

    def distance(self) -> float:
        """Euclidean distance from first to last. May be the height, width or diagonal."""
        if self.is_empty():
            return 0.0
        return math.hypot(self.last.x - self.first.x, self.last.y - self.first.y)
