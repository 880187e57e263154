"""
Data structures for line segmentation results.
"""

from dataclasses import dataclass
from typing import Dict, Any, List, Tuple
import math

from ..blobs.models import Coord


@dataclass
class LineSegment:
    """
    A straight piece of a boundary path.

    Attributes:
        start: First endpoint (a boundary path point)
        end: Second endpoint (a boundary path point)
        length: Euclidean distance between the endpoints
    """
    start: Coord
    end: Coord
    length: float

    @classmethod
    def between(cls, start: Tuple[int, int], end: Tuple[int, int]) -> "LineSegment":
        """Create a segment, computing its length."""
        start = Coord(*start)
        end = Coord(*end)
        return cls(start=start, end=end, length=math.hypot(end.x - start.x, end.y - start.y))

    @property
    def angle(self) -> float:
        """Direction in degrees, normalized to 0-180 (0 = horizontal)."""
        angle = math.degrees(math.atan2(self.end.y - self.start.y, self.end.x - self.start.x))
        if angle < 0:
            angle += 180
        return angle % 180

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "length": round(float(self.length), 3),
            "angle": round(self.angle, 2),
        }


def total_length(lines: List[LineSegment]) -> float:
    """Sum of segment lengths."""
    return sum(line.length for line in lines)
