"""
Line Segmentation Module

Approximates a cyclic boundary path by a few long straight segments.
"""

from .models import LineSegment
from .segmentation import (
    SegmentationStrategy,
    find_larger_length,
    find_lines,
    find_lines_extending_decreasing_error,
    find_lines_halving_extending,
    is_line,
    line_error,
)

__all__ = [
    "LineSegment",
    "SegmentationStrategy",
    "find_larger_length",
    "find_lines",
    "find_lines_extending_decreasing_error",
    "find_lines_halving_extending",
    "is_line",
    "line_error",
]
