"""
Photo Locating Package

Finds photos in scanned pages: groups pixels into same-colored blobs,
traces each blob's boundary and approximates it with straight lines.
"""

from .blobs import Blobs, Coord, CoordPair, PixelGrid, UnionFind
from .outline import Outline, trace_boundary
from .lines import (
    LineSegment,
    SegmentationStrategy,
    find_lines,
    find_lines_extending_decreasing_error,
    find_lines_halving_extending,
    is_line,
    line_error,
)
from .config.extraction_config import ExtractionConfig
from .pipeline import (
    extract_objects,
    extract_objects_from_file,
    ExtractionResult,
    ExtractedObject,
)

__all__ = [
    "Blobs",
    "Coord",
    "CoordPair",
    "PixelGrid",
    "UnionFind",
    "Outline",
    "trace_boundary",
    "LineSegment",
    "SegmentationStrategy",
    "find_lines",
    "find_lines_extending_decreasing_error",
    "find_lines_halving_extending",
    "is_line",
    "line_error",
    "ExtractionConfig",
    "extract_objects",
    "extract_objects_from_file",
    "ExtractionResult",
    "ExtractedObject",
]
