"""
Blob Detection Module

Groups same-colored pixels into connected regions and records where each
region was first and last seen.
"""

from .models import Coord, CoordPair, INVALID_COORD
from .union_find import UnionFind
from .pixel_grid import PixelGrid
from .labeler import Blobs, DEFAULT_LABEL

__all__ = [
    "Coord",
    "CoordPair",
    "INVALID_COORD",
    "UnionFind",
    "PixelGrid",
    "Blobs",
    "DEFAULT_LABEL",
]
