"""
Drawing utilities for extraction debugging.
"""

from typing import List, Tuple
import cv2
import numpy as np

from .pipeline import ExtractedObject

# How big to make the endpoint marks
MARK_SIZE = 5

# BGR
BOUNDARY_COLOR = (0, 0, 255)
LINE_COLOR = (0, 255, 0)
MARK_COLOR = (127, 127, 127)


def _as_bgr(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    return image.copy()


def mark(
    image: np.ndarray,
    point: Tuple[int, int],
    size: int = MARK_SIZE,
    color: Tuple[int, int, int] = MARK_COLOR,
) -> None:
    """Draw a filled square of side size centered on point (in place)."""
    half = size // 2
    x, y = int(point[0]), int(point[1])
    cv2.rectangle(image, (x - half, y - half), (x + half, y + half), color, -1)


def draw_boundaries(
    image: np.ndarray,
    objects: List[ExtractedObject],
    color: Tuple[int, int, int] = BOUNDARY_COLOR,
) -> np.ndarray:
    """
    Mark every boundary point of every object.

    Args:
        image: Image to draw on (not modified)
        objects: Extracted objects
        color: BGR color for boundary pixels

    Returns:
        BGR copy with the boundaries drawn
    """
    vis = _as_bgr(image)
    height, width = vis.shape[:2]

    for obj in objects:
        if not obj.boundary:
            continue
        points = np.array(obj.boundary, dtype=np.int32)
        inside = (
            (points[:, 0] >= 0) & (points[:, 0] < width)
            & (points[:, 1] >= 0) & (points[:, 1] < height)
        )
        points = points[inside]
        vis[points[:, 1], points[:, 0]] = color

    return vis


def draw_lines(
    image: np.ndarray,
    objects: List[ExtractedObject],
    color: Tuple[int, int, int] = LINE_COLOR,
    mark_size: int = MARK_SIZE,
) -> np.ndarray:
    """
    Draw each object's line segments and mark their endpoints.

    Args:
        image: Image to draw on (not modified)
        objects: Extracted objects
        color: BGR color for the lines
        mark_size: Side of the endpoint marks (0 disables marks)

    Returns:
        BGR copy with the lines drawn
    """
    vis = _as_bgr(image)

    for obj in objects:
        for line in obj.lines:
            cv2.line(vis, tuple(line.start), tuple(line.end), color, 1)
            if mark_size > 0:
                mark(vis, line.start, mark_size)
                mark(vis, line.end, mark_size)

    return vis
