"""
Programmatic grid, path and image generation for fotoloc tests.
"""

import numpy as np
from typing import List, Tuple

from fotoloc.blobs.pixel_grid import PixelGrid

# Gray levels that survive 10-level quantization unchanged (multiples of 28)
DARK = 56
MID = 112
LIGHT = 224


def create_l_shape() -> PixelGrid:
    """
    5x5 grid of two colors with an "L" of color 1.

        1 0 0 0 0
        1 0 0 0 0
        1 0 0 0 0
        1 1 1 0 0
        0 0 0 0 0
    """
    rows = [
        [1, 0, 0, 0, 0],
        [1, 0, 0, 0, 0],
        [1, 0, 0, 0, 0],
        [1, 1, 1, 0, 0],
        [0, 0, 0, 0, 0],
    ]
    return PixelGrid.from_rows(rows)


def l_shape_pixels() -> List[Tuple[int, int]]:
    """(x, y) of the L pixels in row-major order."""
    return [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 3)]


def create_two_blocks(size: int = 10) -> PixelGrid:
    """Two disjoint 2x2 blocks of color 1 on a color 0 grid."""
    pixels = np.zeros((size, size), dtype=np.uint8)
    pixels[1:3, 1:3] = 1
    pixels[6:8, 6:8] = 1
    return PixelGrid(pixels)


def create_block(
    grid_size: Tuple[int, int],
    top_left: Tuple[int, int],
    block_size: Tuple[int, int],
) -> PixelGrid:
    """
    A single block of color 1 on a color 0 grid.

    Args:
        grid_size: (width, height)
        top_left: (x, y) of the block
        block_size: (width, height) of the block
    """
    pixels = np.zeros((grid_size[1], grid_size[0]), dtype=np.uint8)
    x, y = top_left
    pixels[y:y + block_size[1], x:x + block_size[0]] = 1
    return PixelGrid(pixels)


def create_random_grid(
    size: Tuple[int, int] = (20, 20),
    colors: int = 3,
    seed: int = 0,
) -> Tuple[PixelGrid, np.ndarray]:
    """Random grid of a few colors. Returns (grid, raw HxW array)."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, colors, size=(size[1], size[0]), dtype=np.uint8)
    return PixelGrid(pixels), pixels


def rectangle_path(
    corners: Tuple[int, int, int, int] = (0, 0, 9, 9),
    rotate: int = 0,
) -> List[Tuple[int, int]]:
    """
    Integer points along an axis-aligned rectangle, clockwise from the
    top-left corner, without repeating the first point.

    Args:
        corners: (x0, y0, x1, y1) of the top-left and bottom-right corners
        rotate: Move this many points from the end to the front, so the
            path starts that many points before the top-left corner
    """
    x0, y0, x1, y1 = corners
    path = [(x, y0) for x in range(x0, x1 + 1)]
    path += [(x1, y) for y in range(y0 + 1, y1 + 1)]
    path += [(x, y1) for x in range(x1 - 1, x0 - 1, -1)]
    path += [(x0, y) for y in range(y1 - 1, y0, -1)]

    if rotate:
        path = path[-rotate:] + path[:-rotate]
    return path


def diagonal_path(n: int) -> List[Tuple[int, int]]:
    """n points on a perfect 45 degree diagonal."""
    return [(i, i) for i in range(n)]


def create_scan(
    size: Tuple[int, int] = (300, 300),
    rect: Tuple[int, int, int, int] = (60, 50, 240, 250),
    value: int = DARK,
) -> np.ndarray:
    """
    White BGR page with one flat "photo" rectangle.

    Args:
        size: (height, width) of the page
        rect: (x0, y0, x1, y1), exclusive of x1 and y1
        value: Gray value of the rectangle
    """
    image = np.ones((size[0], size[1], 3), dtype=np.uint8) * 255
    x0, y0, x1, y1 = rect
    image[y0:y1, x0:x1] = value
    return image


def rectangle_perimeter(rect: Tuple[int, int, int, int]) -> set:
    """Border pixels of a rectangle given as (x0, y0, x1, y1), x1/y1 exclusive."""
    x0, y0, x1, y1 = rect
    return {
        (x, y)
        for y in range(y0, y1)
        for x in range(x0, x1)
        if x in (x0, x1 - 1) or y in (y0, y1 - 1)
    }
