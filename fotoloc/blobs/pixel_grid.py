"""
Pixel grid adapter over numpy images.

The labeler only needs a width, a height and exact per-pixel color
equality. PixelGrid provides that for grayscale (HxW), RGB/BGR (HxWx3)
and RGBA (HxWx4) arrays.
"""

from typing import List, Optional, Tuple, Hashable, Sequence
import numpy as np

from .models import Coord

# Out-of-bounds pixels read as white so they are never a useful pixel
DEFAULT_CHANNEL_VALUE = 255


class PixelGrid:
    """
    Read-only view of an image as a grid of colors.

    Example:
        >>> grid = PixelGrid(np.zeros((5, 5, 3), dtype=np.uint8))
        >>> grid.width, grid.height
        (5, 5)
        >>> grid.color_at(Coord(-1, 0))
        (255, 255, 255)
    """

    def __init__(
        self,
        pixels: np.ndarray,
        default_color: Optional[Tuple[int, ...]] = None,
    ):
        """
        Args:
            pixels: HxW or HxWxC array
            default_color: Color reported outside the grid (white if omitted)
        """
        pixels = np.asarray(pixels)
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        if pixels.ndim != 3:
            raise ValueError(f"Expected an HxW or HxWxC array, got shape {pixels.shape}")

        self._pixels = pixels
        self._channels = pixels.shape[2]

        if default_color is None:
            default_color = (DEFAULT_CHANNEL_VALUE,) * self._channels
        if len(default_color) != self._channels:
            raise ValueError(
                f"default_color must have {self._channels} channels, got {len(default_color)}"
            )
        self._default_color = tuple(int(c) for c in default_color)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], **kwargs) -> "PixelGrid":
        """Build a grid from nested lists (rows of pixel values or channel tuples)."""
        return cls(np.array(rows), **kwargs)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def default_color(self) -> Tuple[int, ...]:
        return self._default_color

    def in_bounds(self, point: Coord) -> bool:
        """Is point within [0, width) x [0, height)."""
        return 0 <= point[0] < self.width and 0 <= point[1] < self.height

    def color_at(self, point: Coord) -> Tuple[int, ...]:
        """Channel tuple at point, or the default color outside the grid."""
        if not self.in_bounds(point):
            return self._default_color
        x, y = point
        return tuple(int(c) for c in self._pixels[y, x])

    def color_rows(self) -> List[List[Hashable]]:
        """
        Colors as nested row lists of small integers, one id per distinct color.

        Two pixels get the same id exactly when all their channels are equal,
        so comparing ids is the same as comparing colors.
        """
        if self.width == 0 or self.height == 0:
            return [[] for _ in range(self.height)]

        flat = self._pixels.reshape(-1, self._channels)
        _, inverse = np.unique(flat, axis=0, return_inverse=True)
        return inverse.reshape(self.height, self.width).tolist()
