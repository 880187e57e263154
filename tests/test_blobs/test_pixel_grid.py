"""
Tests for the numpy pixel grid adapter.
"""

import pytest
import numpy as np

from fotoloc.blobs.models import Coord
from fotoloc.blobs.pixel_grid import PixelGrid


class TestPixelGridShape:
    """Tests for construction and dimensions."""

    def test_grayscale_dimensions(self):
        """Test that an HxW array reports width and height correctly."""
        grid = PixelGrid(np.zeros((4, 7), dtype=np.uint8))

        assert grid.width == 7
        assert grid.height == 4
        assert grid.channels == 1

    def test_color_dimensions(self):
        """Test that an HxWx3 array has three channels."""
        grid = PixelGrid(np.zeros((2, 3, 3), dtype=np.uint8))

        assert grid.width == 3
        assert grid.height == 2
        assert grid.channels == 3

    def test_rgba(self):
        """Test that four-channel images are accepted."""
        grid = PixelGrid(np.zeros((2, 2, 4), dtype=np.uint8))

        assert grid.channels == 4
        assert grid.default_color == (255, 255, 255, 255)

    def test_rejects_bad_shape(self):
        """Test that 1-D and 4-D arrays are rejected."""
        with pytest.raises(ValueError):
            PixelGrid(np.zeros(5, dtype=np.uint8))
        with pytest.raises(ValueError):
            PixelGrid(np.zeros((2, 2, 2, 2), dtype=np.uint8))

    def test_rejects_mismatched_default_color(self):
        """Test that the default color must match the channel count."""
        with pytest.raises(ValueError, match="channels"):
            PixelGrid(np.zeros((2, 2, 3), dtype=np.uint8), default_color=(0,))

    def test_from_rows(self):
        """Test building a grid from nested lists."""
        grid = PixelGrid.from_rows([[1, 2, 3], [4, 5, 6]])

        assert grid.width == 3
        assert grid.height == 2
        assert grid.color_at(Coord(2, 1)) == (6,)


class TestPixelGridColors:
    """Tests for color lookup."""

    def test_color_at_in_bounds(self):
        """Test reading a color channel tuple."""
        pixels = np.zeros((3, 3, 3), dtype=np.uint8)
        pixels[1, 2] = (10, 20, 30)
        grid = PixelGrid(pixels)

        assert grid.color_at(Coord(2, 1)) == (10, 20, 30)

    def test_color_at_out_of_bounds_is_default(self):
        """Test that outside pixels read as the default color."""
        grid = PixelGrid(np.zeros((3, 3), dtype=np.uint8))

        assert grid.color_at(Coord(-1, 0)) == (255,)
        assert grid.color_at(Coord(0, 3)) == (255,)
        assert grid.color_at(Coord(3, 3)) == (255,)

    def test_custom_default_color(self):
        """Test that a custom default color is reported outside."""
        grid = PixelGrid(np.zeros((3, 3, 3), dtype=np.uint8), default_color=(1, 2, 3))

        assert grid.color_at(Coord(5, 5)) == (1, 2, 3)

    def test_in_bounds(self):
        """Test the bounds check on all edges."""
        grid = PixelGrid(np.zeros((2, 3), dtype=np.uint8))

        assert grid.in_bounds(Coord(0, 0))
        assert grid.in_bounds(Coord(2, 1))
        assert not grid.in_bounds(Coord(3, 0))
        assert not grid.in_bounds(Coord(0, 2))
        assert not grid.in_bounds(Coord(-1, 0))

    def test_color_rows_match_color_equality(self):
        """Test that color ids are equal exactly when colors are equal."""
        pixels = np.zeros((2, 3, 3), dtype=np.uint8)
        pixels[0, 0] = (1, 2, 3)
        pixels[1, 2] = (1, 2, 3)
        # Same values in a different channel order is a different color
        pixels[0, 2] = (3, 2, 1)
        grid = PixelGrid(pixels)

        ids = grid.color_rows()

        assert len(ids) == 2
        assert len(ids[0]) == 3
        assert ids[0][0] == ids[1][2]
        assert ids[0][0] != ids[0][2]
        assert ids[0][1] == ids[1][0] == ids[1][1]
        assert ids[0][1] != ids[0][0]

    def test_color_rows_empty_grid(self):
        """Test that an empty grid gives empty rows."""
        grid = PixelGrid(np.zeros((0, 0), dtype=np.uint8))

        assert grid.color_rows() == []
