"""Unit tests for the canvas pixel buffer."""

import numpy as np
import pytest


class TestCanvas:
    """Tests for Canvas."""

    def test_new_canvas_is_black(self):
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.tuples import color

        c = Canvas(10, 20)
        assert c.width == 10
        assert c.height == 20
        assert c.pixel_at(9, 19) == color(0, 0, 0)

    def test_write_pixel(self):
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.tuples import color

        c = Canvas(10, 20)
        c.write_pixel(2, 3, color(1, 0, 0))
        assert c.pixel_at(2, 3) == color(1, 0, 0)

    def test_to_numpy_is_row_major_copy(self):
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.tuples import color

        c = Canvas(4, 2)
        c.write_pixel(3, 1, color(0.5, 1.5, -0.5))
        arr = c.to_numpy()
        assert arr.shape == (2, 4, 3)
        np.testing.assert_allclose(arr[1, 3], [0.5, 1.5, -0.5])
        arr[1, 3] = 0.0
        assert c.pixel_at(3, 1) == color(0.5, 1.5, -0.5)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 2)])
    def test_out_of_bounds(self, x, y):
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.tuples import color

        c = Canvas(4, 2)
        with pytest.raises(IndexError):
            c.write_pixel(x, y, color(1, 1, 1))
        with pytest.raises(IndexError):
            c.pixel_at(x, y)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions(self, width, height):
        from src.whitted.core.canvas import Canvas

        with pytest.raises(ValueError, match="positive"):
            Canvas(width, height)
