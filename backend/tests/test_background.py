"""Tests for solid and gradient background fills."""

import numpy as np
import pytest
from PIL import Image

from backend.shotframe.composition.background import (
    fill_background,
    gradient_line,
    render_gradient,
)
from backend.shotframe.models import Gradient, GradientStop, Solid
from backend.shotframe.parser import parse_gradient

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)


def _blank(size=(40, 20), color=(0, 0, 0, 0)):
    return Image.new("RGBA", size, color)


class TestSolidFill:
    def test_fills_every_pixel(self):
        result = fill_background(_blank(), Solid((12, 34, 56, 255)))
        arr = np.array(result)
        assert (arr == (12, 34, 56, 255)).all()

    def test_size_independent(self):
        small = np.array(fill_background(_blank((3, 2)), Solid(RED)))
        large = np.array(fill_background(_blank((300, 200)), Solid(RED)))
        assert (small == RED).all() and (large == RED).all()


class TestGradientLine:
    def test_90_degrees_runs_left_to_right(self):
        (sx, sy), (ex, ey) = gradient_line((100, 50), 90)
        assert sx == pytest.approx(0) and ex == pytest.approx(100)
        assert sy == pytest.approx(25) and ey == pytest.approx(25)

    def test_180_degrees_runs_top_to_bottom(self):
        (sx, sy), (ex, ey) = gradient_line((100, 50), 180)
        assert sy == pytest.approx(0) and ey == pytest.approx(50)
        assert sx == pytest.approx(50) and ex == pytest.approx(50)

    def test_0_degrees_runs_bottom_to_top(self):
        (_sx, sy), (_ex, ey) = gradient_line((100, 50), 0)
        assert sy == pytest.approx(50) and ey == pytest.approx(0)

    def test_symmetric_about_center(self):
        (sx, sy), (ex, ey) = gradient_line((120, 80), 135)
        assert (sx + ex) / 2 == pytest.approx(60)
        assert (sy + ey) / 2 == pytest.approx(40)


class TestGradientFill:
    def test_parsed_horizontal_gradient(self):
        gradient = parse_gradient("linear-gradient(90deg, #ff0000 0%, #0000ff 100%)")
        arr = render_gradient((100, 10), gradient)
        left, right = arr[5, 0], arr[5, 99]
        assert left[0] > 240 and left[2] < 15
        assert right[2] > 240 and right[0] < 15
        # Constant down each column
        assert (arr[:, 50] == arr[0, 50]).all()
        # Red decreases monotonically across the row
        assert (np.diff(arr[5, :, 0].astype(int)) <= 0).all()

    def test_single_stop_is_flat(self):
        arr = render_gradient((16, 16), Gradient(45, (GradientStop(GREEN, 0.3),)))
        assert (arr == GREEN).all()

    def test_pads_outside_stop_range(self):
        gradient = Gradient(90, (GradientStop(RED, 0.25), GradientStop(BLUE, 0.75)))
        arr = render_gradient((100, 4), gradient)
        assert (arr[:, :20] == RED).all()
        assert (arr[:, 80:] == BLUE).all()

    def test_duplicate_position_later_stop_wins(self):
        gradient = Gradient(
            90,
            (GradientStop(RED, 0.0), GradientStop(RED, 0.5), GradientStop(BLUE, 0.5), GradientStop(BLUE, 1.0)),
        )
        arr = render_gradient((100, 2), gradient)
        assert (arr[:, :50] == RED).all()
        assert (arr[:, 50:] == BLUE).all()

    def test_empty_stops_leave_canvas_untouched(self):
        canvas = _blank(color=(9, 9, 9, 255))
        result = fill_background(canvas, Gradient(135, ()))
        assert np.array_equal(np.array(result), np.array(canvas))

    def test_same_gradient_any_size(self):
        gradient = parse_gradient("linear-gradient(90deg, #000000 0%, #ffffff 100%)")
        small = render_gradient((50, 5), gradient)
        large = render_gradient((100, 10), gradient)
        # Matching relative positions carry close values
        assert abs(int(small[2, 25, 0]) - int(large[5, 50, 0])) <= 6

    def test_deterministic(self):
        gradient = parse_gradient("linear-gradient(135deg, #667eea 0%, #764ba2 100%)")
        first = fill_background(_blank((64, 48)), gradient)
        second = fill_background(_blank((64, 48)), gradient)
        assert np.array_equal(np.array(first), np.array(second))
