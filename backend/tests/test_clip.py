"""Tests for rounded-rectangle clip paths."""

import numpy as np
import pytest

from backend.shotframe.composition.clip import clip_mask, rounded_rect_path


class TestRoundedRectPath:
    def test_radius_is_percent_of_half_short_side(self):
        assert rounded_rect_path(0, 0, 200, 100, 50).radius == pytest.approx(25)
        assert rounded_rect_path(0, 0, 200, 100, 100).radius == pytest.approx(50)

    def test_zero_percent_is_plain_rectangle(self):
        path = rounded_rect_path(10, 20, 30, 40, 0)
        assert path.radius == 0
        assert path.points() == [(10, 20), (40, 20), (40, 60), (10, 60)]

    def test_points_stay_inside_rect(self):
        path = rounded_rect_path(5, 5, 80, 40, 60)
        for x, y in path.points(segments=8):
            assert 5 - 1e-9 <= x <= 85 + 1e-9
            assert 5 - 1e-9 <= y <= 45 + 1e-9

    def test_straight_edges_inset_by_radius(self):
        path = rounded_rect_path(0, 0, 100, 100, 40)
        points = path.points(segments=4)
        # Top edge runs from (r, 0) to (w - r, 0)
        assert (20.0, 0.0) in points
        assert (80.0, 0.0) in points


class TestClipMask:
    def test_plain_rect_mask_is_full(self):
        mask = np.array(clip_mask(rounded_rect_path(0, 0, 20, 10, 0), (20, 10)))
        assert (mask == 255).all()

    def test_rounded_corners_are_cleared(self):
        path = rounded_rect_path(0, 0, 60, 60, 100)
        mask = np.array(clip_mask(path, (60, 60)))
        assert mask[0, 0] == 0
        assert mask[59, 59] == 0
        assert mask[30, 30] == 255
        # Edge midpoints are still covered
        assert mask[30, 0] > 0
        assert mask[0, 30] > 0

    def test_origin_offsets_path(self):
        path = rounded_rect_path(100, 50, 40, 40, 0)
        mask = np.array(clip_mask(path, (40, 40), origin=(100, 50)))
        assert (mask == 255).all()

    def test_edges_are_antialiased(self):
        path = rounded_rect_path(0, 0, 80, 80, 100)
        mask = np.array(clip_mask(path, (80, 80), supersample=4))
        partial = (mask > 0) & (mask < 255)
        assert partial.any()

    def test_no_supersample(self):
        path = rounded_rect_path(0, 0, 16, 16, 50)
        mask = clip_mask(path, (16, 16), supersample=1)
        assert mask.size == (16, 16)
        assert mask.mode == "L"
