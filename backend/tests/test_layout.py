"""Tests for canvas resolution and image fitting."""

import pytest

from backend.shotframe.exceptions import ValidationError
from backend.shotframe.layout import fit_image, layout_image, resolve_canvas, scale_for
from backend.shotframe.models import OriginalAspect, Ratio


class TestResolveCanvas:
    def test_original_uses_asset_size(self):
        geometry = resolve_canvas((800, 600), OriginalAspect(), (2000, 2000))
        assert (geometry.full_width, geometry.full_height) == (800, 600)
        assert (geometry.preview_width, geometry.preview_height) == (800, 600)

    @pytest.mark.parametrize("w,h", [(1, 1), (16, 9), (9, 16), (4, 3), (3, 4), (21, 9), (1, 7)])
    def test_ratio_is_preserved(self, w, h):
        geometry = resolve_canvas((800, 600), Ratio(w, h))
        assert geometry.full_width / geometry.full_height == pytest.approx(w / h)
        assert geometry.preview_width / geometry.preview_height == pytest.approx(w / h)

    def test_longer_side_uses_base(self):
        landscape = resolve_canvas((10, 10), Ratio(16, 9), base_size=1000)
        portrait = resolve_canvas((10, 10), Ratio(9, 16), base_size=1000)
        assert landscape.full_width == 1000
        assert landscape.full_height == pytest.approx(562.5)
        assert portrait.full_height == 1000
        assert portrait.full_width == pytest.approx(562.5)

    def test_preview_scaled_into_bounds(self):
        geometry = resolve_canvas((800, 600), OriginalAspect(), (460, 300))
        # Height is the binding constraint: 300 / 600
        assert geometry.preview_height == pytest.approx(300)
        assert geometry.preview_width == pytest.approx(400)

    def test_preview_equals_full_when_small(self):
        geometry = resolve_canvas((320, 200), OriginalAspect(), (460, 300))
        assert geometry.preview_pixel_size == (320, 200)

    def test_preview_to_logical(self):
        geometry = resolve_canvas((800, 600), OriginalAspect(), (460, 300))
        assert geometry.preview_to_logical == pytest.approx(2.0)

    def test_invalid_bounds_rejected(self):
        with pytest.raises(ValidationError):
            resolve_canvas((800, 600), OriginalAspect(), (0, 300))


class TestFitImage:
    def test_original_with_padding_scenario(self):
        rect = fit_image((800, 600), 800 - 40, 600 - 40, 20)
        # 760 wide would need 570 high, so height limits
        assert rect.height == pytest.approx(560)
        assert rect.width == pytest.approx(560 * 800 / 600)

    def test_layout_image_800x600_padding_20(self):
        rect = layout_image((800, 600), (800, 600), padding=20, scale=1.0)
        assert rect.height == pytest.approx(560)
        assert rect.y == pytest.approx(20)
        assert rect.x == pytest.approx(20 + (760 - rect.width) / 2)

    def test_square_canvas_letterboxes_landscape(self):
        geometry = resolve_canvas((800, 600), Ratio(1, 1))
        size = (geometry.full_width, geometry.full_height)
        rect = layout_image((800, 600), size, padding=20, scale=1.0)
        available_h = geometry.full_height - 40
        assert rect.width == pytest.approx(geometry.full_width - 40)
        assert rect.height < available_h
        top_band = rect.y
        bottom_band = geometry.full_height - rect.y2
        assert top_band == pytest.approx(bottom_band)
        assert top_band > 20

    @pytest.mark.parametrize("asset", [(800, 600), (600, 800), (1920, 1080), (5, 500)])
    @pytest.mark.parametrize("box", [(100, 100), (300, 50), (50, 300), (1000, 999)])
    def test_aspect_never_distorted(self, asset, box):
        rect = fit_image(asset, box[0], box[1], 7)
        assert rect.width / rect.height == pytest.approx(asset[0] / asset[1])
        assert rect.width <= box[0] + 1e-9
        assert rect.height <= box[1] + 1e-9

    def test_degenerate_box_is_empty_not_error(self):
        rect = fit_image((800, 600), -10, 200, 60)
        assert rect.is_empty
        assert rect.width == 0 and rect.height == 0

    def test_zero_box_is_empty(self):
        assert fit_image((800, 600), 0, 0, 50).is_empty


class TestScaleInvariance:
    def test_double_scale_doubles_rect(self):
        geometry = resolve_canvas((800, 600), Ratio(16, 9))
        full = (geometry.full_width, geometry.full_height)
        k = 0.37
        small = layout_image((800, 600), (full[0] * k, full[1] * k), 30, k)
        large = layout_image((800, 600), (full[0] * 2 * k, full[1] * 2 * k), 30, 2 * k)
        doubled = small.scale(2)
        assert large.x == pytest.approx(doubled.x)
        assert large.y == pytest.approx(doubled.y)
        assert large.width == pytest.approx(doubled.width)
        assert large.height == pytest.approx(doubled.height)

    def test_scale_for_target(self):
        geometry = resolve_canvas((800, 600), OriginalAspect())
        assert scale_for(geometry, 400) == pytest.approx(0.5)
        assert scale_for(geometry, 1600) == pytest.approx(2.0)
