"""Composition engine for assembling framed screenshots."""

from __future__ import annotations

import logging

from PIL import Image, ImageChops

from ..constants import BLUR_ITERATIONS
from ..enums import RenderMode
from ..layout import layout_image, scale_for
from ..models import (
    CanvasGeometry,
    DrawRect,
    Gradient,
    ImageAsset,
    RedactionMark,
    RenderResult,
    RenderSettings,
)
from .background import fill_background
from .clip import clip_mask, rounded_rect_path
from .redaction import apply_marks
from .resize import high_quality_resize

logger = logging.getLogger("shotframe.composition")


class CompositionEngine:
    """Compose background, fitted image and redactions onto one surface.

    The engine holds no per-image state: every call receives the asset,
    a settings snapshot and the marks, so preview and export renders are the
    same composition at different scales.
    """

    def render(
        self,
        target_size: tuple[int, int],
        asset: ImageAsset,
        settings: RenderSettings,
        marks: tuple[RedactionMark, ...],
        geometry: CanvasGeometry,
        mode: RenderMode = RenderMode.PREVIEW,
        iterations: int | None = None,
    ) -> RenderResult:
        """Render the composition onto a fresh surface.

        Args:
            target_size: Surface (width, height) in pixels.
            asset: Source image.
            settings: Frozen layout/background snapshot.
            marks: Redaction marks in logical units.
            geometry: Resolved canvas; its full width defines the logical scale.
            mode: Preview or export, used for the default blur strength.
            iterations: Box blur passes; overrides the mode default.

        Returns:
            RenderResult with the RGBA image and the geometry used.
        """
        target_w, target_h = target_size
        scale = scale_for(geometry, target_w)
        warnings: list[str] = []

        # Clear
        canvas = Image.new("RGBA", target_size, (0, 0, 0, 0))

        if isinstance(settings.background, Gradient) and not settings.background.stops:
            warnings.append("Background gradient has no usable stops")
        canvas = fill_background(canvas, settings.background)

        rect = layout_image(asset.size, (target_w, target_h), settings.padding, scale)
        if rect.is_empty:
            warnings.append("Padding leaves no room for the image")
            logger.debug("Degenerate layout at %dx%d, padding %d", target_w, target_h, settings.padding)
        else:
            canvas = self._draw_image(canvas, asset, rect, settings.border_radius)

        if iterations is None:
            iterations = BLUR_ITERATIONS[mode]
        canvas, skipped = apply_marks(canvas, marks, scale, iterations)
        if skipped:
            warnings.append(f"{skipped} redaction mark(s) outside the canvas")

        logger.debug(
            "Rendered %s %dx%d (scale %.3f, %d marks)",
            mode.value, target_w, target_h, scale, len(marks),
        )
        return RenderResult(image=canvas, draw_rect=rect, scale=scale, warnings=warnings)

    def _draw_image(
        self,
        canvas: Image.Image,
        asset: ImageAsset,
        rect: DrawRect,
        border_radius: int,
    ) -> Image.Image:
        """Resample the asset into the draw rect, clipped to rounded corners."""
        left, top, right, bottom = rect.to_pixel_box()
        size = (right - left, bottom - top)
        if size[0] <= 0 or size[1] <= 0:
            return canvas

        layer = high_quality_resize(asset.image, size)

        # The clip only touches this layer, so later drawing is unclipped
        if border_radius > 0:
            path = rounded_rect_path(rect.x, rect.y, rect.width, rect.height, border_radius)
            mask = clip_mask(path, size, origin=(left, top))
            layer.putalpha(ImageChops.multiply(layer.getchannel("A"), mask))

        canvas.alpha_composite(layer, dest=(left, top))
        return canvas
