"""Canvas sizing and image fitting.

All functions are pure: they turn sizes and settings into floats and never
touch pixels.
"""

from __future__ import annotations

import logging

from ..config import Config
from ..models import AspectSpec, CanvasGeometry, DrawRect, Ratio
from ..validators import validate_preview_bounds

logger = logging.getLogger("shotframe.layout")


def resolve_canvas(
    asset_size: tuple[int, int],
    aspect: AspectSpec,
    preview_bounds: tuple[int, int] = (Config.PREVIEW_MAX_WIDTH, Config.PREVIEW_MAX_HEIGHT),
    base_size: float = Config.RATIO_BASE_SIZE,
) -> CanvasGeometry:
    """Compute the full-resolution canvas and the bounded preview canvas.

    Args:
        asset_size: Natural (width, height) of the source image.
        aspect: Original aspect or an explicit ratio.
        preview_bounds: Maximum (width, height) of the preview surface.
        base_size: Longer side of the canvas for explicit ratios.

    Returns:
        CanvasGeometry with logical and preview sizes.
    """
    max_w, max_h = preview_bounds
    validate_preview_bounds(max_w, max_h)

    if isinstance(aspect, Ratio):
        if aspect.width >= aspect.height:
            full_w = float(base_size)
            full_h = base_size * aspect.height / aspect.width
        else:
            full_h = float(base_size)
            full_w = base_size * aspect.width / aspect.height
    else:
        full_w, full_h = float(asset_size[0]), float(asset_size[1])

    preview_w, preview_h = full_w, full_h
    if full_w > max_w or full_h > max_h:
        ratio = min(max_w / full_w, max_h / full_h)
        preview_w *= ratio
        preview_h *= ratio

    logger.debug(
        "Canvas %s: full %.1fx%.1f, preview %.1fx%.1f",
        aspect, full_w, full_h, preview_w, preview_h,
    )
    return CanvasGeometry(full_w, full_h, preview_w, preview_h)


def fit_image(
    asset_size: tuple[int, int],
    available_w: float,
    available_h: float,
    padding: float = 0.0,
) -> DrawRect:
    """Fit the source into the available box, preserving its aspect ratio.

    The result is centered inside the box whose origin sits at the padding
    inset. A non-positive box yields an empty rectangle at its center.
    """
    if available_w <= 0 or available_h <= 0:
        return DrawRect(
            x=padding + available_w / 2,
            y=padding + available_h / 2,
            width=0.0,
            height=0.0,
        )

    img_ratio = asset_size[0] / asset_size[1]

    if available_w / img_ratio <= available_h:
        # Width is the limiting factor
        draw_w = available_w
        draw_h = available_w / img_ratio
    else:
        draw_h = available_h
        draw_w = available_h * img_ratio

    return DrawRect(
        x=padding + (available_w - draw_w) / 2,
        y=padding + (available_h - draw_h) / 2,
        width=draw_w,
        height=draw_h,
    )


def scale_for(geometry: CanvasGeometry, target_width: float) -> float:
    """Factor mapping logical units onto a target surface of this width."""
    return target_width / geometry.full_width


def layout_image(
    asset_size: tuple[int, int],
    target_size: tuple[float, float],
    padding: float,
    scale: float,
) -> DrawRect:
    """Draw rectangle for the source on a target, padding given in logical units."""
    pad = padding * scale
    target_w, target_h = target_size
    return fit_image(asset_size, target_w - 2 * pad, target_h - 2 * pad, pad)
