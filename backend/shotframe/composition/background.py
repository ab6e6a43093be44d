"""Background fills: solid colors and linear gradients."""

from __future__ import annotations

import logging
import math

import numpy as np
from PIL import Image

from ..models import Background, Gradient, GradientStop, Solid

logger = logging.getLogger("shotframe.composition.background")


def fill_background(canvas: Image.Image, background: Background) -> Image.Image:
    """Fill the whole canvas with a solid color or a gradient.

    Args:
        canvas: RGBA target surface.
        background: Solid or Gradient.

    Returns:
        The filled canvas. A gradient without stops returns the canvas
        untouched.
    """
    if isinstance(background, Solid):
        layer = Image.new("RGBA", canvas.size, background.color)
        return Image.alpha_composite(canvas, layer)

    if isinstance(background, Gradient):
        if not background.stops:
            logger.debug("Gradient has no stops, leaving background untouched")
            return canvas
        layer = Image.fromarray(render_gradient(canvas.size, background))
        return Image.alpha_composite(canvas, layer)

    raise TypeError(f"Unsupported background {type(background).__name__}")


def gradient_line(
    size: tuple[int, int], angle: float
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Start and end points of the gradient line for a surface.

    The angle follows the CSS convention: 0 points up and angles grow
    clockwise, so 90 runs left to right. The points sit symmetrically about
    the surface center.
    """
    width, height = size
    theta = math.radians(angle - 90)
    dx = math.cos(theta) * width / 2
    dy = math.sin(theta) * height / 2
    cx, cy = width / 2, height / 2
    return (cx - dx, cy - dy), (cx + dx, cy + dy)


def render_gradient(size: tuple[int, int], gradient: Gradient) -> np.ndarray:
    """Rasterize a linear gradient into an (height, width, 4) uint8 array."""
    width, height = size
    (sx, sy), (ex, ey) = gradient_line(size, gradient.angle)
    vx, vy = ex - sx, ey - sy
    length_sq = vx * vx + vy * vy

    xs = np.arange(width, dtype=np.float32) + 0.5
    ys = np.arange(height, dtype=np.float32) + 0.5
    if length_sq == 0:
        t = np.zeros((height, width), dtype=np.float32)
    else:
        t = ((xs[None, :] - sx) * vx + (ys[:, None] - sy) * vy) / length_sq
        t = np.clip(t, 0.0, 1.0)

    return _interpolate_stops(t, gradient.stops)


def _interpolate_stops(t: np.ndarray, stops: tuple[GradientStop, ...]) -> np.ndarray:
    # Stable sort keeps insertion order for equal positions
    ordered = sorted(stops, key=lambda s: s.position)
    colors = np.array([s.color for s in ordered], dtype=np.float32)
    positions = [s.position for s in ordered]

    out = np.empty(t.shape + (4,), dtype=np.float32)
    out[...] = colors[0]

    for i in range(len(ordered) - 1):
        p0, p1 = positions[i], positions[i + 1]
        if p1 <= p0:
            continue
        mask = (t >= p0) & (t <= p1)
        frac = ((t[mask] - p0) / (p1 - p0))[:, None]
        out[mask] = colors[i] + frac * (colors[i + 1] - colors[i])

    out[t >= positions[-1]] = colors[-1]
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)
