"""Rounded-rectangle clip paths and their raster masks."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image, ImageDraw

from ..config import Config

Point = tuple[float, float]


@dataclass(frozen=True)
class RoundedRectPath:
    """Rectangle outline with quadratic-curve corners of equal radius."""
    x: float
    y: float
    width: float
    height: float
    radius: float

    def points(self, segments: int = Config.CORNER_SEGMENTS) -> list[Point]:
        """Flatten the outline into a closed polygon, clockwise from top-left."""
        x, y, w, h, r = self.x, self.y, self.width, self.height, self.radius
        if r <= 0:
            return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]

        # (start, control, end) for each corner, in drawing order
        corners = [
            ((x + w - r, y), (x + w, y), (x + w, y + r)),
            ((x + w, y + h - r), (x + w, y + h), (x + w - r, y + h)),
            ((x + r, y + h), (x, y + h), (x, y + h - r)),
            ((x, y + r), (x, y), (x + r, y)),
        ]
        pts: list[Point] = []
        for start, control, end in corners:
            pts.extend(_quadratic(start, control, end, segments))
        return pts


def _quadratic(p0: Point, c: Point, p1: Point, segments: int) -> list[Point]:
    out = []
    for i in range(segments + 1):
        t = i / segments
        u = 1 - t
        out.append((
            u * u * p0[0] + 2 * u * t * c[0] + t * t * p1[0],
            u * u * p0[1] + 2 * u * t * c[1] + t * t * p1[1],
        ))
    return out


def rounded_rect_path(
    x: float, y: float, width: float, height: float, radius_percent: float
) -> RoundedRectPath:
    """Build a rounded rectangle whose radius is a percentage of half the shorter side.

    0 gives a plain rectangle, 100 the largest rounding that fits.
    """
    radius = min(width, height) * (radius_percent / 100) * 0.5
    return RoundedRectPath(x, y, width, height, max(0.0, radius))


def clip_mask(
    path: RoundedRectPath,
    size: tuple[int, int],
    origin: tuple[float, float] = (0.0, 0.0),
    supersample: int = Config.CLIP_SUPERSAMPLE,
) -> Image.Image:
    """Rasterize a path into an anti-aliased ``L`` mask.

    Args:
        path: Outline in target coordinates.
        size: Mask (width, height).
        origin: Target coordinate of the mask's top-left pixel.
        supersample: Linear oversampling factor used for edge coverage.

    Returns:
        Mask where 255 is inside the path.
    """
    w, h = size
    ss = max(1, supersample)
    big = Image.new("L", (w * ss, h * ss), 0)
    ox, oy = origin
    polygon = [((px - ox) * ss, (py - oy) * ss) for px, py in path.points()]
    ImageDraw.Draw(big).polygon(polygon, fill=255)
    if ss == 1:
        return big
    return big.resize(size, Image.Resampling.BOX)
