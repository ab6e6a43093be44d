"""Redaction marks: the mark store and blur-based application."""

from __future__ import annotations

import logging
import math

import numpy as np
from PIL import Image

from ..models import RedactionMark
from .blur import box_blur

logger = logging.getLogger("shotframe.composition.redaction")


class RedactionStore:
    """Ordered list of redaction marks in logical units.

    Marks are normalized when placed, so the store never depends on which
    surface is currently displayed. Later marks are applied last.
    """

    def __init__(self) -> None:
        self._marks: list[RedactionMark] = []

    def place_mark(self, x: float, y: float, radius: float) -> RedactionMark:
        mark = RedactionMark(center_x=float(x), center_y=float(y), radius=float(radius))
        self._marks.append(mark)
        logger.debug("Placed mark #%d at (%.1f, %.1f) r=%.1f", len(self._marks), x, y, radius)
        return mark

    def place_mark_from_preview(
        self, x: float, y: float, radius: float, preview_to_logical: float
    ) -> RedactionMark:
        """Place a mark clicked on the preview surface.

        Args:
            x: Click x in preview pixels.
            y: Click y in preview pixels.
            radius: Mark radius, already in logical units.
            preview_to_logical: Logical canvas width / preview canvas width.
        """
        return self.place_mark(x * preview_to_logical, y * preview_to_logical, radius)

    def clear(self) -> None:
        self._marks.clear()

    @property
    def marks(self) -> tuple[RedactionMark, ...]:
        return tuple(self._marks)

    def __len__(self) -> int:
        return len(self._marks)

    def __iter__(self):
        return iter(self.marks)


def mark_bounds(
    cx: float, cy: float, radius: float, size: tuple[int, int], margin: int = 0
) -> tuple[int, int, int, int] | None:
    """Bounding square of a circle grown by ``margin`` and clamped to a surface.

    Returns None if the circle itself does not touch the surface.
    """
    width, height = size
    left, top = math.floor(cx - radius), math.floor(cy - radius)
    right, bottom = math.ceil(cx + radius), math.ceil(cy + radius)
    if min(width, right) <= max(0, left) or min(height, bottom) <= max(0, top):
        return None
    return (
        max(0, left - margin),
        max(0, top - margin),
        min(width, right + margin),
        min(height, bottom + margin),
    )


def circle_mask(
    box: tuple[int, int, int, int], cx: float, cy: float, radius: float
) -> np.ndarray:
    """Boolean mask of pixels in ``box`` whose centers lie strictly inside the circle."""
    left, top, right, bottom = box
    xs = np.arange(left, right, dtype=np.float64) + 0.5 - cx
    ys = np.arange(top, bottom, dtype=np.float64) + 0.5 - cy
    return xs[None, :] ** 2 + ys[:, None] ** 2 < radius * radius


def apply_mark(
    pixels: np.ndarray, mark: RedactionMark, scale: float, iterations: int
) -> bool:
    """Blur one mark in place on an (height, width, 4) array.

    Returns:
        False if the mark does not touch the surface.
    """
    cx, cy, radius = mark.scaled(scale)
    height, width = pixels.shape[:2]
    # Grown by one so in-circle pixels sit inside the blurred interior
    box = mark_bounds(cx, cy, radius, (width, height), margin=1)
    if box is None or radius <= 0:
        return False

    left, top, right, bottom = box
    region = pixels[top:bottom, left:right]
    blurred = box_blur(region, iterations)
    inside = circle_mask(box, cx, cy, radius)
    region[inside] = blurred[inside]
    return True


def apply_marks(
    canvas: Image.Image,
    marks: tuple[RedactionMark, ...] | list[RedactionMark],
    scale: float,
    iterations: int,
) -> tuple[Image.Image, int]:
    """Apply every mark, in order, to a copy of the canvas.

    Args:
        canvas: RGBA surface.
        marks: Marks in logical units.
        scale: Logical to target pixel factor.
        iterations: Box blur passes per mark.

    Returns:
        (new canvas, number of marks that fell outside the surface).
    """
    if not marks:
        return canvas, 0

    pixels = np.array(canvas.convert("RGBA"))
    skipped = 0
    for mark in marks:
        if not apply_mark(pixels, mark, scale, iterations):
            skipped += 1
            logger.debug("Mark at (%.1f, %.1f) is outside the surface", mark.center_x, mark.center_y)

    return Image.fromarray(pixels), skipped
