"""Global configuration for ShotFrame."""

from __future__ import annotations

from PIL import Image


class Config:
    """Global configuration."""

    # Preview surface bounds (interactive display)
    PREVIEW_MAX_WIDTH = 460
    PREVIEW_MAX_HEIGHT = 300

    # Longer side of the logical canvas for explicit aspect ratios
    RATIO_BASE_SIZE = 1000

    # Editor defaults
    DEFAULT_PADDING = 20
    DEFAULT_BORDER_RADIUS = 0
    DEFAULT_BACKGROUND = "#f3f4f6"
    DEFAULT_ASPECT = "original"
    DEFAULT_MARK_RADIUS = 20

    # Input limits
    MAX_PADDING = 1000
    MAX_MARK_RADIUS = 2000
    MAX_BORDER_RADIUS = 100

    # Gradient
    DEFAULT_GRADIENT_ANGLE = 135.0

    # Redaction blur strength (3x3 box blur passes)
    PREVIEW_BLUR_ITERATIONS = 3
    EXPORT_BLUR_ITERATIONS = 8

    # Rounded-corner clipping
    CLIP_SUPERSAMPLE = 4
    CORNER_SEGMENTS = 16

    # Quality
    RESIZE_QUALITY = Image.Resampling.LANCZOS
    GAMMA = 2.2

    # Export
    EXPORT_FORMAT = "PNG"
    EXPORT_PREFIX = "screenshot-edited"
