"""Input validation for ShotFrame."""

from __future__ import annotations

from pathlib import Path

from .config import Config
from .constants import SUPPORTED_EXTENSIONS
from .exceptions import ValidationError


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    return int(value)


def validate_padding(padding: int) -> int:
    """Validate padding in logical pixels.

    Raises:
        ValidationError: If padding is negative or above the maximum.
    """
    padding = _require_int("Padding", padding)
    if padding < 0:
        raise ValidationError(f"Padding must be non-negative, got {padding}")
    if padding > Config.MAX_PADDING:
        raise ValidationError(
            f"Padding exceeds maximum {Config.MAX_PADDING}, got {padding}"
        )
    return padding


def validate_border_radius(radius_percent: int) -> int:
    """Validate border radius percentage (0..100)."""
    radius_percent = _require_int("Border radius", radius_percent)
    if not 0 <= radius_percent <= Config.MAX_BORDER_RADIUS:
        raise ValidationError(
            f"Border radius must be within 0-{Config.MAX_BORDER_RADIUS}%, got {radius_percent}"
        )
    return radius_percent


def validate_mark_radius(radius: int) -> int:
    """Validate redaction mark radius in logical pixels."""
    radius = _require_int("Mark radius", radius)
    if radius <= 0:
        raise ValidationError(f"Mark radius must be positive, got {radius}")
    if radius > Config.MAX_MARK_RADIUS:
        raise ValidationError(
            f"Mark radius exceeds maximum {Config.MAX_MARK_RADIUS}, got {radius}"
        )
    return radius


def validate_preview_bounds(max_width: int, max_height: int) -> None:
    """Validate preview surface bounds.

    Raises:
        ValidationError: If either bound is not positive.
    """
    if max_width <= 0 or max_height <= 0:
        raise ValidationError(
            f"Preview bounds must be positive, got {max_width}x{max_height}"
        )


def validate_file_path(path: str) -> None:
    """Validate input file exists and has supported extension.

    Args:
        path: Path to the input file.

    Raises:
        ValidationError: If file doesn't exist or format is unsupported.
    """
    p = Path(path)
    if not p.exists():
        raise ValidationError(f"File not found: {path}")
    if p.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValidationError(
            f"Unsupported format '{p.suffix}'. Allowed: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
