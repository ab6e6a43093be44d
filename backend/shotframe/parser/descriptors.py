"""Parsers for the string descriptors supplied by the UI shell.

Aspect ratios (``"original"`` or ``"W:H"``), colors and CSS-like
``linear-gradient(...)`` strings are turned into typed values once, at the
session boundary, so the renderer never re-matches strings.
"""

from __future__ import annotations

import logging
import re

from PIL import ImageColor

from ..config import Config
from ..exceptions import ValidationError
from ..models import (
    RGBA,
    AspectSpec,
    Background,
    Gradient,
    GradientStop,
    OriginalAspect,
    Ratio,
    Solid,
)

logger = logging.getLogger("shotframe.parser.descriptors")

_RATIO_RE = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")
_GRADIENT_RE = re.compile(r"linear-gradient\(([^)]+)\)", re.IGNORECASE)
_ANGLE_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*deg\s*$", re.IGNORECASE)
_STOP_RE = re.compile(r"(#[a-fA-F0-9]{6}|#[a-fA-F0-9]{3}|\w+)\s+(\d+)%")


def parse_aspect(value: str) -> AspectSpec:
    """Parse ``"original"`` or ``"W:H"`` into an aspect spec.

    Raises:
        ValidationError: If the string is neither form or a term is zero.
    """
    if value is None or value.strip().lower() == "original":
        return OriginalAspect()

    match = _RATIO_RE.match(value)
    if not match:
        raise ValidationError(f"Invalid aspect ratio '{value}', expected 'W:H'")
    return Ratio(int(match.group(1)), int(match.group(2)))


def parse_color(value: str) -> RGBA:
    """Parse any Pillow color string into an RGBA tuple.

    Raises:
        ValidationError: If Pillow does not recognise the color.
    """
    try:
        return ImageColor.getcolor(value.strip(), "RGBA")
    except (ValueError, AttributeError) as e:
        raise ValidationError(f"Unknown color '{value}'") from e


def _parse_stop(part: str) -> GradientStop | None:
    match = _STOP_RE.match(part)
    if not match:
        return None
    try:
        color = ImageColor.getcolor(match.group(1), "RGBA")
    except ValueError:
        return None
    position = min(1.0, int(match.group(2)) / 100)
    return GradientStop(color=color, position=position)


def parse_gradient(descriptor: str) -> Gradient | None:
    """Parse a ``linear-gradient(<angle>deg, <color> <pos>%, ...)`` string.

    Parsing is lenient: an absent or unreadable angle falls back to
    ``Config.DEFAULT_GRADIENT_ANGLE`` and stops that are not
    ``<color> <integer>%`` are skipped.

    Returns:
        The gradient, or None if the string is not a linear-gradient at all.
    """
    match = _GRADIENT_RE.search(descriptor or "")
    if not match:
        return None

    parts = [p.strip() for p in match.group(1).split(",")]
    angle = Config.DEFAULT_GRADIENT_ANGLE

    angle_match = _ANGLE_RE.match(parts[0])
    if angle_match:
        angle = float(angle_match.group(1))
        parts = parts[1:]
    elif "deg" in parts[0].lower():
        # Something like "abcdeg": keep the default angle, not a stop either
        logger.debug("Unreadable gradient angle '%s', using %.0f", parts[0], angle)
        parts = parts[1:]

    stops: list[GradientStop] = []
    for part in parts:
        stop = _parse_stop(part) if "%" in part else None
        if stop is None:
            logger.debug("Skipping gradient stop '%s'", part)
            continue
        stops.append(stop)

    return Gradient(angle=angle, stops=tuple(stops))


def parse_background(value: str) -> Background:
    """Parse a background selection into a typed background.

    Gradient strings go through ``parse_gradient``; one that cannot be read
    becomes an empty gradient, which leaves the surface untouched when
    filled. Anything else must be a color.

    Raises:
        ValidationError: If a solid color is not recognised.
    """
    text = (value or "").strip()
    if "gradient" in text.lower():
        gradient = parse_gradient(text)
        if gradient is None:
            logger.warning("Unparseable gradient '%s', background fill disabled", text)
            return Gradient(angle=Config.DEFAULT_GRADIENT_ANGLE)
        return gradient

    return Solid(parse_color(text))
