"""Input parsers for ShotFrame."""

from __future__ import annotations

from .descriptors import parse_aspect, parse_background, parse_color, parse_gradient
from .image_parser import ImageParser, get_parser

__all__ = [
    "ImageParser",
    "get_parser",
    "parse_aspect",
    "parse_background",
    "parse_color",
    "parse_gradient",
]
